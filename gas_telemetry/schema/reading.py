from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime
from gas_telemetry.models.reading import SensorType


class ReadingCreate(BaseModel):
    node: SensorType
    mq135: int
    mq2: int
    r1: int = 0
    r2: int = 0


class ReadingResponse(BaseModel):
    id: str
    node: SensorType = Field(serialization_alias="type")
    mq135: int
    mq2: int
    r1: int
    r2: int
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    class Config:
        from_attributes = True  # Enable ORM compatibility


class IngestResponse(BaseModel):
    message: str
    sensor: ReadingResponse


class ReadingListResponse(BaseModel):
    sensors: List[ReadingResponse]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Union[str, List[str]]] = None
    hint: Optional[str] = None
    code: Optional[str] = None
