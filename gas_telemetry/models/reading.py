import enum
import uuid
from sqlalchemy import TIMESTAMP, Column, Enum, Integer, String, func
from gas_telemetry.database.connection import Base


class SensorType(str, enum.Enum):
    NODE1 = "NODE1"
    NODE2 = "NODE2"
    NODE3 = "NODE3"


def _new_id():
    return uuid.uuid4().hex


class ReadingModel(Base):
    # Table, enum and column names are shared with the dashboard's existing database.
    __tablename__ = "Sensor"

    id = Column(String, primary_key=True, default=_new_id)
    node = Column("type", Enum(SensorType, name="SENSOR_TYPE"), nullable=False, index=True)
    mq135 = Column(Integer, nullable=False)
    mq2 = Column(Integer, nullable=False)
    r1 = Column(Integer, nullable=False, default=0)
    r2 = Column(Integer, nullable=False, default=0)
    created_at = Column("createdAt", TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column("updatedAt", TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
