from .reading import ReadingModel, SensorType

__all__ = ["ReadingModel", "SensorType"]
