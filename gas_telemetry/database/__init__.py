from .connection import Base, dispose_engine, get_db_async, get_engine, init_db

__all__ = [
    "Base",
    "dispose_engine",
    "get_db_async",
    "get_engine",
    "init_db",
]
