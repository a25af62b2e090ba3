import os
from functools import lru_cache
from string import Template
from typing import Optional

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG_FILE = "config.yaml"


def to_async_url(url: str) -> str:
    """Point plain postgres URLs at the asyncpg driver."""
    for scheme in ("postgresql://", "postgres://"):
        if url.startswith(scheme):
            return "postgresql+asyncpg://" + url[len(scheme):]
    return url


class Config:
    """Settings from an optional YAML file with ``${VAR}`` substitution.

    Anything the file leaves out falls back to environment variables and then
    to local development defaults.
    """

    def __init__(self, filepath: Optional[str] = None):
        load_dotenv()
        filepath = filepath or os.getenv("CONFIG_FILE_PATH", DEFAULT_CONFIG_FILE)
        self.__data = {}

        if os.path.isfile(filepath):
            with open(filepath, "r") as f:
                try:
                    content = Template(f.read()).substitute(os.environ)
                except KeyError as e:
                    raise ValueError(f"Configuration references unset variable {e}") from e

            if not content.strip():
                raise ValueError("Configuration file is empty or not properly formatted.")

            try:
                data = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ValueError(f"Configuration file is not valid YAML: {e}") from e
            if not isinstance(data, dict):
                raise ValueError("Configuration file is empty or not properly formatted.")
            self.__data = data

    def _section(self, name):
        return self.__data.get(name) or {}

    @property
    def database(self):
        section = self._section("database")
        url = section.get("url") or os.getenv("DATABASE_URL")
        if not url:
            db_name = section.get("name", os.getenv("ORCH_DB_NAME", "gas_telemetry"))
            db_user = section.get("user", os.getenv("ORCH_DB_USER", "postgres"))
            db_host = section.get("host", os.getenv("ORCH_DB_HOST", "localhost"))
            db_pass = section.get("password", os.getenv("ORCH_DB_PASS", "postgres"))
            db_port = section.get("port", os.getenv("POSTGRES_PORT", 5432))
            url = f"postgresql+asyncpg://{db_user}:{db_pass}@{db_host}:{db_port}/{db_name}"

        return {
            "url": to_async_url(url),
            "pool_size": int(section.get("pool_size", 20)),
            "max_overflow": int(section.get("max_overflow", 0)),
            "pool_timeout": float(section.get("pool_timeout", 2)),
            "pool_recycle": int(section.get("pool_recycle", 30)),
            "echo": bool(section.get("echo", False)),
            "create_tables": bool(section.get("create_tables", True)),
        }

    @property
    def api(self):
        section = self._section("api")
        origins = section.get("cors_origins", ["*"])
        if isinstance(origins, str):
            origins = [o.strip() for o in origins.split(",") if o.strip()]
        return {
            "cors_origins": origins,
            "log_dir": section.get("log_dir", os.getenv("LOG_DIR")),
        }

    @property
    def poller(self):
        section = self._section("poller")
        return {
            "base_url": section.get("base_url", os.getenv("STATUS_API_URL", "http://localhost:8000")).rstrip("/"),
            "interval": float(section.get("interval", 5.0)),
        }


@lru_cache(maxsize=1)
def get_config() -> Config:
    return Config()
