"""Configuration for roster sync."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None


class RosterConfig(BaseModel):
    """Roster configuration with Pydantic validation."""

    # API client
    api_base_url: str = Field(default="http://localhost:5000")
    session_cookie: str | None = None
    session_cookie_name: str = Field(default="session")
    request_timeout: float = Field(default=10.0, gt=0)
    deadline_debounce_ms: int = Field(default=500, ge=0)

    # Storage paths
    data_dir: Path = Field(default=Path("data"))
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    store_filename: str = Field(default="roster.json")
    log_filename: str = Field(default="roster_sync.log")

    # Server
    secret_key: str = Field(default="dev_secret")
    server_host: str = Field(default="127.0.0.1")
    server_port: int = Field(default=5000, ge=1, le=65535)

    @property
    def store_path(self) -> Path:
        """Path to the JSON store used by the development server."""
        return self.data_dir / self.store_filename

    @property
    def deadline_debounce_seconds(self) -> float:
        return self.deadline_debounce_ms / 1000.0

    @classmethod
    def from_env(cls) -> "RosterConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv()

        config_dict = {}

        # API client
        if "ROSTER_API_URL" in os.environ:
            config_dict["api_base_url"] = os.environ["ROSTER_API_URL"].rstrip("/")
        if "ROSTER_SESSION_COOKIE" in os.environ:
            config_dict["session_cookie"] = os.environ["ROSTER_SESSION_COOKIE"]
        if "ROSTER_SESSION_COOKIE_NAME" in os.environ:
            config_dict["session_cookie_name"] = os.environ[
                "ROSTER_SESSION_COOKIE_NAME"
            ]
        if "ROSTER_REQUEST_TIMEOUT" in os.environ:
            try:
                config_dict["request_timeout"] = float(
                    os.environ["ROSTER_REQUEST_TIMEOUT"]
                )
            except ValueError:
                pass  # Keep default if invalid
        if "ROSTER_DEADLINE_DEBOUNCE_MS" in os.environ:
            try:
                config_dict["deadline_debounce_ms"] = int(
                    os.environ["ROSTER_DEADLINE_DEBOUNCE_MS"]
                )
            except ValueError:
                pass

        # Storage paths
        if "ROSTER_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["ROSTER_DATA_DIR"])
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "ROSTER_STORE_FILENAME" in os.environ:
            config_dict["store_filename"] = os.environ["ROSTER_STORE_FILENAME"]
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Server
        if "SESSION_SECRET" in os.environ:
            config_dict["secret_key"] = os.environ["SESSION_SECRET"]
        if "ROSTER_HOST" in os.environ:
            config_dict["server_host"] = os.environ["ROSTER_HOST"]
        if "ROSTER_PORT" in os.environ:
            try:
                config_dict["server_port"] = int(os.environ["ROSTER_PORT"])
            except ValueError:
                pass

        return cls(**config_dict)
