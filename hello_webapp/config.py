from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hello_webapp.exceptions import ConfigurationException, ErrorCode
from hello_webapp.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # hello-webapp/

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default, so the app starts without a .env file.
    Values come from environment variables or the project's .env file.
    """

    # API server settings
    api_host: str = Field(min_length=1, default="127.0.0.1", description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8080, description="API server port")

    # Greeting page settings
    server_info: str = Field(default="", description="Server info shown on the greeting page (empty = computed)")
    escape_html: bool = Field(default=True, description="HTML-escape values interpolated into the greeting page")

    # Logging settings
    log_level: str = Field(default="INFO", description="Root and console log level (DEBUG ... CRITICAL)")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the rotating JSON log file")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("server_info", mode="after")
    @classmethod
    def validate_server_info(cls, v: str) -> str:
        return v.strip()

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationException: If the environment holds invalid values

    Example:
        @router.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"host": settings.api_host}
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            log_with_context(
                logger,
                "error",
                "Invalid configuration",
                error_count=e.error_count(),
                fields=[".".join(str(loc) for loc in err["loc"]) for err in e.errors()],
                event_type="config_invalid",
            )
            raise ConfigurationException(
                "Invalid configuration",
                code=ErrorCode.CONFIG_INVALID,
                details={"errors": [err["msg"] for err in e.errors()]},
            ) from e
    return _settings_instance
