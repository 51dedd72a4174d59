from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content store, relative to the working directory
    CONTENT_DIR: str = "content"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Branding
    PORTAL_TITLE: str = "Support Portal"
    ORG_NAME: str = "Welford IAG"

    # Pixels a heading may sit below the viewport top and still count as active
    SCROLL_LOOKAHEAD: int = 120

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
