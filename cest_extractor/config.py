"""Application configuration loaded from environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    document_path: str = Field(
        default="anexo-i.pdf", description="Annex I PDF read by the CLI and API."
    )
    page_fetch_workers: int = Field(default=8, ge=1)
    json_indent: int = 2

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def document_path_obj(self) -> Path:
        return Path(self.document_path)


settings = Settings()
