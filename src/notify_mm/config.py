"""Configuration loaded from environment variables."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Action inputs and runtime switches."""

    model_config = SettingsConfigDict(frozen=True)

    mattermost_webhook_url: str
    mattermost_channel: str = ""
    mattermost_username: str = ""
    mattermost_icon_url: str = ""
    text: str = ""
    payload: str = ""
    payload_filename: str = ""
    github_context: str

    # PAYLOAD_FILENAME is resolved against this directory.
    payload_base_dir: Path = Path("..")
    log_level: str = "INFO"
    runner_debug: bool = False
    github_actions: bool = False

    @field_validator("mattermost_webhook_url", "github_context")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def legacy_payload_path(self) -> Path | None:
        """Location of the legacy payload file, if a filename was given."""
        if not self.payload_filename:
            return None
        return self.payload_base_dir / self.payload_filename
