"""Environment-driven settings for Google Tasks MCP."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from gtasks_mcp.auth import fresh_access_token

DEFAULT_API_BASE_URL = "https://tasks.googleapis.com/tasks/v1"
DEFAULT_CREDENTIALS_PATH = Path.home() / ".gtasks-server-credentials.json"
DEFAULT_OAUTH_KEYS_PATH = Path.home() / "gcp-oauth.keys.json"
DEFAULT_LIST_ID = "@default"

# Page sizes used by the Google Tasks list calls
MAX_TASK_RESULTS = 100
RESOURCE_PAGE_SIZE = 10


class Settings(BaseModel):
    """Runtime settings, read once from the environment."""

    api_base_url: str = DEFAULT_API_BASE_URL
    credentials_path: Path = DEFAULT_CREDENTIALS_PATH
    oauth_keys_path: Path = DEFAULT_OAUTH_KEYS_PATH
    access_token: str | None = None
    timeout: float = Field(default=30.0, gt=0)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            api_base_url=os.environ.get("GTASKS_API_BASE_URL", DEFAULT_API_BASE_URL),
            credentials_path=Path(os.environ.get("GTASKS_CREDENTIALS_PATH", str(DEFAULT_CREDENTIALS_PATH))),
            oauth_keys_path=Path(os.environ.get("GTASKS_OAUTH_KEYS_PATH", str(DEFAULT_OAUTH_KEYS_PATH))),
            access_token=os.environ.get("GTASKS_ACCESS_TOKEN") or None,
            timeout=float(os.environ.get("GTASKS_TIMEOUT", "30")),
            log_level=os.environ.get("GTASKS_LOG_LEVEL", "WARNING").upper(),
        )

    def resolve_access_token(self) -> str:
        """
        Return the bearer token to send with API requests.

        GTASKS_ACCESS_TOKEN wins; otherwise the token comes from the saved
        OAuth credentials file, refreshed first if it has expired.

        Raises:
            ConfigError: If neither source yields a token
        """
        if self.access_token:
            return self.access_token
        return fresh_access_token(self.credentials_path)
