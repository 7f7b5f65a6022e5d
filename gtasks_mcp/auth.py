"""OAuth sign-in and saved credentials for the Google Tasks API."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from gtasks_mcp.errors import ConfigError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/tasks"]

# Keys google-auth needs to refresh a token on its own
_REFRESH_KEYS = ("refresh_token", "client_id", "client_secret")


def _read_credentials_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(
            f"Credentials not found at {path}. "
            "Run 'gtasks-mcp auth' or set GTASKS_ACCESS_TOKEN or GTASKS_CREDENTIALS_PATH."
        )
    try:
        info = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read credentials file {path}: {e}") from e
    if not isinstance(info, dict):
        raise ConfigError(f"Could not read credentials file {path}: expected a JSON object")
    return info


def _expiry_from_millis(value: Any) -> datetime | None:
    if not value:
        return None
    # google-auth compares expiry as naive UTC
    return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc).replace(tzinfo=None)


def load_credentials(path: Path) -> Credentials:
    """
    Load saved OAuth credentials from disk.

    Two layouts are understood: the authorized-user JSON written by
    ``gtasks-mcp auth`` (``token``, ``refresh_token``, ``client_id``, ...) and
    a bare token file with ``access_token`` and an ``expiry_date`` in epoch
    milliseconds. Only the first can be refreshed.

    Raises:
        ConfigError: If the file is missing, unreadable or holds no token
    """
    info = _read_credentials_file(path)

    if all(info.get(key) for key in _REFRESH_KEYS):
        try:
            return Credentials.from_authorized_user_info(info, SCOPES)
        except ValueError as e:
            raise ConfigError(f"Could not read credentials file {path}: {e}") from e

    token = info.get("token") or info.get("access_token")
    if not token:
        raise ConfigError(f"Credentials file {path} has no access token")
    return Credentials(
        token=str(token),
        refresh_token=info.get("refresh_token"),
        expiry=_expiry_from_millis(info.get("expiry_date")),
    )


def save_credentials(credentials: Credentials, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(credentials.to_json(), encoding="utf-8")
    path.chmod(0o600)


def fresh_access_token(path: Path) -> str:
    """
    Return a usable access token from the credentials file at ``path``.

    An expired token is refreshed and written back when the file carries a
    refresh token and client secrets. Otherwise the stored token is returned
    as is and the API will reject it if it has lapsed.

    Raises:
        ConfigError: If no token can be loaded or the refresh fails
    """
    credentials = load_credentials(path)

    if not credentials.valid:
        if credentials.refresh_token and credentials.client_id and credentials.client_secret:
            logger.info("Refreshing Google access token from %s", path)
            try:
                credentials.refresh(Request())
            except GoogleAuthError as e:
                raise ConfigError(f"Could not refresh access token from {path}: {e}") from e
            save_credentials(credentials, path)
        else:
            logger.warning("Access token in %s has expired; run 'gtasks-mcp auth' to sign in again", path)

    if not credentials.token:
        raise ConfigError(f"Credentials file {path} has no access token")
    return credentials.token


def authenticate_and_save(keys_path: Path, credentials_path: Path, port: int = 0) -> Credentials:
    """
    Run the installed-app OAuth flow in the browser and save the result.

    Args:
        keys_path: OAuth client keys downloaded from the Google Cloud console
        credentials_path: Where the signed-in credentials are written
        port: Local redirect port; 0 picks a free one

    Raises:
        ConfigError: If the client keys file does not exist
    """
    if not keys_path.exists():
        raise ConfigError(
            f"OAuth client keys not found at {keys_path}. "
            "Download them from the Google Cloud console or set GTASKS_OAUTH_KEYS_PATH."
        )

    flow = InstalledAppFlow.from_client_secrets_file(str(keys_path), scopes=SCOPES)
    credentials = flow.run_local_server(port=port)
    save_credentials(credentials, credentials_path)
    logger.info("Saved Google credentials to %s", credentials_path)
    return credentials
