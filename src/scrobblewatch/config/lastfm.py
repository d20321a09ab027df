"""Last.fm configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import get_env_var

LASTFM_BASE_URL = "https://ws.audioscrobbler.com/2.0/"
LASTFM_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class LastFmConfig:
    """Holds Last.fm API configuration values.

    ``custom_api_key`` is true when the key was supplied by the user. Sources polling
    with the shared key keep to a slower refresh cadence.
    """

    api_key: str
    user_name: str
    custom_api_key: bool = True
    base_url: str = LASTFM_BASE_URL
    timeout_seconds: float = LASTFM_TIMEOUT_SECONDS


def get_lastfm_config(
    *,
    user_name: str | None = None,
    api_key: str | None = None,
) -> LastFmConfig:
    """Build the Last.fm configuration from explicit overrides and the environment.

    A missing user key falls back to ``LASTFM_SHARED_API_KEY``. Neither a missing user
    name nor a missing key raises here: the source decides what an empty value means.
    """

    resolved_user = (user_name or "").strip() or get_env_var("LASTFM_USER_NAME")
    user_key = (api_key or "").strip() or get_env_var("LASTFM_API_KEY")
    if user_key:
        return LastFmConfig(api_key=user_key, user_name=resolved_user, custom_api_key=True)
    return LastFmConfig(
        api_key=get_env_var("LASTFM_SHARED_API_KEY"),
        user_name=resolved_user,
        custom_api_key=False,
    )
