"""Library defaults and environment-driven settings."""

import os

from pydantic import BaseModel

DEFAULT_HTTP_TIMEOUT = 60 * 1000  # milliseconds
MAX_REDIRECTS = 10
SWAGGER_PATH = "/api/v2/docs/swagger"


class Settings(BaseModel):
    """Settings picked up from the environment by the CLI."""

    region: str | None = None
    http_timeout: int = DEFAULT_HTTP_TIMEOUT


def get_settings() -> Settings:
    """Build Settings from GC_REGION and GC_HTTP_TIMEOUT.

    Raises pydantic.ValidationError when GC_HTTP_TIMEOUT is not an integer.
    """
    values = {"region": os.getenv("GC_REGION") or None}
    timeout = os.getenv("GC_HTTP_TIMEOUT")
    if timeout:
        values["http_timeout"] = timeout
    return Settings(**values)
