import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from errors import ConfigError

load_dotenv()

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"


class Settings(BaseModel):
    """Process-wide configuration, read once at startup."""

    model_config = ConfigDict(frozen=True)

    discord_token: str
    target_url: str
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = "INFO"


def _require(environ, name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise ConfigError(f"Expected {name} in the environment")
    return value


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be a number, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")
    return port


def load_settings(environ=None) -> Settings:
    """Build Settings from the environment (or the given mapping)."""
    if environ is None:
        environ = os.environ
    return Settings(
        discord_token=_require(environ, "DISCORD_TOKEN"),
        target_url=_require(environ, "TARGET_URL"),
        port=_parse_port(environ.get("PORT", "").strip() or str(DEFAULT_PORT)),
        host=environ.get("HOST", "").strip() or DEFAULT_HOST,
        log_level=(environ.get("LOG_LEVEL", "").strip() or "INFO").upper(),
    )
