import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_LOCKED_NAME = "Locked Group"
DEFAULT_PORT = 3000
DEFAULT_GRAPH_API_VERSION = "v17.0"


@dataclass(frozen=True)
class Settings:
    verify_token: Optional[str] = None
    access_token: Optional[str] = None
    locked_name: str = DEFAULT_LOCKED_NAME
    port: int = DEFAULT_PORT
    graph_api_version: str = DEFAULT_GRAPH_API_VERSION
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (a .env file is read first when environ is not given)."""
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        verify_token=environ.get("VERIFY_TOKEN") or None,
        access_token=environ.get("WORKPLACE_PAGE_ACCESS_TOKEN") or None,
        locked_name=environ.get("LOCKED_THREAD_NAME") or DEFAULT_LOCKED_NAME,
        port=int(environ.get("PORT") or DEFAULT_PORT),
        graph_api_version=environ.get("GRAPH_API_VERSION") or DEFAULT_GRAPH_API_VERSION,
        log_level=(environ.get("LOG_LEVEL") or "INFO").upper(),
    )
