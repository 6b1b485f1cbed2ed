import logging
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import requests

from lock_config import Settings

log = logging.getLogger("thread-lock")

GRAPH_API_BASE = "https://graph.facebook.com"


@dataclass(frozen=True)
class EnforcementResult:
    ok: bool
    payload: Any = None
    reason: Optional[str] = None


def thread_endpoint(thread_id: str, settings: Settings) -> str:
    return f"{GRAPH_API_BASE}/{settings.graph_api_version}/{quote(thread_id, safe='')}"


def _response_body(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _error_detail(exc: requests.RequestException) -> Any:
    resp = exc.response
    if resp is not None:
        body = _response_body(resp)
        if body:
            return body
    return str(exc) or exc.__class__.__name__


def enforce_thread_name(thread_id: str, name: str, settings: Settings) -> EnforcementResult:
    """Set the thread (or Workplace group) name back via the Graph API.

    Failures are logged and returned, never raised.
    """
    if not settings.access_token:
        log.error("No WORKPLACE_PAGE_ACCESS_TOKEN set. Cannot set thread name.")
        return EnforcementResult(ok=False, reason="missing access token")

    endpoint = thread_endpoint(thread_id, settings)
    log.info("Calling Graph API to set name %r on %s", name, endpoint)
    try:
        resp = requests.post(
            endpoint,
            params={"access_token": settings.access_token, "name": name},
        )
        resp.raise_for_status()
    except requests.RequestException as e:
        detail = _error_detail(e)
        log.error("Failed to set thread name: %s", detail)
        return EnforcementResult(ok=False, reason=str(detail))

    payload = _response_body(resp)
    log.info("Graph API response: %s", payload)
    return EnforcementResult(ok=True, payload=payload)
