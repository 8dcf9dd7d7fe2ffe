"""Freshdesk client — Shared HTTP request executor.

Every endpoint method funnels through :func:`execute`, which performs a
single authenticated exchange and folds the result into an
:class:`Outcome`.  Nothing here retries, caches or paginates.
"""
import base64
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import httpx

log = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "DELETE")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FreshdeskError(Exception):
    """A failed Freshdesk call.

    ``status_code`` is set only when the server actually answered.
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"


class FreshdeskAPIError(FreshdeskError):
    """The server answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, details: Any = None) -> None:
        super().__init__(message, status_code=status_code, details=details)


class FreshdeskTransportError(FreshdeskError):
    """No usable response: connection, DNS or timeout failure, or a success body that is not JSON."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, status_code=None, details=details)


# ---------------------------------------------------------------------------
# Request / outcome types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    url: str
    query: Optional[Mapping[str, Any]] = None
    body: Any = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method '{self.method}'. Valid: {', '.join(METHODS)}")
        object.__setattr__(self, "method", method)


@dataclass(frozen=True)
class Outcome:
    """Result of one exchange: either ``value`` (with ``status``) or ``error``."""

    value: Any = None
    status: Optional[int] = None
    error: Optional[FreshdeskError] = field(default=None)

    @classmethod
    def success(cls, value: Any, status: int) -> "Outcome":
        return cls(value=value, status=status)

    @classmethod
    def failure(cls, error: FreshdeskError) -> "Outcome":
        return cls(status=error.status_code, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the parsed value, or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def auth_header(api_key: str) -> str:
    """Return the Basic-auth header value (API key as user, ``X`` as password)."""
    return f"Basic {base64.b64encode(f'{api_key}:X'.encode()).decode()}"


def _query_value(value: Any) -> Any:
    # naive datetimes are sent as given; aware ones are normalised to UTC
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def build_query(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Serialise query parameters, skipping keys whose value is ``None``."""
    if not params:
        return None
    query = {key: _query_value(value) for key, value in params.items() if value is not None}
    return query or None


def _error_message(response: httpx.Response, details: Any) -> str:
    if isinstance(details, dict):
        for key in ("message", "description"):
            if isinstance(details.get(key), str) and details[key]:
                return details[key]
    return f"{response.status_code} {response.reason_phrase}".strip()


def _api_error(response: httpx.Response) -> FreshdeskAPIError:
    try:
        details = response.json() if response.content.strip() else None
    except ValueError:
        details = response.text
    return FreshdeskAPIError(_error_message(response, details), response.status_code, details)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


# ---------------------------------------------------------------------------
# Executor
# ---------------------------------------------------------------------------

async def execute(request: RequestDescriptor, auth: str,
                  transport: Optional[httpx.AsyncBaseTransport] = None) -> Outcome:
    """Perform *request* once and normalise its result.

    Failures are returned inside the :class:`Outcome`, never raised.
    """
    headers = {"Authorization": auth}
    if request.body is not None:
        headers["Content-Type"] = "application/json"

    log.debug("%s %s", request.method, request.url)
    try:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.request(
                request.method,
                request.url,
                params=build_query(request.query),
                json=request.body,
                headers=headers,
            )
    except (httpx.RequestError, httpx.InvalidURL) as e:
        log.debug("%s %s failed: %s", request.method, request.url, _describe(e))
        return Outcome.failure(FreshdeskTransportError(_describe(e)))

    log.debug("%s %s -> %s", request.method, request.url, response.status_code)

    if not response.is_success:
        return Outcome.failure(_api_error(response))

    if not response.content.strip():
        return Outcome.success(None, response.status_code)
    try:
        return Outcome.success(response.json(), response.status_code)
    except ValueError as e:
        return Outcome.failure(FreshdeskTransportError(_describe(e), details=response.text))
