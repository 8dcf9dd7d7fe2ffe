"""Freshdesk client — the ``Freshdesk`` API class.

Every row of :data:`freshdesk_client.resources.ENDPOINTS` becomes an async
method here, e.g.::

    fd = Freshdesk("https://demo.freshdesk.com", "API_KEY")
    tickets = await fd.list_all_tickets(params={"company_id": 7})
    await fd.update_ticket(42, {"status": TicketStatus.CLOSED})
"""
import inspect
from typing import Any, Callable, Dict, List, Mapping, Optional

import httpx

from .config import API_PREFIX
from .http_client import RequestDescriptor, auth_header, execute
from .resources import ENDPOINTS, Endpoint


class Freshdesk:
    """Freshdesk API v2 client.

    Calls are independent: the only state is the base URL and the
    credential derived from *api_key*, both fixed at construction.
    *transport* is handed to each ``httpx.AsyncClient`` (tests use
    ``httpx.MockTransport``).
    """

    def __init__(self, base_url: str, api_key: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        if not api_key:
            raise ValueError("api_key is required")
        self.base_url = base_url.rstrip("/")
        self._auth = auth_header(api_key)
        self._transport = transport

    def __repr__(self) -> str:
        return f"Freshdesk({self.base_url!r})"

    def api_url(self, path: str) -> str:
        """Build a full Freshdesk API v2 URL."""
        return f"{self.base_url}/{API_PREFIX}/{path.lstrip('/')}"

    async def request(self, method: str, path: str,
                      params: Optional[Mapping[str, Any]] = None,
                      data: Any = None) -> Any:
        """Perform one call and return the parsed JSON (``None`` for empty bodies).

        Raises :class:`~freshdesk_client.http_client.FreshdeskError` on failure.
        """
        descriptor = RequestDescriptor(method, self.api_url(path), query=params, body=data)
        outcome = await execute(descriptor, self._auth, transport=self._transport)
        return outcome.unwrap()

    @staticmethod
    def endpoint_names() -> List[str]:
        return sorted(ENDPOINTS)


def _make_method(endpoint: Endpoint) -> Callable[..., Any]:
    arg_names = endpoint.arg_names
    sig = inspect.Signature(
        [inspect.Parameter("self", inspect.Parameter.POSITIONAL_OR_KEYWORD)]
        + [inspect.Parameter(name, inspect.Parameter.POSITIONAL_OR_KEYWORD) for name in arg_names]
        + [inspect.Parameter("params", inspect.Parameter.KEYWORD_ONLY, default=None)]
    )

    async def method(*args: Any, **kwargs: Any) -> Any:
        try:
            bound = sig.bind(*args, **kwargs)
        except TypeError as e:
            raise TypeError(f"{endpoint.name}() {e}") from None
        self: Freshdesk = bound.arguments["self"]
        values: Dict[str, Any] = {name: bound.arguments[name] for name in arg_names}
        return await self.request(
            endpoint.method,
            endpoint.format_path(values),
            params=endpoint.build_params(values, bound.arguments.get("params")),
            data=values.get("data"),
        )

    signature = ", ".join(arg_names)
    method.__signature__ = sig  # type: ignore[attr-defined]
    method.__name__ = endpoint.name
    method.__qualname__ = f"Freshdesk.{endpoint.name}"
    method.__doc__ = (
        f"{endpoint.doc or endpoint.name.replace('_', ' ').capitalize() + '.'}\n\n"
        f"``{endpoint.method} /{API_PREFIX}/{endpoint.path}``, arguments: ({signature})"
    )
    return method


for _endpoint in ENDPOINTS.values():
    if hasattr(Freshdesk, _endpoint.name):
        raise RuntimeError(f"Endpoint name '{_endpoint.name}' clashes with a Freshdesk attribute")
    setattr(Freshdesk, _endpoint.name, _make_method(_endpoint))
del _endpoint
