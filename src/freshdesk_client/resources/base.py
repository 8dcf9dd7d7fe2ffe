"""Freshdesk client — endpoint descriptions.

An :class:`Endpoint` is one row of the API surface: verb, path template and
how the caller's inputs map onto path, query string and body.
"""
from dataclasses import dataclass, field
from string import Formatter
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from ..http_client import METHODS


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: str
    path: str
    # positional arguments that go to the query string instead of the path
    query_args: Tuple[str, ...] = ()
    # None passes caller params through, a tuple keeps only those keys
    query_keys: Optional[Tuple[str, ...]] = ()
    body: bool = False
    defaults: Mapping[str, Any] = field(default_factory=dict)
    quote_query: bool = False
    doc: str = ""

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"{self.name}: unsupported method '{self.method}'")

    @property
    def path_fields(self) -> Tuple[str, ...]:
        return tuple(name for _, name, _, _ in Formatter().parse(self.path) if name)

    @property
    def arg_names(self) -> Tuple[str, ...]:
        """Positional argument names, in call order."""
        names = self.path_fields + self.query_args
        if self.body:
            names += ("data",)
        return names

    @property
    def accepts_params(self) -> bool:
        return self.query_keys is None or bool(self.query_keys)

    def format_path(self, values: Mapping[str, Any]) -> str:
        return self.path.format(**{k: quote(str(values[k]), safe="") for k in self.path_fields})

    def build_params(self, values: Mapping[str, Any],
                     params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Merge defaults, caller params and positional query arguments."""
        if params and not self.accepts_params:
            raise TypeError(f"{self.name}() takes no query parameters")

        query: Dict[str, Any] = dict(self.defaults)
        if params:
            if self.query_keys is None:
                query.update(params)
            else:
                query.update({k: v for k, v in params.items() if k in self.query_keys})
        for name in self.query_args:
            value = values[name]
            if self.quote_query and name == "query":
                value = f'"{value}"'
            query[name] = value
        return query or None


def get(name: str, path: str, **kwargs: Any) -> Endpoint:
    return Endpoint(name, "GET", path, **kwargs)


def post(name: str, path: str, **kwargs: Any) -> Endpoint:
    return Endpoint(name, "POST", path, body=True, **kwargs)


def put(name: str, path: str, **kwargs: Any) -> Endpoint:
    kwargs.setdefault("body", True)
    return Endpoint(name, "PUT", path, **kwargs)


def delete(name: str, path: str, **kwargs: Any) -> Endpoint:
    return Endpoint(name, "DELETE", path, **kwargs)
