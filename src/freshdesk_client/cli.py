"""Freshdesk client — command-line entry-point.

Calls a single API operation and prints the JSON result.

Usage:
    freshdesk --list                                  # show available operations
    freshdesk get_ticket 42
    freshdesk list_all_tickets --param company_id=7
    freshdesk update_ticket 42 --data '{"status": 5}'

Credentials come from --base-url/--api-key, or FRESHDESK_BASE_URL and
FRESHDESK_APIKEY (a ``.env`` file is honoured).
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .client import Freshdesk
from .config import FRESHDESK_APIKEY, FRESHDESK_BASE_URL, configure_logging
from .http_client import FreshdeskError
from .resources import ENDPOINTS, RESOURCE_REGISTRY

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_API_ERROR = 1
EXIT_USAGE = 2


def _parse_params(pairs: Optional[List[str]]) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid --param '{pair}', expected KEY=VALUE")
        params[key] = value
    return params


def _print_operations() -> None:
    for group, endpoints in RESOURCE_REGISTRY.items():
        print(f"{group}:")
        for endpoint in endpoints:
            args = " ".join(f"<{name}>" for name in endpoint.arg_names)
            print(f"  {endpoint.name} {args}".rstrip())


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freshdesk",
        description="Freshdesk API v2 command-line client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Run with --list to see the available operations.",
    )
    parser.add_argument("operation", nargs="?", help="Operation name, e.g. get_ticket")
    parser.add_argument("args", nargs="*", metavar="ARG",
                        help="Positional arguments of the operation (ids, query, ...)")
    parser.add_argument("--list", action="store_true", help="List operations and exit")
    parser.add_argument("--base-url", help="Helpdesk URL (default: $FRESHDESK_BASE_URL)")
    parser.add_argument("--api-key", help="API key (default: $FRESHDESK_APIKEY)")
    parser.add_argument("--param", action="append", metavar="KEY=VALUE",
                        help="Query parameter, may be repeated")
    parser.add_argument("--data", metavar="JSON", help="JSON request body")
    parser.add_argument("--log-level", help="Logging level (default: $FRESHDESK_LOG_LEVEL or WARNING)")
    return parser


async def _call(client: Freshdesk, operation: str, args: List[Any],
                params: Dict[str, str]) -> Any:
    return await getattr(client, operation)(*args, params=params or None)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        log.error("%s", e)
        return EXIT_USAGE

    if args.list:
        _print_operations()
        return EXIT_OK

    if not args.operation:
        parser.print_usage(sys.stderr)
        log.error("No operation given")
        return EXIT_USAGE

    endpoint = ENDPOINTS.get(args.operation)
    if endpoint is None:
        log.error("Unknown operation '%s' (see --list)", args.operation)
        return EXIT_USAGE

    base_url = args.base_url or FRESHDESK_BASE_URL
    api_key = args.api_key or FRESHDESK_APIKEY
    if not base_url or not api_key:
        log.error("Missing credentials: set FRESHDESK_BASE_URL and FRESHDESK_APIKEY "
                  "or pass --base-url/--api-key")
        return EXIT_USAGE

    try:
        params = _parse_params(args.param)
        call_args: List[Any] = list(args.args)
        if endpoint.body:
            if args.data is None:
                raise ValueError(f"{endpoint.name} requires --data")
            call_args.append(json.loads(args.data))
        elif args.data is not None:
            raise ValueError(f"{endpoint.name} takes no request body")
        if len(call_args) != len(endpoint.arg_names):
            expected = " ".join(f"<{name}>" for name in endpoint.arg_names if name != "data")
            raise ValueError(f"Usage: freshdesk {endpoint.name} {expected}".rstrip())
        if params and not endpoint.accepts_params:
            raise ValueError(f"{endpoint.name} takes no query parameters")
    except ValueError as e:
        log.error("%s", e)
        return EXIT_USAGE

    client = Freshdesk(base_url, api_key)
    try:
        result = asyncio.run(_call(client, endpoint.name, call_args, params))
    except FreshdeskError as e:
        status = f" ({e.status_code})" if e.status_code is not None else ""
        print(f"Error{status}: {e.message}", file=sys.stderr)
        return EXIT_API_ERROR

    if result is not None:
        print(json.dumps(result, indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
