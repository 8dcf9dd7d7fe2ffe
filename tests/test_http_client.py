"""Tests for the request executor: auth, query/body encoding, outcome mapping."""
import base64
from datetime import date, datetime, timedelta, timezone

import httpx
import pytest

from freshdesk_client.config import TicketPriority, TicketStatus
from freshdesk_client.http_client import (
    FreshdeskAPIError,
    FreshdeskError,
    FreshdeskTransportError,
    Outcome,
    RequestDescriptor,
    auth_header,
    build_query,
    execute,
)

from .conftest import API_KEY, BASE_URL

AUTH = auth_header(API_KEY)


def _url(path):
    return f"{BASE_URL}/api/v2/{path}"


def _only_one(outcome: Outcome) -> bool:
    return outcome.ok != (outcome.error is not None)


class TestAuthHeader:

    def test_basic_auth_with_placeholder_password(self):
        expected = base64.b64encode(b"abc123:X").decode()
        assert auth_header("abc123") == f"Basic {expected}"


class TestBuildQuery:

    def test_none_values_are_skipped(self):
        assert build_query({"company_id": "7", "email": None}) == {"company_id": "7"}

    def test_all_none_yields_no_query(self):
        assert build_query({"email": None}) is None
        assert build_query(None) is None
        assert build_query({}) is None

    def test_enums_send_their_value(self):
        assert build_query({"status": TicketStatus.OPEN, "priority": TicketPriority.URGENT}) == {
            "status": 2, "priority": 4,
        }

    def test_aware_datetimes_sent_as_utc(self):
        plus_two = timezone(timedelta(hours=2))
        query = build_query({"executed_after": datetime(2024, 1, 2, 5, 4, 5, tzinfo=plus_two)})
        assert query == {"executed_after": "2024-01-02T03:04:05Z"}

    def test_booleans_and_dates(self):
        query = build_query({
            "billable": False,
            "executed_after": datetime(2024, 1, 2, 3, 4, 5),
            "updated_since": date(2024, 5, 6),
            "page": 2,
        })
        assert query == {
            "billable": "false",
            "executed_after": "2024-01-02T03:04:05",
            "updated_since": "2024-05-06",
            "page": 2,
        }


class TestRequestDescriptor:

    def test_method_is_normalised(self):
        assert RequestDescriptor("get", _url("tickets")).method == "GET"

    def test_unknown_method_rejected(self):
        with pytest.raises(ValueError):
            RequestDescriptor("PATCH", _url("tickets"))


class TestExecute:

    @pytest.mark.asyncio
    async def test_get_with_query_returns_parsed_list(self, server):
        server.reply(200, json=[{"id": 1}])
        request = RequestDescriptor("GET", _url("tickets"), query={"company_id": "7"})

        outcome = await execute(request, AUTH, transport=server.transport)

        assert outcome.ok
        assert outcome.value == [{"id": 1}]
        assert outcome.status == 200
        sent = server.last
        assert sent.method == "GET"
        assert sent.url.path == "/api/v2/tickets"
        assert dict(sent.url.params) == {"company_id": "7"}

    @pytest.mark.asyncio
    async def test_absent_query_values_not_serialised(self, server):
        request = RequestDescriptor("GET", _url("contacts"),
                                    query={"email": "a@b.c", "phone": None, "state": None})

        await execute(request, AUTH, transport=server.transport)

        params = server.last.url.params
        assert params.get("email") == "a@b.c"
        assert "phone" not in params
        assert "state" not in params
        assert b"None" not in server.last.url.query

    @pytest.mark.asyncio
    async def test_authorization_header_on_every_call(self, server):
        for method in ("GET", "POST", "PUT", "DELETE"):
            body = {"x": 1} if method in ("POST", "PUT") else None
            await execute(RequestDescriptor(method, _url("tickets/1"), body=body), AUTH,
                          transport=server.transport)
        assert [r.headers["Authorization"] for r in server.requests] == [AUTH] * 4

    @pytest.mark.asyncio
    async def test_body_sent_as_json(self, server):
        await execute(RequestDescriptor("POST", _url("tickets"), body={"subject": "Help"}), AUTH,
                      transport=server.transport)

        assert server.last.headers["Content-Type"] == "application/json"
        assert server.last_json() == {"subject": "Help"}

    @pytest.mark.asyncio
    async def test_no_body_means_no_content(self, server):
        await execute(RequestDescriptor("GET", _url("tickets")), AUTH, transport=server.transport)

        assert server.last.content == b""
        assert "Content-Type" not in server.last.headers

    @pytest.mark.asyncio
    async def test_echo_round_trip(self, server):
        server.echo()
        body = {
            "subject": "Printer on fire",
            "priority": 4,
            "ratio": 0.5,
            "urgent": True,
            "cc_emails": ["a@example.com", "b@example.com"],
            "custom_fields": {"cf_floor": 3, "cf_building": {"name": "HQ", "open": False}},
            "note": None,
        }

        outcome = await execute(RequestDescriptor("POST", _url("tickets"), body=body), AUTH,
                                transport=server.transport)

        assert outcome.ok
        assert outcome.value == body

    @pytest.mark.asyncio
    async def test_empty_success_body_has_no_value(self, server):
        server.reply(204)

        outcome = await execute(RequestDescriptor("DELETE", _url("contacts/3")), AUTH,
                                transport=server.transport)

        assert outcome.ok
        assert outcome.value is None
        assert outcome.status == 204
        assert outcome.unwrap() is None

    @pytest.mark.asyncio
    async def test_whitespace_success_body_has_no_value(self, server):
        server.reply(200, content=b"  \n")

        outcome = await execute(RequestDescriptor("PUT", _url("tickets/1/restore")), AUTH,
                                transport=server.transport)

        assert outcome.ok
        assert outcome.value is None

    @pytest.mark.asyncio
    async def test_non_json_success_body_is_transport_error(self, server):
        server.reply(200, content=b"<html>maintenance</html>")

        outcome = await execute(RequestDescriptor("GET", _url("tickets")), AUTH,
                                transport=server.transport)

        assert not outcome.ok
        assert isinstance(outcome.error, FreshdeskTransportError)
        assert outcome.error.status_code is None
        assert outcome.error.message
        assert outcome.error.details == "<html>maintenance</html>"

    @pytest.mark.asyncio
    async def test_not_found_uses_body_message(self, server):
        server.reply(404, json={"message": "not found"})

        outcome = await execute(
            RequestDescriptor("PUT", _url("tickets/42"), body={"status": 5}), AUTH,
            transport=server.transport)

        assert isinstance(outcome.error, FreshdeskAPIError)
        assert outcome.error.status_code == 404
        assert outcome.error.message == "not found"
        assert outcome.status == 404
        assert outcome.value is None
        assert server.last_json() == {"status": 5}

    @pytest.mark.asyncio
    async def test_validation_error_uses_description_and_keeps_errors(self, server):
        errors = [{"field": "email", "message": "It should be a valid email address", "code": "invalid_value"}]
        server.reply(400, json={"description": "Validation failed", "errors": errors})

        outcome = await execute(RequestDescriptor("POST", _url("contacts"), body={"email": "x"}), AUTH,
                                transport=server.transport)

        assert outcome.error.status_code == 400
        assert outcome.error.message == "Validation failed"
        assert outcome.error.details["errors"] == errors

    @pytest.mark.asyncio
    async def test_error_without_body_gets_generic_message(self, server):
        server.reply(500)

        outcome = await execute(RequestDescriptor("GET", _url("tickets")), AUTH,
                                transport=server.transport)

        assert outcome.error.status_code == 500
        assert outcome.error.message == "500 Internal Server Error"
        assert outcome.error.details is None

    @pytest.mark.asyncio
    async def test_error_with_text_body_keeps_text(self, server):
        server.reply(502, content=b"Bad gateway upstream")

        outcome = await execute(RequestDescriptor("GET", _url("tickets")), AUTH,
                                transport=server.transport)

        assert outcome.error.status_code == 502
        assert outcome.error.message == "502 Bad Gateway"
        assert outcome.error.details == "Bad gateway upstream"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [301, 400, 401, 403, 404, 409, 429, 500, 503])
    async def test_non_2xx_carries_exact_status(self, server, status):
        server.reply(status, json={"code": "x"})

        outcome = await execute(RequestDescriptor("GET", _url("tickets")), AUTH,
                                transport=server.transport)

        assert isinstance(outcome.error, FreshdeskAPIError)
        assert outcome.error.status_code == status
        assert _only_one(outcome)

    @pytest.mark.asyncio
    async def test_connection_failure_is_transport_error(self, server):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        server.handler = refuse

        outcome = await execute(RequestDescriptor("GET", _url("tickets")), AUTH,
                                transport=server.transport)

        assert isinstance(outcome.error, FreshdeskTransportError)
        assert outcome.error.status_code is None
        assert outcome.error.message == "Connection refused"
        assert outcome.status is None
        assert _only_one(outcome)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self, server):
        def slow(request):
            raise httpx.ReadTimeout("", request=request)

        server.handler = slow

        outcome = await execute(RequestDescriptor("GET", _url("tickets")), AUTH,
                                transport=server.transport)

        assert isinstance(outcome.error, FreshdeskTransportError)
        assert outcome.error.status_code is None
        assert outcome.error.message == "ReadTimeout"

    @pytest.mark.asyncio
    async def test_unwrap_raises_error(self, server):
        server.reply(403, json={"code": "access_denied", "message": "You are not authorized"})

        outcome = await execute(RequestDescriptor("GET", _url("agents/me")), AUTH,
                                transport=server.transport)

        with pytest.raises(FreshdeskError) as excinfo:
            outcome.unwrap()
        assert excinfo.value.status_code == 403
        assert str(excinfo.value) == "You are not authorized"
