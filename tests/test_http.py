from __future__ import annotations

import datetime
import json
from typing import Any, Dict, List, Optional

import pytest

from discordkit import http as http_module
from discordkit.enums import ErrorCode
from discordkit.errors import (
    BadRequest,
    DiscordServerError,
    Forbidden,
    HTTPException,
    NotFound,
    TooManyRequests,
    Unauthorized,
)
from discordkit.http import APIErrorMessage, HTTPClient, RateLimitPayload, Route


class FakeResponse:
    def __init__(self, status: int, body: Any = None, headers: Optional[Dict[str, str]] = None) -> None:
        self.status = status
        self.headers: Dict[str, str] = dict(headers or {})
        if isinstance(body, (dict, list)):
            self._text = json.dumps(body)
            self.headers.setdefault("content-type", "application/json")
        else:
            self._text = body or ""

    async def text(self, encoding: Optional[str] = None) -> str:
        return self._text


class FakeSession:
    def __init__(self, responses: List[FakeResponse]) -> None:
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    async def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    recorded: List[float] = []

    async def fake_sleep(delay: float) -> None:
        recorded.append(delay)

    monkeypatch.setattr(http_module.asyncio, "sleep", fake_sleep)
    return recorded


def _client(*responses: FakeResponse, max_retries: int = 3) -> HTTPClient:
    client = HTTPClient(max_retries=max_retries, session=FakeSession(list(responses)))  # type: ignore[arg-type]
    client.token = "secret-token"
    return client


class TestRoute:
    def test_url(self) -> None:
        route = Route("GET", "/gateway/bot")
        assert route.url == "https://discord.com/api/v8/gateway/bot"

    def test_override_base(self) -> None:
        assert Route("GET", "/x", override_base="http://localhost").url == "http://localhost/x"


class TestRateLimitPayload:
    def test_decode(self) -> None:
        payload = RateLimitPayload(data={"message": "You are being rate limited.", "retry_after": 1.5, "global": True})
        assert payload.retry_after == datetime.timedelta(seconds=1, milliseconds=500)
        assert payload.global_
        assert payload.bucket is None


class TestAPIErrorMessage:
    def test_decode(self) -> None:
        message = APIErrorMessage(data={"code": 50001, "message": "Missing Access"})
        assert message.code == 50001
        assert message.message == "Missing Access"


class TestRequest:
    @pytest.mark.anyio
    async def test_success_returns_json(self, sleeps: List[float]) -> None:
        client = _client(FakeResponse(200, {"ok": True}))
        assert await client.request(Route("GET", "/users/@me")) == {"ok": True}

        call = client.session.calls[0]  # type: ignore[union-attr]
        assert call["method"] == "GET"
        assert call["headers"]["Authorization"] == "Bot secret-token"
        assert call["headers"]["User-Agent"] == client.user_agent
        assert sleeps == []

    @pytest.mark.anyio
    async def test_json_body_and_audit_reason(self, sleeps: List[float]) -> None:
        client = _client(FakeResponse(204, ""))
        await client.request(Route("PATCH", "/channels/1"), json={"name": "x"}, reason="cleanup")

        call = client.session.calls[0]  # type: ignore[union-attr]
        assert json.loads(call["data"]) == {"name": "x"}
        assert call["headers"]["Content-Type"] == "application/json"
        assert call["headers"]["X-Audit-Log-Reason"] == "cleanup"

    @pytest.mark.anyio
    async def test_token_is_redacted_in_logs(self, sleeps: List[float], caplog: pytest.LogCaptureFixture) -> None:
        client = _client(FakeResponse(200, {}))
        with caplog.at_level("DEBUG", logger="discordkit.http"):
            await client.request(Route("GET", "/users/@me"))
        assert "secret-token" not in caplog.text
        assert "Bot [removed]" in caplog.text

    @pytest.mark.anyio
    async def test_rate_limit_sleeps_for_decoded_duration(self, sleeps: List[float]) -> None:
        client = _client(
            FakeResponse(429, {"message": "slow down", "retry_after": 1.5, "global": False}),
            FakeResponse(200, {"ok": True}),
        )
        assert await client.request(Route("GET", "/x")) == {"ok": True}
        assert sleeps == [1.5]

    @pytest.mark.anyio
    async def test_rate_limit_falls_back_to_header(self, sleeps: List[float]) -> None:
        client = _client(
            FakeResponse(429, "slow down", headers={"retry-after": "2"}),
            FakeResponse(200, {}),
        )
        await client.request(Route("GET", "/x"))
        assert sleeps == [2.0]

    @pytest.mark.anyio
    async def test_rate_limit_exhausts_retries(self, sleeps: List[float]) -> None:
        body = {"message": "slow down", "retry_after": 0.25, "bucket": "abc", "global": True}
        client = _client(FakeResponse(429, body), FakeResponse(429, body), max_retries=1)

        with pytest.raises(TooManyRequests) as excinfo:
            await client.request(Route("GET", "/x"))

        assert excinfo.value.status == 429
        assert excinfo.value.retry_after == datetime.timedelta(milliseconds=250)
        assert excinfo.value.bucket == "abc"
        assert excinfo.value.global_
        assert sleeps == [0.25]

    @pytest.mark.anyio
    async def test_server_errors_retry_with_backoff(self, sleeps: List[float]) -> None:
        client = _client(FakeResponse(502, "bad gateway"), FakeResponse(500, ""), FakeResponse(200, {}))
        assert await client.request(Route("GET", "/x")) == {}
        assert sleeps == [1, 3]

    @pytest.mark.anyio
    async def test_server_errors_exhaust_retries(self, sleeps: List[float]) -> None:
        client = _client(FakeResponse(500, ""), FakeResponse(500, ""), max_retries=1)
        with pytest.raises(DiscordServerError):
            await client.request(Route("GET", "/x"))

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        ("status", "error"),
        [
            (400, BadRequest),
            (401, Unauthorized),
            (403, Forbidden),
            (404, NotFound),
            (405, HTTPException),
            (503, DiscordServerError),
        ],
    )
    async def test_status_mapping(self, sleeps: List[float], status: int, error: type) -> None:
        client = _client(FakeResponse(status, {"code": 0, "message": "nope"}))
        with pytest.raises(error):
            await client.request(Route("GET", "/x"))
        assert sleeps == []

    @pytest.mark.anyio
    async def test_error_code_is_decoded(self, sleeps: List[float]) -> None:
        client = _client(FakeResponse(403, {"code": 50001, "message": "Missing Access"}))
        with pytest.raises(Forbidden) as excinfo:
            await client.request(Route("GET", "/x"))

        assert excinfo.value.code is ErrorCode.missing_access
        assert excinfo.value.message == "Missing Access"
        assert str(excinfo.value) == "403 (error code: 50001): Missing Access"


class TestGatewayBot:
    @pytest.mark.anyio
    async def test_get_gateway_bot(self, sleeps: List[float]) -> None:
        client = _client(
            FakeResponse(
                200,
                {
                    "url": "wss://gateway.discord.gg",
                    "shards": 9,
                    "session_start_limit": {"total": 1000, "remaining": 999, "reset_after": 14400000, "max_concurrency": 1},
                },
            )
        )
        gateway = await client.get_gateway_bot()
        assert gateway.url == "wss://gateway.discord.gg"
        assert gateway.shards == 9
        assert gateway.session_start_limit.remaining == 999
        assert client.session.calls[0]["url"].endswith("/gateway/bot")  # type: ignore[union-attr]

    @pytest.mark.anyio
    async def test_context_manager_closes_session(self) -> None:
        session = FakeSession([])
        async with HTTPClient(session=session) as client:  # type: ignore[arg-type]
            assert client.session is session
        assert session.closed
