"""
Tests for the OpenDota API client.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
import pytest_asyncio

from dota_insights.core.opendota.client import OpenDotaClient
from dota_insights.core.opendota.errors import (
    NotFoundError,
    OpenDotaAPIError,
    RateLimitError,
    ResponseParseError,
    ServiceUnavailableError,
)

BASE_URL = "https://opendota.test/api"


def make_client(handler, max_retries: int = 2, api_key=None) -> OpenDotaClient:
    return OpenDotaClient(
        base_url=BASE_URL,
        api_key=api_key,
        timeout=5.0,
        max_retries=max_retries,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def sample_match_payload():
    return {
        "match_id": 7000000001,
        "radiant_win": True,
        "duration": 2100,
        "players": [
            {
                "account_id": 42,
                "player_slot": 0,
                "hero_id": 1,
                "item_0": 63,
                "item_1": 0,
                "item_2": 116,
                "ability_upgrades_arr": [5003, 5004, 5003],
            },
            {"account_id": None, "player_slot": 128, "hero_id": 2},
        ],
    }


@pytest_asyncio.fixture
async def recorded_client():
    """Client answering every request with an empty list, recording URLs."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[])

    client = make_client(handler, api_key="secret")
    yield client, requests
    await client.close()


class TestOpenDotaClient:
    """Test cases for OpenDotaClient."""

    @pytest.mark.asyncio
    async def test_get_heroes(self):
        def handler(request):
            assert request.url.path == "/api/heroes"
            return httpx.Response(
                200,
                json=[{"id": 1, "name": "npc_dota_hero_antimage", "localized_name": "Anti-Mage", "roles": ["Carry"]}],
            )

        async with make_client(handler) as client:
            heroes = await client.get_heroes()

        assert heroes[0].localized_name == "Anti-Mage"
        assert heroes[0].roles == ["Carry"]

    @pytest.mark.asyncio
    async def test_player_matches_query_params(self, recorded_client):
        client, requests = recorded_client

        await client.get_player_matches(42, hero_id=8, limit=20)

        params = requests[0].url.params
        assert requests[0].url.path == "/api/players/42/matches"
        assert params["hero_id"] == "8"
        assert params["limit"] == "20"
        assert params["api_key"] == "secret"

    @pytest.mark.asyncio
    async def test_get_match(self, sample_match_payload):
        def handler(request):
            return httpx.Response(200, json=sample_match_payload)

        async with make_client(handler) as client:
            match = await client.get_match(7000000001)

        assert match.radiant_win is True
        assert match.players[0].ability_upgrades_arr == [5003, 5004, 5003]
        assert match.players[1].account_id is None

    @pytest.mark.asyncio
    async def test_not_found_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(404, json={"error": "not found"})

        async with make_client(handler) as client:
            with pytest.raises(NotFoundError) as exc_info:
                await client.get_match(1)

        assert exc_info.value.is_not_found()
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_rate_limit_retried_then_succeeds(self):
        responses = [
            httpx.Response(429, headers={"Retry-After": "0"}),
            httpx.Response(200, json=[{"hero_id": 2, "games_played": 80, "wins": 50}]),
        ]

        def handler(request):
            return responses.pop(0)

        async with make_client(handler) as client:
            matchups = await client.get_hero_matchups(1)

        assert matchups[0].games_played == 80

    @pytest.mark.asyncio
    async def test_rate_limit_exhausted(self):
        def handler(request):
            return httpx.Response(429, headers={"Retry-After": "0"})

        async with make_client(handler, max_retries=1) as client:
            with pytest.raises(RateLimitError):
                await client.get_heroes()

    @pytest.mark.asyncio
    async def test_server_error_backoff(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        with patch("asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            async with make_client(handler, max_retries=2) as client:
                with pytest.raises(ServiceUnavailableError):
                    await client.get_hero_stats()

        assert len(calls) == 3
        assert [c.args[0] for c in mock_sleep.await_args_list] == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_transport_error_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with patch("asyncio.sleep", new_callable=AsyncMock):
            async with make_client(handler, max_retries=1) as client:
                with pytest.raises(OpenDotaAPIError) as exc_info:
                    await client.get_heroes()

        assert "connection refused" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unexpected_payload(self):
        def handler(request):
            return httpx.Response(200, json={"error": "rate limited"})

        async with make_client(handler) as client:
            with pytest.raises(ResponseParseError):
                await client.get_heroes()

    @pytest.mark.asyncio
    async def test_item_constants_keyed_by_name(self):
        def handler(request):
            assert request.url.path == "/api/constants/items"
            return httpx.Response(
                200,
                json={
                    "blink": {"id": 1, "dname": "Blink Dagger", "qual": "component", "cost": 2250},
                    "recipe_x": {"id": 999, "cost": 0},
                },
            )

        async with make_client(handler) as client:
            items = await client.get_item_constants()

        assert items["blink"].dname == "Blink Dagger"
        assert items["recipe_x"].dname is None
