import pytest
from unittest.mock import AsyncMock

from dota_insights.core.opendota import OpenDotaClient
from dota_insights.core.opendota.models import (
    HeroDTO,
    HeroMatchupDTO,
    MatchDetailDTO,
    PlayerHeroDTO,
    PlayerMatchDTO,
)
from dota_insights.features.insights.gateway import OpenDotaGateway


@pytest.fixture
def mock_client():
    return AsyncMock(spec=OpenDotaClient)


@pytest.fixture
def gateway(mock_client):
    return OpenDotaGateway(mock_client)


@pytest.mark.asyncio
async def test_fetch_heroes(gateway, mock_client):
    """Test heroes come back as domain records"""
    mock_client.get_heroes.return_value = [
        HeroDTO(id=1, localized_name="Anti-Mage", roles=["Carry", "Escape"])
    ]

    heroes = await gateway.fetch_heroes()

    assert heroes[0].roles == ("Carry", "Escape")


@pytest.mark.asyncio
async def test_fetch_player_matches_passes_filters(gateway, mock_client):
    """Test hero filter and limit are forwarded to the client"""
    mock_client.get_player_matches.return_value = [
        PlayerMatchDTO(match_id=9, player_slot=0, radiant_win=True, hero_id=8)
    ]

    matches = await gateway.fetch_player_matches(42, hero_id=8, limit=20)

    assert matches[0].won is True
    mock_client.get_player_matches.assert_awaited_once_with(42, hero_id=8, limit=20)


@pytest.mark.asyncio
async def test_fetch_match_detail(gateway, mock_client):
    mock_client.get_match.return_value = MatchDetailDTO(
        match_id=9,
        radiant_win=False,
        players=[{"account_id": 42, "player_slot": 128, "hero_id": 8, "item_0": 116}],
    )

    records = await gateway.fetch_match_detail(9)

    assert records[0].won is True
    assert records[0].items == (116,)


@pytest.mark.asyncio
async def test_fetch_matchups_and_player_heroes(gateway, mock_client):
    mock_client.get_hero_matchups.return_value = [
        HeroMatchupDTO(hero_id=2, games_played=60, wins=40)
    ]
    mock_client.get_player_heroes.return_value = [
        PlayerHeroDTO(hero_id=8, games=12, win=7)
    ]

    matchups = await gateway.fetch_hero_matchups(1)
    heroes = await gateway.fetch_player_heroes(42)

    assert matchups[0].games_played == 60
    assert heroes[0].wins == 7
