"""OpenDota API constants and enum definitions."""

from enum import Enum

DEFAULT_BASE_URL = "https://api.opendota.com/api"

# Each match has ten hero picks, used to turn pick counts into pick rates
PICKS_PER_MATCH = 10


class LobbyType(int, Enum):
    """OpenDota lobby types for match filtering."""

    NORMAL = 0
    PRACTICE = 1
    TOURNAMENT = 2
    TUTORIAL = 3
    COOP_BOTS = 4
    RANKED_TEAM_MM = 5
    RANKED_SOLO_MM = 6
    RANKED = 7
    ONE_V_ONE_MID = 8
    BATTLE_CUP = 9
    EVENT = 12


class ItemQuality(str, Enum):
    """Item ``qual`` tags from the item constants endpoint."""

    CONSUMABLE = "consumable"
    COMPONENT = "component"
    ARTIFACT = "artifact"
    COMMON = "common"
    SECRET_SHOP = "secret_shop"
    EPIC = "epic"
    RARE = "rare"
