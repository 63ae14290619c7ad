"""OpenDota API endpoint definitions."""

from typing import Any, Dict, Optional

from .constants import DEFAULT_BASE_URL


class OpenDotaEndpoints:
    """OpenDota API endpoint definitions."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip("/")

    # Reference data
    def heroes(self) -> str:
        return f"{self.base_url}/heroes"

    def hero_stats(self) -> str:
        return f"{self.base_url}/heroStats"

    def item_constants(self) -> str:
        return f"{self.base_url}/constants/items"

    def hero_matchups(self, hero_id: int) -> str:
        return f"{self.base_url}/heroes/{hero_id}/matchups"

    # Player endpoints
    def player_matches(self, account_id: int) -> str:
        return f"{self.base_url}/players/{account_id}/matches"

    def player_heroes(self, account_id: int) -> str:
        return f"{self.base_url}/players/{account_id}/heroes"

    # Match endpoints
    def match_by_id(self, match_id: int) -> str:
        return f"{self.base_url}/matches/{match_id}"

    @staticmethod
    def player_matches_params(
        limit: int, hero_id: Optional[int] = None
    ) -> Dict[str, Any]:
        """Build query parameters for the player match history endpoint."""
        params: Dict[str, Any] = {"limit": limit}
        if hero_id is not None:
            params["hero_id"] = hero_id
        return params
