"""OpenDota API HTTP client with retry logic and error handling."""

import asyncio
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from ..config import get_global_settings
from .endpoints import OpenDotaEndpoints
from .errors import (
    BadRequestError,
    NotFoundError,
    OpenDotaAPIError,
    RateLimitError,
    ResponseParseError,
    ServiceUnavailableError,
)
from .models import (
    HeroDTO,
    HeroMatchupDTO,
    HeroStatsDTO,
    ItemDTO,
    MatchDetailDTO,
    PlayerHeroDTO,
    PlayerMatchDTO,
)

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class OpenDotaClient:
    """OpenDota API client with retry and error handling."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize OpenDota API client.

        Args:
            base_url: API root (uses config if None)
            api_key: Optional API key (uses config if None)
            timeout: Total request timeout in seconds
            max_retries: Retries for rate limits, server errors and transport errors
            transport: Custom httpx transport (used by tests)
        """
        settings = get_global_settings()
        self.api_key = api_key or settings.opendota_api_key
        self.timeout = timeout or settings.request_timeout
        self.max_retries = settings.max_retries if max_retries is None else max_retries
        self.endpoints = OpenDotaEndpoints(base_url or settings.opendota_base_url)
        self._transport = transport

        # HTTP session
        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    headers = {
                        "Accept": "application/json",
                        "User-Agent": "dota-insights/0.1",
                    }
                    self.session = httpx.AsyncClient(
                        headers=headers,
                        timeout=httpx.Timeout(self.timeout),
                        transport=self._transport,
                    )
                    logger.info(
                        "OpenDota client session started",
                        base_url=self.endpoints.base_url,
                        api_key_prefix="[REDACTED]" if self.api_key else "None",
                    )

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("OpenDota client session closed")

    def _raise_client_error_if_needed(self, status: int) -> None:
        """Raise specific OpenDotaAPIError subclass for client errors."""
        if status == 400:
            raise BadRequestError("Invalid request parameters", status_code=status)
        elif status == 404:
            raise NotFoundError("Resource not found", status_code=status)
        elif 400 < status < 500 and status != 429:
            raise OpenDotaAPIError(f"Client error {status}", status_code=status)

    def _handle_rate_limit(self, headers: httpx.Headers, attempt: int) -> float:
        """Handle rate limit (429) with retry logic."""
        try:
            retry_after = float(headers.get("Retry-After", 1))
        except ValueError:
            retry_after = 1.0
        if attempt < self.max_retries:
            return retry_after
        raise RateLimitError(
            "Rate limit exceeded", status_code=429, retry_after=retry_after
        )

    def _handle_server_error(self, status: int, attempt: int) -> float:
        """Handle server errors (5xx) with exponential backoff."""
        if attempt < self.max_retries:
            return float(2**attempt)
        if status == 503:
            raise ServiceUnavailableError("Service unavailable", status_code=status)
        raise OpenDotaAPIError(f"Server error {status}", status_code=status)

    async def _execute_single_request(
        self, url: str, params: Optional[Dict[str, Any]], attempt: int
    ) -> Any:
        """Execute a single GET request.

        Returns ``None`` when the request should be retried.
        """
        if self.session is None:
            raise OpenDotaAPIError("Session not initialized")

        response = await self.session.get(url, params=params)
        try:
            if response.status_code != 200:
                self._raise_client_error_if_needed(response.status_code)
                if response.status_code == 429:
                    delay = self._handle_rate_limit(response.headers, attempt)
                else:
                    delay = self._handle_server_error(response.status_code, attempt)
                logger.warning(
                    "OpenDota request will be retried",
                    url=url,
                    status_code=response.status_code,
                    attempt=attempt,
                    delay=delay,
                )
                await asyncio.sleep(delay)
                return None

            try:
                return response.json()
            except ValueError as e:
                raise ResponseParseError(
                    f"Invalid JSON from {url}: {e}", status_code=response.status_code
                ) from e
        finally:
            await response.aclose()

    async def _make_request(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make HTTP request with retry logic.

        Args:
            url: Request URL
            params: Query parameters

        Returns:
            Response data as dictionary or list

        Raises:
            OpenDotaAPIError: For API errors
        """
        await self.start_session()

        request_params = dict(params or {})
        if self.api_key:
            request_params["api_key"] = self.api_key

        last_error: Optional[Exception] = None
        for attempt in range(self.max_retries + 1):
            try:
                result = await self._execute_single_request(
                    url, request_params or None, attempt
                )
                if result is not None:
                    return result
            except (httpx.RequestError, asyncio.TimeoutError) as e:
                last_error = e
                logger.warning(
                    "OpenDota transport error",
                    url=url,
                    attempt=attempt,
                    error=str(e),
                )
                if attempt < self.max_retries:
                    await asyncio.sleep(2**attempt)

        raise OpenDotaAPIError(f"Request failed: {str(last_error)}")

    @staticmethod
    def _parse(model: Type[ModelT], payload: Any, url: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise ResponseParseError(f"Unexpected payload from {url}: {e}") from e

    def _parse_list(self, model: Type[ModelT], payload: Any, url: str) -> List[ModelT]:
        if not isinstance(payload, list):
            raise ResponseParseError(
                f"Expected list response from {url}, got {type(payload).__name__}"
            )
        return [self._parse(model, entry, url) for entry in payload]

    # Reference data endpoints
    async def get_heroes(self) -> List[HeroDTO]:
        """Get all heroes."""
        url = self.endpoints.heroes()
        return self._parse_list(HeroDTO, await self._make_request(url), url)

    async def get_hero_stats(self) -> List[HeroStatsDTO]:
        """Get per-bracket hero pick/win counts."""
        url = self.endpoints.hero_stats()
        return self._parse_list(HeroStatsDTO, await self._make_request(url), url)

    async def get_item_constants(self) -> Dict[str, ItemDTO]:
        """Get the item catalog keyed by internal item name."""
        url = self.endpoints.item_constants()
        payload = await self._make_request(url)
        if not isinstance(payload, dict):
            raise ResponseParseError(
                f"Expected object response from {url}, got {type(payload).__name__}"
            )
        return {key: self._parse(ItemDTO, entry, url) for key, entry in payload.items()}

    async def get_hero_matchups(self, hero_id: int) -> List[HeroMatchupDTO]:
        """Get a hero's results against every opponent hero."""
        url = self.endpoints.hero_matchups(hero_id)
        return self._parse_list(HeroMatchupDTO, await self._make_request(url), url)

    # Player endpoints
    async def get_player_matches(
        self, account_id: int, hero_id: Optional[int] = None, limit: int = 20
    ) -> List[PlayerMatchDTO]:
        """Get a player's most recent matches, newest first."""
        url = self.endpoints.player_matches(account_id)
        params = self.endpoints.player_matches_params(limit, hero_id)
        return self._parse_list(
            PlayerMatchDTO, await self._make_request(url, params), url
        )

    async def get_player_heroes(self, account_id: int) -> List[PlayerHeroDTO]:
        """Get a player's per-hero games and wins."""
        url = self.endpoints.player_heroes(account_id)
        return self._parse_list(PlayerHeroDTO, await self._make_request(url), url)

    # Match endpoints
    async def get_match(self, match_id: int) -> MatchDetailDTO:
        """Get full match details by match ID."""
        url = self.endpoints.match_by_id(match_id)
        return self._parse(MatchDetailDTO, await self._make_request(url), url)
