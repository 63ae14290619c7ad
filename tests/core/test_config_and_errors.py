"""
Tests for settings, logging setup, service exceptions and the error decorator.
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from dota_insights.core.config import Settings
from dota_insights.core.decorators import service_error_handler
from dota_insights.core.exceptions import (
    DataUnavailableError,
    ProviderFailureError,
    ValidationError,
)
from dota_insights.core.logging import setup_logging
from dota_insights.core.opendota.errors import NotFoundError, RateLimitError


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OPENDOTA_API_KEY", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        settings = Settings(_env_file=None)

        assert settings.match_history_limit == 20
        assert settings.detail_sample_size == 10
        assert settings.meta_bracket == "7"
        assert settings.opendota_api_key is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("OPENDOTA_BASE_URL", "http://localhost:9000/api/")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

        settings = Settings(_env_file=None)

        assert settings.opendota_base_url == "http://localhost:9000/api"
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None)


class TestLogging:
    def test_request_loggers_stay_quiet_at_info(self):
        setup_logging("INFO")

        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_debug_level_keeps_request_loggers_at_warning(self):
        setup_logging("debug", json_logs=False)

        assert logging.getLogger("httpx").level == logging.WARNING


class TestExceptions:
    def test_provider_failure_context(self):
        error = ProviderFailureError(
            "heroes", service="InsightsService", operation="draft", status_code=503
        )

        assert str(error) == "[InsightsService.draft] Provider failure: heroes"
        assert error.context == {"status_code": 503}

    def test_data_unavailable_resource(self):
        error = DataUnavailableError("no matches", resource="player_matches")

        assert error.message == "Data unavailable: no matches"
        assert error.context["resource"] == "player_matches"


class DummyService:
    @service_error_handler("DummyService")
    async def lookup(self, hero_id: int) -> int:
        if hero_id == 404:
            raise NotFoundError("missing", status_code=404)
        if hero_id == 429:
            raise RateLimitError("slow down", status_code=429)
        if hero_id < 0:
            raise ValueError("hero id must be positive")
        if hero_id == 0:
            raise DataUnavailableError("nothing")
        return hero_id * 2


class TestServiceErrorHandler:
    @pytest.mark.asyncio
    async def test_passes_result_through(self):
        assert await DummyService().lookup(21) == 42

    @pytest.mark.asyncio
    async def test_wraps_provider_errors(self):
        with pytest.raises(ProviderFailureError) as exc_info:
            await DummyService().lookup(404)

        error = exc_info.value
        assert error.service == "DummyService"
        assert error.operation == "lookup"
        assert error.context["status_code"] == 404
        assert isinstance(error.original_error, NotFoundError)

    @pytest.mark.asyncio
    async def test_wraps_value_errors(self):
        with pytest.raises(ValidationError):
            await DummyService().lookup(-1)

    @pytest.mark.asyncio
    async def test_service_exceptions_unchanged(self):
        with pytest.raises(DataUnavailableError):
            await DummyService().lookup(0)
