"""Insights feature: data provider gateway, orchestration service and HTTP API."""

from .gateway import OpenDotaGateway
from .router import router as insights_router
from .service import InsightsService

__all__ = ["OpenDotaGateway", "InsightsService", "insights_router"]
