"""Dependency injection for the insights feature."""

from typing import Annotated

from fastapi import Depends, Request

from ...core.config import Settings, get_global_settings
from ...core.opendota import OpenDotaClient
from ...core.reference_cache import ReferenceDataCache
from .gateway import OpenDotaGateway
from .service import InsightsService


def get_opendota_client(request: Request) -> OpenDotaClient:
    """Shared OpenDota client created in the application lifespan."""
    return request.app.state.opendota_client


def get_reference_cache(request: Request) -> ReferenceDataCache:
    """Process-wide reference cache created in the application lifespan."""
    return request.app.state.reference_cache


SettingsDep = Annotated[Settings, Depends(get_global_settings)]
OpenDotaClientDep = Annotated[OpenDotaClient, Depends(get_opendota_client)]
ReferenceCacheDep = Annotated[ReferenceDataCache, Depends(get_reference_cache)]


# Gateway dependency
def get_opendota_gateway(client: OpenDotaClientDep) -> OpenDotaGateway:
    return OpenDotaGateway(client)


OpenDotaGatewayDep = Annotated[OpenDotaGateway, Depends(get_opendota_gateway)]


# Service dependency
def get_insights_service(
    gateway: OpenDotaGatewayDep, cache: ReferenceCacheDep, settings: SettingsDep
) -> InsightsService:
    return InsightsService(gateway, cache, settings)


InsightsServiceDep = Annotated[InsightsService, Depends(get_insights_service)]
