# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-15
# Description: dependencies.py
# -----------------------------------------------------------------------------
from fastapi import Request

from api.AppContainer import AppContainer
from services.HealthService import HealthService
from services.ProductSearchService import ProductSearchService


def get_container(request: Request) -> AppContainer:
    # built once in the app lifespan
    return request.app.state.container

def get_search_service(request: Request) -> ProductSearchService:
    return get_container(request).search_service

def get_health_service(request: Request) -> HealthService:
    return get_container(request).health_service
