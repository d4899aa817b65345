"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter

from webinar_api.api.routes import webinars
from webinar_api.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(webinars.router)
