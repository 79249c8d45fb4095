from fastapi import APIRouter

from store_admin.domains.store_config.api.routes import (
    apps_channels,
    domains,
    policies,
    shipping,
)

api_router = APIRouter()

# Store configuration routes (all have /api/v1 prefix from main.py)
api_router.include_router(domains.router)
api_router.include_router(apps_channels.router)
api_router.include_router(shipping.router)
api_router.include_router(policies.router)
