from fastapi import APIRouter

from fortune_indexer.api.routers import holdings, system, tickets, webhook


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(webhook.router, tags=["webhook"])
    router.include_router(holdings.router, tags=["holdings"])
    router.include_router(tickets.router, tags=["tickets"])
    router.include_router(system.router, tags=["system"])
    return router


__all__ = [
    "create_api_router",
]
