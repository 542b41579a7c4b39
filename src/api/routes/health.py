"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from api import config
from api.dependencies import get_user_store
from port.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(store: UserStore = Depends(get_user_store)):
    """Health check with service metadata and store size."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "version": config.VERSION,
        "environment": config.APP_ENV,
        "services": {
            "userStore": {
                "status": "healthy",
                "users": store.count(),
            }
        },
    }
