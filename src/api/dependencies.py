from fastapi import HTTPException, Request

from port.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store created with the application, raising 503 if missing."""
    store = getattr(request.app.state, "user_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="User store unavailable")
    return store
