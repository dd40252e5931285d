from fastapi import HTTPException, Request

from habitgrid.bridge import Bridge
from habitgrid.store import HabitStore


def get_store(request: Request) -> HabitStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Store is not open")
    return store


def get_bridge(request: Request) -> Bridge:
    bridge = getattr(request.app.state, "bridge", None)
    if bridge is None:
        raise HTTPException(status_code=503, detail="Store is not open")
    return bridge
