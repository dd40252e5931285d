from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from habitgrid.api.deps import get_bridge
from habitgrid.bridge import (
    ERROR_CONSTRAINT,
    ERROR_NOT_FOUND,
    ERROR_STORE,
    ERROR_UNKNOWN_CALL,
    ERROR_VALIDATION,
    Bridge,
)
from habitgrid.schemas import BridgeResponse

router = APIRouter(prefix="/v1", tags=["bridge"])

STATUS_BY_ERROR = {
    ERROR_VALIDATION: 400,
    ERROR_NOT_FOUND: 404,
    ERROR_UNKNOWN_CALL: 404,
    ERROR_CONSTRAINT: 409,
    ERROR_STORE: 503,
}


@router.get("/bridge")
def bridge_calls(bridge: Bridge = Depends(get_bridge)) -> Dict[str, Any]:
    return {"calls": bridge.names}


@router.post("/bridge/{name}")
def bridge_invoke(
    name: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    bridge: Bridge = Depends(get_bridge),
) -> JSONResponse:
    response = bridge.invoke(name, payload)
    status_code = 200 if response.ok else STATUS_BY_ERROR.get(response.error_kind, 400)
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


async def bridge_body_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Bad bridge bodies still get the envelope; other routes keep FastAPI's 422."""
    if not request.url.path.startswith(f"{router.prefix}/bridge/"):
        return await request_validation_exception_handler(request, exc)
    response = BridgeResponse(ok=False, error="Request body must be a JSON object", error_kind=ERROR_VALIDATION)
    return JSONResponse(status_code=400, content=response.model_dump(mode="json"))
