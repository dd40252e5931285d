from typing import Any, Optional

from pydantic import BaseModel


class BridgeResponse(BaseModel):
    ok: bool
    data: Any = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
