from typing import Optional

import httpx

from habitgrid.schemas import BridgeResponse


class RemoteBridge:
    """Calls a running HabitGrid API with the same ``invoke`` surface as ``Bridge``."""

    def __init__(self, base_url: str = "http://127.0.0.1:8765", client: Optional[httpx.Client] = None) -> None:
        self._client = client or httpx.Client(base_url=base_url, timeout=10.0)

    def invoke(self, name: str, payload: Optional[dict] = None) -> BridgeResponse:
        resp = self._client.post(f"/v1/bridge/{name}", json=payload or {})
        # failed calls still carry the envelope
        return BridgeResponse.model_validate(resp.json())

    def close(self) -> None:
        self._client.close()
