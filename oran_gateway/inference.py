"""
Workers AI REST client.

Plays the part of the platform's inference binding: `run(model, inputs)`
returns the parsed result, `run(..., return_raw_response=True)` returns the
upstream HTTP response as a Starlette response whose body is streamed from
the open upstream connection.
"""

from typing import Any, Dict, Optional, Protocol

import httpx
from starlette.background import BackgroundTask
from starlette.responses import StreamingResponse

from oran_gateway.exceptions import InferenceNotConfiguredError

WORKERS_AI_URL = "https://api.cloudflare.com/client/v4/accounts/{account_id}/ai/run/"
AI_GATEWAY_URL = "https://gateway.ai.cloudflare.com/v1/{account_id}/{gateway_id}/workers-ai/"

# Never copied from the upstream response onto ours.
HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailer",
    "transfer-encoding",
    "upgrade",
    "content-length",
}


class InferenceService(Protocol):
    async def run(self, model: str, inputs: Dict[str, Any], *, return_raw_response: bool = False) -> Any: ...


def passthrough_headers(headers: httpx.Headers) -> Dict[str, str]:
    return {k: v for k, v in headers.items() if k.lower() not in HOP_BY_HOP_HEADERS}


class WorkersAIClient:
    def __init__(
        self,
        account_id: str,
        api_token: str,
        *,
        gateway_id: Optional[str] = None,
        gateway_skip_cache: bool = False,
        gateway_cache_ttl: Optional[int] = None,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 60.0,
    ):
        self.account_id = account_id
        self.api_token = api_token
        self.gateway_id = gateway_id
        self.gateway_skip_cache = gateway_skip_cache
        self.gateway_cache_ttl = gateway_cache_ttl
        self._base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        if self._base_url:
            return self._base_url.rstrip("/") + "/"
        if self.gateway_id:
            return AI_GATEWAY_URL.format(account_id=self.account_id, gateway_id=self.gateway_id)
        return WORKERS_AI_URL.format(account_id=self.account_id)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }
        if self.gateway_id:
            headers["cf-aig-skip-cache"] = "true" if self.gateway_skip_cache else "false"
            if self.gateway_cache_ttl is not None:
                headers["cf-aig-cache-ttl"] = str(self.gateway_cache_ttl)
        return headers

    async def run(self, model: str, inputs: Dict[str, Any], *, return_raw_response: bool = False) -> Any:
        if not self.api_token or not (self.account_id or self._base_url):
            raise InferenceNotConfiguredError()

        url = self.base_url + model.lstrip("/")

        if not return_raw_response:
            resp = await self._client.post(url, json=inputs, headers=self._headers())
            resp.raise_for_status()
            return resp.json()["result"]

        request = self._client.build_request(
            "POST", url, json={**inputs, "stream": True}, headers=self._headers()
        )
        upstream = await self._client.send(request, stream=True)
        return StreamingResponse(
            upstream.aiter_raw(),
            status_code=upstream.status_code,
            headers=passthrough_headers(upstream.headers),
            background=BackgroundTask(upstream.aclose),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
