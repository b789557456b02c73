"""
O-RAN Traffic Classifier Gateway
Handles: static frontend, POST /api/chat proxied to Workers AI (streamed)
Port: 8787

- Every non-/api/ path goes to the asset service
- /api/chat injects the classifier system prompt when the caller sent none
- Every response carries permissive CORS headers
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request

from oran_gateway import config
from oran_gateway.bindings import Env, build_env, get_env, get_system_prompt
from oran_gateway.chat import handle_chat_request
from oran_gateway.config import log
from oran_gateway.cors import CORSHeadersMiddleware, corsify_response
from oran_gateway.logging_middleware import RequestLoggingMiddleware

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


# ── App ───────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    get_system_prompt()  # fail fast on a missing prompt file
    app.state.env = build_env()
    log.info(f"[oran-gateway] Started on port {config.PORT}, model={config.AI_MODEL_ID}")
    yield
    await app.state.env.aclose()


app = FastAPI(
    title="O-RAN Traffic Classifier Gateway",
    version="1.0.0",
    lifespan=lifespan,
    # /docs and friends would shadow frontend paths
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# Added last runs first: CORS decoration wraps the logged response.
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CORSHeadersMiddleware)


# ── Routes ────────────────────────────────────────────────────────────────────

@app.options("/api/{rest:path}")
async def preflight(rest: str):
    return corsify_response(None, status_code=204)


@app.post("/api/chat")
async def chat(
    request: Request,
    env: Env = Depends(get_env),
    system_prompt: str = Depends(get_system_prompt),
):
    return await handle_chat_request(
        request,
        env,
        system_prompt,
        model_id=config.AI_MODEL_ID,
        max_tokens=config.AI_MAX_TOKENS,
    )


@app.api_route("/api/chat", methods=[m for m in ALL_METHODS if m not in ("POST", "OPTIONS")])
async def chat_method_not_allowed():
    return corsify_response("Method not allowed", status_code=405)


@app.api_route("/api/{rest:path}", methods=ALL_METHODS)
async def api_not_found(rest: str):
    return corsify_response("Not found", status_code=404)


@app.api_route("/{path:path}", methods=ALL_METHODS)
async def assets(request: Request, path: str, env: Env = Depends(get_env)):
    return await env.assets.fetch(request)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("oran_gateway.main:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)
