"""
Capabilities handed to the request handlers.

The app builds one Env at startup and FastAPI injects it into each request
through `get_env`. Tests swap in fakes with `app.dependency_overrides`.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from oran_gateway import config
from oran_gateway.assets import AssetService, StaticAssetService
from oran_gateway.flags import FeatureFlagStore, StaticFlagStore
from oran_gateway.inference import InferenceService, WorkersAIClient
from oran_gateway.prompts import load_system_prompt


@dataclass
class Env:
    ai: InferenceService
    assets: AssetService
    feature_flags: Optional[FeatureFlagStore] = None

    async def aclose(self) -> None:
        close = getattr(self.ai, "aclose", None)
        if close is not None:
            await close()


def build_env() -> Env:
    ai = WorkersAIClient(
        config.CLOUDFLARE_ACCOUNT_ID,
        config.CLOUDFLARE_API_TOKEN,
        gateway_id=config.AI_GATEWAY_ID,
        gateway_skip_cache=config.AI_GATEWAY_SKIP_CACHE,
        gateway_cache_ttl=config.AI_GATEWAY_CACHE_TTL,
        base_url=config.INFERENCE_BASE_URL,
        timeout=config.INFERENCE_TIMEOUT,
    )
    assets = StaticAssetService(config.ASSETS_DIR, spa_fallback=config.ASSETS_SPA_FALLBACK)
    flags = StaticFlagStore.from_file(config.FEATURE_FLAGS_FILE) if config.FEATURE_FLAGS_FILE else None
    return Env(ai=ai, assets=assets, feature_flags=flags)


def get_env(request: Request) -> Env:
    return request.app.state.env


def get_system_prompt() -> str:
    return load_system_prompt(config.SYSTEM_PROMPT_FILE)
