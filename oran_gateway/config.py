"""Gateway configuration, loaded from the environment (and a local .env file)."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_DIR.parent

load_dotenv(PROJECT_ROOT / ".env")


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# ── Inference ─────────────────────────────────────────────────────────────────
CLOUDFLARE_ACCOUNT_ID = os.getenv("CLOUDFLARE_ACCOUNT_ID", "")
CLOUDFLARE_API_TOKEN = os.getenv("CLOUDFLARE_API_TOKEN", "")

AI_MODEL_ID = os.getenv("AI_MODEL_ID", "@cf/meta/llama-3.3-70b-instruct-fp8-fast")
# Fixed output cap sent with every chat request
AI_MAX_TOKENS = 1024

# Optional AI Gateway in front of Workers AI
AI_GATEWAY_ID = os.getenv("AI_GATEWAY_ID") or None
AI_GATEWAY_SKIP_CACHE = _flag("AI_GATEWAY_SKIP_CACHE")
AI_GATEWAY_CACHE_TTL = int(os.environ["AI_GATEWAY_CACHE_TTL"]) if os.getenv("AI_GATEWAY_CACHE_TTL") else None

INFERENCE_BASE_URL = os.getenv("INFERENCE_BASE_URL") or None
INFERENCE_TIMEOUT = float(os.getenv("INFERENCE_TIMEOUT", "60"))

# ── Prompt / assets / flags ───────────────────────────────────────────────────
SYSTEM_PROMPT_FILE = Path(os.getenv("SYSTEM_PROMPT_FILE", PACKAGE_DIR / "prompts" / "oran_traffic_classifier.txt"))

ASSETS_DIR = Path(os.getenv("ASSETS_DIR", PACKAGE_DIR / "public"))
ASSETS_SPA_FALLBACK = _flag("ASSETS_SPA_FALLBACK")

FEATURE_FLAGS_FILE = os.getenv("FEATURE_FLAGS_FILE") or None

# ── Server ────────────────────────────────────────────────────────────────────
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8787"))
RELOAD = _flag("RELOAD")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger("oran-gateway")
