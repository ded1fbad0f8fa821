"""App constants, overridable via environment variables."""

import os
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parent

# Data directory; default "data" under repo root, overridable via DATA_DIR env
DATA_DIR = Path(os.environ["DATA_DIR"]) if os.environ.get("DATA_DIR") else _REPO_ROOT / "data"

# Directory holding the knowledge-document JSON files used by the seed script
GUIDES_DIR = Path(os.environ["GUIDES_DIR"]) if os.environ.get("GUIDES_DIR") else DATA_DIR / "guides"

# ── Text generation ───────────────────────────────────────────────────────────
# Any OpenAI-compatible chat completions endpoint works. The defaults point at
# GitHub Models, authenticated with a GitHub token.
LLM_MODEL: str = os.environ.get("LLM_MODEL") or "openai/gpt-4.1"
LLM_BASE_URL: str = os.environ.get("LLM_BASE_URL") or "https://models.github.ai/inference"

# GITHUB_TOKEN and OPENAI_API_KEY are accepted as fallbacks
LLM_API_KEY: str | None = (
    os.environ.get("LLM_API_KEY") or os.environ.get("GITHUB_TOKEN") or os.environ.get("OPENAI_API_KEY")
)

LLM_TEMPERATURE: float = float(os.environ.get("LLM_TEMPERATURE", "1"))
LLM_TOP_P: float = float(os.environ.get("LLM_TOP_P", "1"))

# ── HTTP ──────────────────────────────────────────────────────────────────────
PORT: int = int(os.environ.get("PORT", "3001"))
