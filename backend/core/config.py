import os
from pathlib import Path
from dotenv import load_dotenv

_BACKEND_ROOT = Path(__file__).resolve().parents[1]
_BACKEND_ENV_PATH = _BACKEND_ROOT / ".env"
load_dotenv(dotenv_path=_BACKEND_ENV_PATH, override=True)


def _env_float(name: str, default: float) -> float:
    try:
        return max(0.0, float(os.getenv(name, default)))
    except (TypeError, ValueError):
        return default


MODEL_NAME = str(os.getenv("MODEL_NAME") or "gpt-4o-mini").strip()
ASSISTANT_STRATEGY = str(os.getenv("ASSISTANT_STRATEGY") or "remote").strip().lower()
ASSISTANT_THINKING_DELAY_SEC = _env_float("ASSISTANT_THINKING_DELAY_SEC", 0.8)
CONNECTOR_STYLE = str(os.getenv("CONNECTOR_STYLE") or "circuit").strip().lower()

# Layout timings, tuned to the page's own transition durations.
SELECTION_SETTLE_SEC = 0.1
FILTER_SETTLE_SEC = 0.35
RESIZE_DEBOUNCE_SEC = 0.25
LAYOUT_DEBOUNCE_SEC = 0.15
CONNECTOR_EXIT_SEC = 0.4
CONNECTOR_STAGGER_SEC = 0.1
CONNECTOR_MAX_STAGGER_SEC = 1.0


def openai_api_key() -> str:
    """Read at call time so a missing key fails the request, not the import."""
    return str(os.getenv("OPENAI_API_KEY") or "").strip()
