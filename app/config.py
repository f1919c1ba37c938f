"""Configuration from environment."""

from deps import Optional, Path, load_dotenv, os

load_dotenv()


def get_together_api_key() -> str:
    """Together.ai API key (required for AI suggestion refinement)."""
    return os.environ.get("TOGETHER_API_KEY", "").strip()


def get_together_model() -> str:
    """Together.ai model. Default: deepseek-ai/DeepSeek-V3.1."""
    return os.environ.get("TOGETHER_MODEL", "deepseek-ai/DeepSeek-V3.1").strip()


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_catalog_path() -> Optional[Path]:
    """Optional JSON feature catalog replacing the built-in one."""
    value = os.environ.get("BASELINE_CATALOG_PATH", "").strip()
    return Path(value) if value else None


def ai_refinement_enabled() -> bool:
    """Refine suggested fixes with Together.ai. Default: on when a key is set."""
    value = os.environ.get("BASELINE_AI_REFINE", "").strip().lower()
    if value in ("0", "false", "no", "off"):
        return False
    return bool(get_together_api_key())
