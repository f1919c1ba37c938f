"""Availability of the Together.ai suggestion refiner, for /ai-status."""

import logging

from deps import Any, Dict, Optional, time

from .config import ai_refinement_enabled, get_together_api_key, get_together_model
from .services.ai import _client

logger = logging.getLogger(__name__)

# Every outcome is cached, so the provider is probed at most once per TTL.
_status_cache: Optional[Dict[str, Any]] = None
_cache_timestamp: float = 0
CACHE_TTL = 30.0  # seconds


def _key_problem(key: Optional[str]) -> Optional[str]:
    if not key:
        return "TOGETHER_API_KEY not set in .env"
    if len(key) < 10:
        return "TOGETHER_API_KEY appears invalid (too short)"
    if key.startswith("your_api_key"):
        return "TOGETHER_API_KEY not configured (still using placeholder)"
    return None


def _probe(model: str) -> str:
    """Send a one-token request; return an empty string on success, else the reason."""
    try:
        _client().chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": "test"}],
            max_tokens=1,
            timeout=5.0,
        )
    except Exception as e:
        error_msg = str(e)
        logger.info("Together.ai status check failed: %s", error_msg[:200])
        if "401" in error_msg or "Unauthorized" in error_msg or "Invalid" in error_msg:
            return "TOGETHER_API_KEY is invalid or expired"
        if "timeout" in error_msg.lower():
            return "API request timed out (check network)"
        return f"API test failed: {error_msg[:100]}"
    return ""


def get_ai_status() -> Dict[str, Any]:
    """Report whether suggestion refinement can reach the provider."""
    global _status_cache, _cache_timestamp

    if _status_cache is not None and (time.time() - _cache_timestamp) < CACHE_TTL:
        return _status_cache

    key = get_together_api_key()
    model = get_together_model()
    reason = _key_problem(key)
    available = False
    if reason is None:
        reason = _probe(model)
        available = not reason
        if available:
            reason = "AI suggestion refinement available"

    _status_cache = {
        "available": available,
        "reason": reason,
        "api_key_set": bool(key),
        "refinement_enabled": ai_refinement_enabled(),
        "model": model,
    }
    _cache_timestamp = time.time()
    return _status_cache
