"""AI service: Together.ai rewording of suggested fixes."""

import logging

from deps import Any, OpenAI, Optional

from baseline_checker.issue import CompatibilityIssue

from ..config import get_together_api_key, get_together_model

logger = logging.getLogger(__name__)

TOGETHER_BASE_URL = "https://api.together.xyz/v1"


def _client() -> Optional[Any]:
    """Return OpenAI-compatible client for Together.ai, or None if no key is set."""
    key = get_together_api_key()
    if not key:
        return None
    return OpenAI(api_key=key, base_url=TOGETHER_BASE_URL)


def _issue_summary(issue: CompatibilityIssue) -> str:
    parts = [
        f"Feature: {issue.feature_name} ({issue.baseline_status.value}, {issue.severity.value} severity)",
        f"Description: {issue.description}",
    ]
    if issue.browsers_unsupported:
        browsers = ", ".join(
            f"{b.name} {b.version}: {b.support_status.value}" for b in issue.browsers_unsupported
        )
        parts.append(f"Browsers lacking support: {browsers}")
    if issue.locations:
        parts.append(f"Code: {issue.locations[0].matched_text[:200]}")
    parts.append(f"Current suggestion: {issue.suggested_fix}")
    return "\n".join(parts)


def _strip_code_fence(text: str) -> str:
    """Strip a surrounding markdown code block if present."""
    if not text.startswith("```"):
        return text
    lines = text.split("\n")[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines).strip()


class AIService:
    """Together.ai-backed suggestion refiner.

    Implements the ``refine(issue)`` hook of the checker: returns better
    wording for an issue's suggested fix, or None so the catalog text stays.
    """

    def refine(self, issue: CompatibilityIssue) -> Optional[str]:
        client = _client()
        if not client:
            return None
        prompt = (
            "You are a web platform compatibility expert. A static checker found a feature that "
            "is not supported by every targeted browser (Chrome 109, Firefox 115, Safari 15.6, "
            "Edge 109).\n\n"
            f"{_issue_summary(issue)}\n\n"
            "Rewrite the suggestion as one short, actionable paragraph: name the fallback, "
            "polyfill or feature detection to use. Do not repeat the issue. Plain text only."
        )
        try:
            r = client.chat.completions.create(
                model=get_together_model(),
                messages=[{"role": "user", "content": prompt}],
                max_tokens=300,
            )
            if r.choices and r.choices[0].message.content:
                return _strip_code_fence(r.choices[0].message.content.strip()) or None
        except Exception as e:
            logger.warning("Together.ai refinement failed for %s: %s", issue.feature_name, e)
        return None
