"""Product suggestion intake.

Rate limiting and spam filtering in front of the single content
store write the site performs.
"""

from motoclub.content.repository import get_content_repository
from motoclub.infrastructure.config import settings
from motoclub.suggestions.gate import (
    GateResult,
    Outcome,
    SubmissionGate,
    SuggestionRequest,
)
from motoclub.suggestions.rate_limit import (
    InMemoryRateLimitStore,
    RateLimitEntry,
    RateLimiter,
    RateLimitStore,
)

# Global gate instance; owns the shared rate limit table
_submission_gate: SubmissionGate | None = None


def get_submission_gate() -> SubmissionGate:
    """Get the submission gate singleton.

    Returns:
        SubmissionGate instance.
    """
    global _submission_gate
    if _submission_gate is None:
        _submission_gate = SubmissionGate(
            limiter=RateLimiter(
                max_requests=settings.suggest_rate_limit_max,
                window_seconds=settings.suggest_rate_limit_window_seconds,
            ),
            writer=get_content_repository(),
            min_elapsed_ms=settings.suggest_min_elapsed_ms,
        )
    return _submission_gate


__all__ = [
    "GateResult",
    "InMemoryRateLimitStore",
    "Outcome",
    "RateLimitEntry",
    "RateLimitStore",
    "RateLimiter",
    "SubmissionGate",
    "SuggestionRequest",
    "get_submission_gate",
]
