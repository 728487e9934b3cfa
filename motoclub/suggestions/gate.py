"""Submission gate for "suggest a product".

Decides whether a suggestion is written to the content store, dropped
as spam while reporting success, or rejected with a user-facing error.

Checks run in order and stop at the first decision:
1. Rate limit per client address
2. Honeypot field
3. Form fill time
4. URL validation
5. Content store write
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol
from urllib.parse import urlsplit

import structlog

from motoclub.content.exceptions import ContentWriteError

logger = structlog.get_logger()

UNKNOWN_CLIENT = "unknown"
TITLE_PREFIX = "User Suggestion - "

MESSAGE_RATE_LIMITED = "Too many submissions. Please try again later."
MESSAGE_EMPTY_URL = "Please provide a product URL."
MESSAGE_INVALID_URL = "Please provide a valid URL (e.g. https://example.com)."
MESSAGE_WRITE_FAILED = "Something went wrong. Please try again."


class Outcome(str, Enum):
    """Result of evaluating a suggestion."""

    ACCEPTED = "accepted"
    SILENT_ACCEPT = "silent_accept"
    RATE_LIMITED = "rate_limited"
    INVALID = "invalid"
    WRITE_FAILED = "write_failed"


@dataclass
class SuggestionRequest:
    """An inbound product suggestion.

    Payload fields arrive unvalidated; anything other than a string URL
    is treated as a missing URL.

    Attributes:
        url: Candidate product URL as typed by the user.
        client_address: Network address; None shares the unknown bucket.
        honeypot: Hidden form field that humans leave empty.
        elapsed_ms: Time since the form was rendered, if reported.
    """

    url: Any
    client_address: str | None = None
    honeypot: Any = None
    elapsed_ms: Any = None


@dataclass
class GateResult:
    """Decision for a suggestion."""

    outcome: Outcome
    message: str | None = None

    @property
    def is_success(self) -> bool:
        """Whether the caller should be told the submission worked."""
        return self.outcome in (Outcome.ACCEPTED, Outcome.SILENT_ACCEPT)


class SuggestionWriter(Protocol):
    """Write path for accepted suggestions."""

    async def submit_suggestion(self, title: str, url: str) -> str: ...


class Limiter(Protocol):
    def hit(self, key: str) -> bool: ...


def parse_http_url(value: str) -> str | None:
    """Get the hostname of an absolute http(s) URL.

    Args:
        value: Candidate URL, already trimmed.

    Returns:
        Hostname, or None if the value is not an absolute http(s) URL.
    """
    try:
        parts = urlsplit(value)
        hostname = parts.hostname
    except ValueError:
        return None

    if parts.scheme not in ("http", "https"):
        return None
    if not hostname or any(ch.isspace() for ch in parts.netloc):
        return None
    return hostname


def reported_elapsed_ms(value: Any) -> float | None:
    """Form fill time as a number, or None if absent or not numeric."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def suggestion_title(hostname: str) -> str:
    """Title of the content store row for a suggestion."""
    return f"{TITLE_PREFIX}{hostname}"


class SubmissionGate:
    """Abuse filter and validator in front of the suggestion write."""

    def __init__(
        self,
        limiter: Limiter,
        writer: SuggestionWriter,
        min_elapsed_ms: float = 2000,
    ) -> None:
        """Initialize gate.

        Args:
            limiter: Per-address rate limiter.
            writer: Destination for accepted suggestions.
            min_elapsed_ms: Fastest plausible human form fill.
        """
        self.limiter = limiter
        self.writer = writer
        self.min_elapsed_ms = min_elapsed_ms

    async def evaluate(self, request: SuggestionRequest) -> GateResult:
        """Decide what happens to a suggestion.

        Args:
            request: The inbound suggestion.

        Returns:
            Gate decision with a user-facing message for errors.
        """
        client = request.client_address or UNKNOWN_CLIENT

        if not self.limiter.hit(client):
            return GateResult(Outcome.RATE_LIMITED, MESSAGE_RATE_LIMITED)

        if request.honeypot:
            logger.info("Suggestion dropped", client=client, reason="honeypot")
            return GateResult(Outcome.SILENT_ACCEPT)

        elapsed_ms = reported_elapsed_ms(request.elapsed_ms)
        if elapsed_ms is not None and elapsed_ms < self.min_elapsed_ms:
            logger.info(
                "Suggestion dropped",
                client=client,
                reason="too_fast",
                elapsed_ms=elapsed_ms,
            )
            return GateResult(Outcome.SILENT_ACCEPT)

        url = request.url.strip() if isinstance(request.url, str) else ""
        if not url:
            logger.info("Suggestion rejected", client=client, reason="empty_url")
            return GateResult(Outcome.INVALID, MESSAGE_EMPTY_URL)

        hostname = parse_http_url(url)
        if hostname is None:
            logger.info("Suggestion rejected", client=client, reason="invalid_url")
            return GateResult(Outcome.INVALID, MESSAGE_INVALID_URL)

        try:
            await self.writer.submit_suggestion(suggestion_title(hostname), url)
        except ContentWriteError as e:
            logger.error(
                "Failed to submit product suggestion",
                client=client,
                error=e.message,
                details=e.details,
            )
            return GateResult(Outcome.WRITE_FAILED, MESSAGE_WRITE_FAILED)
        except Exception as e:
            logger.exception(
                "Unexpected error submitting product suggestion",
                client=client,
                error=str(e),
            )
            return GateResult(Outcome.WRITE_FAILED, MESSAGE_WRITE_FAILED)

        logger.info("Suggestion accepted", client=client, hostname=hostname)
        return GateResult(Outcome.ACCEPTED)
