"""Shared FastAPI dependencies."""

from motoclub.content.repository import ContentRepository, get_content_repository
from motoclub.suggestions import SubmissionGate, get_submission_gate


def get_repository() -> ContentRepository:
    """Get content repository dependency."""
    return get_content_repository()


def get_gate() -> SubmissionGate:
    """Get submission gate dependency."""
    return get_submission_gate()
