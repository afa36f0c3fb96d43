"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .email_service import BrevoEmailService, EmailServiceError
from .submission_service import SubmissionResult, SubmissionService, SubmissionStage

__all__ = [
    "BrevoEmailService",
    "EmailServiceError",
    "SubmissionResult",
    "SubmissionService",
    "SubmissionStage",
]
