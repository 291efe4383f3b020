"""
Services module containing the account and enrollment services.
"""

from .account_service import AccountService
from .enrollment_service import EnrollmentService, summarize

__all__ = [
    "AccountService",
    "EnrollmentService",
    "summarize",
]
