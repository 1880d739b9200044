"""
Pydantic models for stored user records.
"""
from authgate.models.user import UserRecord, UserSummary

__all__ = [
    "UserRecord",
    "UserSummary",
]
