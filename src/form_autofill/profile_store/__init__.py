"""Profile storage utilities."""

from .schemas import (
    ProfileDocument,
    ProfileDocumentError,
    ProfileEntry,
    parse_profile_document,
)
from .store import ImportResult, ProfileStore

__all__ = [
    "ImportResult",
    "ProfileDocument",
    "ProfileDocumentError",
    "ProfileEntry",
    "ProfileStore",
    "parse_profile_document",
]
