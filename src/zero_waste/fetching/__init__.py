"""HTTP helpers for fetching remote recipe files."""

from .session import HttpSession
from .retry import retry_fetch

__all__ = ["HttpSession", "retry_fetch"]
