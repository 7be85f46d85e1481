"""
Application errors for clean API error handling.

GenerationError is raised by model clients when the upstream generation service
fails (non-success status, network error, SDK error). The API maps it to a
generic 500 response and logs the detail.
"""

from typing import Optional


class GenerationError(Exception):
    """Raised when the text-generation service cannot produce a reply."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)
