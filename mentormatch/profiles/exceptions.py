"""Exceptions raised while loading profile records."""

from pathlib import Path
from typing import List, Optional


class ProfileLoadError(Exception):
    """Raised when a profile file cannot be read or contains invalid records."""

    def __init__(self, message: str, path: Optional[Path] = None, errors: Optional[List[str]] = None):
        self.path = path
        self.errors = errors or []
        parts = [message]
        parts.extend(f"  - {error}" for error in self.errors)
        super().__init__("\n".join(parts))
