"""Domain models for Mentor Match."""

from .models import Profile

__all__ = ["Profile"]
