"""User module."""

from .models import AssigneeSummary, User

__all__ = ["AssigneeSummary", "User"]
