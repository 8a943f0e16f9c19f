"""
Auth Service Domain Entities

All domain entities organized by model.
"""

from .enums import CodeStatus, Plan, Platform
from .user import User

__all__ = [
    # Enums
    "CodeStatus",
    "Plan",
    "Platform",
    # Entities
    "User",
]
