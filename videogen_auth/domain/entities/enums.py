"""
Auth Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Plan(str, Enum):
    """Subscription plan (stored only, not enforced here)"""

    free = "free"
    pro = "pro"
    premium = "premium"


class Platform(str, Enum):
    """Social platform a user can connect"""

    youtube = "youtube"
    instagram = "instagram"
    tiktok = "tiktok"
    facebook = "facebook"


class CodeStatus(str, Enum):
    """State of a stored one-time code relative to a submitted one"""

    valid = "valid"
    missing = "missing"
    expired = "expired"
    mismatch = "mismatch"
