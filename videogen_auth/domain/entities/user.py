"""
User Entity

The only persisted identity record. Lifecycle transitions live here as
explicit methods so use cases never poke at code/expiry pairs directly.
"""

import hmac
from datetime import datetime, timedelta
from typing import List, Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import CodeStatus, Plan

if TYPE_CHECKING:
    from videogen_auth.app.services.password_hasher import IPasswordHasher


def _check_code(
    stored: Optional[str],
    expires_at: Optional[datetime],
    submitted: str,
    now: datetime,
) -> CodeStatus:
    if not stored or expires_at is None:
        return CodeStatus.missing
    if now >= expires_at:
        return CodeStatus.expired
    if not hmac.compare_digest(stored.encode(), submitted.encode()):
        return CodeStatus.mismatch
    return CodeStatus.valid


class User(SQLModel, table=True):
    """
    User entity - a single account of the service.

    Business Rules:
    - Email is unique and stored case-folded
    - Password stored as bcrypt hash, written only through set_password()
    - Verification code and its expiry are set and cleared together
    - Reset code and its expiry are set and cleared together
    - Consuming a code clears it; there is no "used" flag
    - Unverified accounts cannot log in
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    plan: Plan = Field(default=Plan.free)
    is_admin: bool = Field(default=False)
    connected_platforms: List[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
    videos_generated: int = Field(default=0, ge=0)

    # Email verification
    is_email_verified: bool = Field(default=False)
    email_verification_code: Optional[str] = Field(default=None, max_length=6)
    email_verification_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Password reset
    password_reset_code: Optional[str] = Field(default=None, max_length=6)
    password_reset_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_is_email_verified", "is_email_verified"),)

    @property
    def plan_name(self) -> str:
        """Plan as its wire value, whether loaded as enum or raw string"""
        return Plan(self.plan).value

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------

    def set_password(self, plaintext: str, hasher: "IPasswordHasher") -> None:
        self.password_hash = hasher.hash(plaintext)

    def verify_password(self, plaintext: str, hasher: "IPasswordHasher") -> bool:
        return hasher.verify(plaintext, self.password_hash)

    # ------------------------------------------------------------------
    # Email verification code
    # ------------------------------------------------------------------

    def issue_verification_code(self, code: str, now: datetime, ttl: timedelta) -> None:
        """Store a fresh code, replacing any previous one."""
        self.email_verification_code = code
        self.email_verification_expires_at = now + ttl
        self.updated_at = now

    def check_verification_code(self, code: str, now: datetime) -> CodeStatus:
        return _check_code(
            self.email_verification_code,
            self.email_verification_expires_at,
            code,
            now,
        )

    def clear_verification_code(self) -> None:
        self.email_verification_code = None
        self.email_verification_expires_at = None

    def mark_email_verified(self, now: datetime) -> None:
        self.is_email_verified = True
        self.clear_verification_code()
        self.record_login(now)

    # ------------------------------------------------------------------
    # Password reset code
    # ------------------------------------------------------------------

    def issue_reset_code(self, code: str, now: datetime, ttl: timedelta) -> None:
        self.password_reset_code = code
        self.password_reset_expires_at = now + ttl
        self.updated_at = now

    def check_reset_code(self, code: str, now: datetime) -> CodeStatus:
        return _check_code(
            self.password_reset_code,
            self.password_reset_expires_at,
            code,
            now,
        )

    def clear_reset_code(self) -> None:
        self.password_reset_code = None
        self.password_reset_expires_at = None

    # ------------------------------------------------------------------
    # Stamps
    # ------------------------------------------------------------------

    def record_login(self, now: datetime) -> None:
        self.last_login_at = now
        self.updated_at = now

    def touch(self, now: datetime) -> None:
        self.updated_at = now
