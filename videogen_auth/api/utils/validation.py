"""Field rules shared by request payloads."""

import re

CODE_PATTERN = r"^\d{6}$"
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 72
# bcrypt limit, counted on the UTF-8 encoding
PASSWORD_MAX_BYTES = 72
NAME_MAX_LENGTH = 50

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"\d")


def check_password_strength(password: str) -> str:
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes long")
    if not _LETTER.search(password) or not _DIGIT.search(password):
        raise ValueError("Password must contain at least one letter and one number")
    return password


def check_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise ValueError("Name is required")
    return name
