"""
Password composition policy.

A password must be at least MIN_PASSWORD_LENGTH code points long and
contain at least one uppercase letter, one lowercase letter, one number
and one special character. Every missing category is reported in a
single message.
"""

import unicodedata
from typing import Optional

from .exceptions import PasswordPolicyError

MIN_PASSWORD_LENGTH = 8

# Accepted as special even where Unicode classifies them otherwise.
SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{}|;:,.<>?")

UPPERCASE = "uppercase letter"
LOWERCASE = "lowercase letter"
NUMBER = "number"
SPECIAL = "special character"

# Reporting order for missing categories
CATEGORIES = (UPPERCASE, LOWERCASE, NUMBER, SPECIAL)


def classify_character(char: str) -> Optional[str]:
    """
    Return the policy category of a single character.

    Categories are tried in order (uppercase, lowercase, number, special)
    and the first match wins. Whitespace and other characters that fit
    no category return None.
    """
    category = unicodedata.category(char)
    if category == "Lu":
        return UPPERCASE
    if category == "Ll":
        return LOWERCASE
    if category.startswith("N"):
        return NUMBER
    if category[0] in ("P", "S") or char in SPECIAL_CHARACTERS:
        return SPECIAL
    return None


def missing_categories(password: str) -> list[str]:
    """List the categories the password lacks, in reporting order."""
    present = {classify_character(char) for char in password}
    return [category for category in CATEGORIES if category not in present]


def validate_password(password: str) -> None:
    """
    Check a candidate password against the composition policy.

    Args:
        password: Plaintext candidate

    Raises:
        PasswordPolicyError: With a human-readable reason when the
            password is too short or lacks a required category
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise PasswordPolicyError(
            f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    missing = missing_categories(password)
    if missing:
        raise PasswordPolicyError(
            f"password must contain at least one: {', '.join(missing)}"
        )
