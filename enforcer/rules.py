"""
Password strength rules.

The same rule set backs the live form controller and the server-side
validator, so both sides always agree on what counts as a digit and what
counts as a special character.
"""
import re
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidThresholds


SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'

NUMERIC_PATTERN = re.compile(r'[0-9]')
SPECIAL_PATTERN = re.compile('[' + re.escape(SPECIAL_CHARACTERS) + ']')

DEFAULT_MIN_LENGTH = 10
DEFAULT_MIN_NUMERIC = 2
DEFAULT_MIN_SPECIAL = 2

# Server-side rejection codes, in the order they are checked
PASSWORD_TOO_SHORT = 'password_too_short'
PASSWORD_INSUFFICIENT_NUMBERS = 'password_insufficient_numbers'
PASSWORD_INSUFFICIENT_SPECIAL = 'password_insufficient_special'


@dataclass(frozen=True)
class Thresholds:
    """Minimum counts a password has to reach."""

    min_length: int = DEFAULT_MIN_LENGTH
    min_numeric: int = DEFAULT_MIN_NUMERIC
    min_special: int = DEFAULT_MIN_SPECIAL

    def __post_init__(self):
        for name in ('min_length', 'min_numeric', 'min_special'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidThresholds(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise InvalidThresholds(f"{name} must not be negative, got {value}")

    def as_dict(self):
        return {
            'min_length': self.min_length,
            'min_numeric': self.min_numeric,
            'min_special': self.min_special,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one evaluation. Never mutated, always replaced."""

    length: int
    length_ok: bool
    numeric_count: int
    numeric_ok: bool
    special_count: int
    special_ok: bool
    match_ok: bool
    overall_valid: bool

    @property
    def strength_ok(self):
        return self.length_ok and self.numeric_ok and self.special_ok


def count_numeric(password: str) -> int:
    return len(NUMERIC_PATTERN.findall(password))


def count_special(password: str) -> int:
    return len(SPECIAL_PATTERN.findall(password))


def evaluate(password: str, thresholds: Thresholds,
             confirm_password: Optional[str] = None) -> ValidationResult:
    """
    Evaluate a password against the thresholds.

    Args:
        password: Candidate password
        thresholds: Thresholds to check against
        confirm_password: Value of the confirmation field, or None when the
            form has no confirmation field

    Returns:
        ValidationResult describing every sub-check
    """
    length = len(password)
    numeric_count = count_numeric(password)
    special_count = count_special(password)

    length_ok = length >= thresholds.min_length
    numeric_ok = numeric_count >= thresholds.min_numeric
    special_ok = special_count >= thresholds.min_special
    match_ok = True if confirm_password is None else password == confirm_password

    return ValidationResult(
        length=length,
        length_ok=length_ok,
        numeric_count=numeric_count,
        numeric_ok=numeric_ok,
        special_count=special_count,
        special_ok=special_ok,
        match_ok=match_ok,
        overall_valid=length_ok and numeric_ok and special_ok and match_ok,
    )


def check_strength(password: str, thresholds: Thresholds) -> Optional[str]:
    """
    Authoritative server-side check.

    Returns:
        None if the password is accepted, otherwise the code of the first
        failing rule (too short, then digits, then special characters).
    """
    result = evaluate(password, thresholds)
    if not result.length_ok:
        return PASSWORD_TOO_SHORT
    if not result.numeric_ok:
        return PASSWORD_INSUFFICIENT_NUMBERS
    if not result.special_ok:
        return PASSWORD_INSUFFICIENT_SPECIAL
    return None
