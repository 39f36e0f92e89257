"""
User-facing texts for the password strength message surface.

Every text is a str.format template filled with already-resolved numbers.
Hosts may override the three top-level texts through the ``messages`` key of
the client configuration.
"""
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .rules import Thresholds, ValidationResult


REQUIREMENTS_SUMMARY = (
    "The password must be at least {min_length} characters long and contain "
    "{min_numeric} digits and {min_special} special characters."
)
SERVER_REJECTION = (
    "Your password must contain at least {min_length} characters, "
    "{min_numeric} digits and {min_special} special characters."
)
LENGTH_ISSUE = "at least {min_length} characters (currently {length})"
NUMERIC_ISSUE = "at least {min_numeric} digits (currently {numeric_count})"
SPECIAL_ISSUE = "at least {min_special} special characters (currently {special_count})"
MISMATCH_ISSUE = "passwords must match"


@dataclass(frozen=True)
class MessageCatalog:
    requirements_met: str = "✓ All requirements met!"
    requirements_not_met: str = "The password needs"
    submit_disabled: str = "Please meet all password requirements before submitting."

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, str]] = None):
        catalog = cls()
        if not overrides:
            return catalog
        known = {
            key: str(value)
            for key, value in overrides.items()
            if key in ('requirements_met', 'requirements_not_met', 'submit_disabled') and value
        }
        return replace(catalog, **known)


def requirements_summary(thresholds: Thresholds) -> str:
    return REQUIREMENTS_SUMMARY.format(**thresholds.as_dict())


def server_rejection(thresholds: Thresholds) -> str:
    return SERVER_REJECTION.format(**thresholds.as_dict())


def unmet_requirements(result: ValidationResult, thresholds: Thresholds,
                       has_confirm: bool) -> list:
    """List one entry per unmet threshold, in display order."""
    issues = []
    if not result.length_ok:
        issues.append(LENGTH_ISSUE.format(min_length=thresholds.min_length, length=result.length))
    if not result.numeric_ok:
        issues.append(NUMERIC_ISSUE.format(
            min_numeric=thresholds.min_numeric, numeric_count=result.numeric_count))
    if not result.special_ok:
        issues.append(SPECIAL_ISSUE.format(
            min_special=thresholds.min_special, special_count=result.special_count))
    if has_confirm and not result.match_ok:
        issues.append(MISMATCH_ISSUE)
    return issues


def format_result(password: str, result: ValidationResult, thresholds: Thresholds,
                  has_confirm: bool, catalog: MessageCatalog = MessageCatalog()):
    """
    Build the message shown after an evaluation.

    Returns:
        tuple: (text, kind) where kind is 'success' or 'error'
    """
    if not password and not result.strength_ok:
        return requirements_summary(thresholds), 'error'

    issues = unmet_requirements(result, thresholds, has_confirm)
    if issues:
        return f"{catalog.requirements_not_met}: {', '.join(issues)}.", 'error'
    return catalog.requirements_met, 'success'
