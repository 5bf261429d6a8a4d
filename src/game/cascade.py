"""Cascading error filtering for submission errors."""

from typing import List

from .models import ValidationError


# Cascade level constants
FATAL = 0  # Malformed submission - nothing else is meaningful
CRITICAL = 1  # Word not in dictionary
HIGH = 2  # Word cannot be traced on the board
MEDIUM = 3  # Wildcard conflicts between usable words
LOW = 4  # Duplicate words


def filter_cascading_errors(
    errors: List[ValidationError],
    max_errors: int = 5
) -> List[ValidationError]:
    """
    Reduce a submission's errors to what the player should fix first.

    A fatal error means the words were never looked up, so only fatal errors
    are shown. Otherwise every error is kept, most severe first; wildcard
    conflicts only involve words that passed the dictionary and path checks,
    so they stay visible next to those failures.

    Args:
        errors: Validation errors in the order they were found
        max_errors: Maximum number of errors to return (default 5)

    Returns:
        At most max_errors errors, the last one summarizing any that were cut
    """
    fatal = [err for err in errors if err.cascade_level == FATAL]
    shown = fatal or sorted(errors, key=lambda err: err.cascade_level)

    if len(shown) <= max_errors:
        return shown

    kept = shown[:max_errors - 1]
    hidden = len(shown) - len(kept)
    kept.append(ValidationError(
        code="ADDITIONAL_ERRORS",
        message=f"... and {hidden} more error{'s' if hidden > 1 else ''}. Fix the above first.",
        cascade_level=kept[-1].cascade_level
    ))
    return kept
