"""
Validation utilities for customer requests
"""

import re
from datetime import date
from typing import Any, Optional

from customer_gateway.utils.exceptions import CustomerValidationError


CREATE_REQUIRED_FIELDS_MESSAGE = "Name, alias, and date of birth are required"
SEARCH_CRITERIA_REQUIRED_MESSAGE = "At least one search parameter (id, name, or alias) is required"
UPDATE_FIELDS_REQUIRED_MESSAGE = "At least one field to update is required"
INVALID_DATE_MESSAGE = "Date of birth must be in a valid date format"

# Extended ISO calendar date with fixed-width month and day
_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_date(value: Any) -> bool:
    """
    Check that value is a calendar date in YYYY-MM-DD form.

    The day must exist in the given month, so "2024-02-30" is rejected.
    Single-digit months or days ("2024-1-5") are rejected as well, as are the
    basic and week-date ISO forms that date.fromisoformat would accept.
    """
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.fullmatch(value):
        return False

    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_date_of_birth(dob: Optional[str]) -> None:
    """Raise CustomerValidationError unless dob is a valid calendar date"""
    if not is_valid_date(dob):
        raise CustomerValidationError(INVALID_DATE_MESSAGE)
