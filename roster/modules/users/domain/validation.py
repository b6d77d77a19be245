"""
Payload Validation

Field-level checks for user create and update payloads.
Pure functions; nothing here reads or writes the store.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List

from roster.modules.users.domain.user import USER_FIELDS, UserPayload


MAX_LENGTHS = {
    "name": 100,
    "email": 200,
    "role": 100,
}

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)


@dataclass
class ValidationResult:
    """Outcome of validating a payload."""
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, field_name: str, message: str):
        self.errors.setdefault(field_name, []).append(message)


def is_valid_email(email: str) -> bool:
    """Check an address against the local@domain.tld shape."""
    if not email or not email.strip():
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def validate(payload: UserPayload, is_partial: bool = False) -> ValidationResult:
    """
    Validate a user payload.

    Args:
        payload: Candidate field values
        is_partial: True for updates, where absent or blank fields are
            left unchanged instead of being reported as missing

    Returns:
        ValidationResult with an ordered list of messages per failing field
    """
    result = ValidationResult()

    for field_name in USER_FIELDS:
        value = payload.provided(field_name)

        if value is None:
            if not is_partial:
                result.add(field_name, f"The {field_name} field is required.")
            continue

        max_length = MAX_LENGTHS[field_name]
        if len(value) > max_length:
            result.add(
                field_name,
                f"The field {field_name} must be a string with a maximum length of {max_length}."
            )

        if field_name == "email" and not is_valid_email(value):
            result.add(field_name, "Email format is invalid.")

    return result
