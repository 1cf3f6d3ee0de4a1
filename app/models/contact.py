from pydantic import BaseModel, StrictStr, ValidationError, field_validator
from dataclasses import dataclass, field
from typing import Any, List, Optional


class ContactSubmission(BaseModel):
    """
    A contact form submission from the landing page.

    name, email and phone are required and must contain something other than
    whitespace. No format checks are made on email or phone. Values are kept
    exactly as submitted.
    """
    name: StrictStr
    email: StrictStr
    phone: StrictStr
    service: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "email", "phone")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("service", "message", mode="before")
    @classmethod
    def drop_non_string(cls, value: Any) -> Optional[str]:
        # Optional fields of the wrong type are treated as not provided
        return value if isinstance(value, str) else None


@dataclass
class ContactValidation:
    """Outcome of validate_contact: either a submission or a list of violations"""
    submission: Optional[ContactSubmission] = None
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.submission is not None


def validate_contact(data: Any) -> ContactValidation:
    """
    Check a decoded JSON body against the ContactSubmission shape.

    Args:
        data: Whatever the request body decoded to

    Returns:
        ContactValidation: submission set when valid, errors set otherwise
    """
    if not isinstance(data, dict):
        return ContactValidation(errors=["body: expected a JSON object"])

    try:
        return ContactValidation(submission=ContactSubmission.model_validate(data))
    except ValidationError as e:
        errors = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            errors.append(f"{location}: {error['msg']}")
        return ContactValidation(errors=errors)
