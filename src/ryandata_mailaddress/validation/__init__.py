from ryandata_mailaddress.validation.base import (
    BaseValidator,
    MailValidationBase,
    ValidationBase,
)
from ryandata_mailaddress.validation.validators import (
    VALID_EMAIL_RE,
    EmailSyntaxValidator,
    EntryErrorValidator,
    create_default_validators,
    is_valid_email,
)

__all__ = [
    "BaseValidator",
    "EmailSyntaxValidator",
    "EntryErrorValidator",
    "MailValidationBase",
    "VALID_EMAIL_RE",
    "ValidationBase",
    "create_default_validators",
    "is_valid_email",
]
