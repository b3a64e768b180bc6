from postkeeper import utils
from postkeeper.errors import ValidationError

MAX_PASSWORD_BYTES = 72


def validate_registration(name: str, email: str, password_hash: str) -> None:
    """Validate the fields of a new user record.

    Raises:
        ValidationError: If a field is missing or the email is malformed
    """
    if not name or not name.strip():
        raise ValidationError("Name is required")

    if not email or not email.strip():
        raise ValidationError("Email is required")

    if not utils.is_email(email):
        raise ValidationError(f"Invalid email: '{email}'")

    if not password_hash:
        raise ValidationError("Password is required")


def validate_password(password: str, confirm_password: str) -> None:
    if not password:
        raise ValidationError("Password is required")

    # bcrypt only accepts up to 72 bytes
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

    if password != confirm_password:
        raise ValidationError("Passwords do not match")
