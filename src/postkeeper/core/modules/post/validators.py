from postkeeper.errors import ValidationError


def validate_post_content(title: str, description: str) -> None:
    """Both fields are required and replaced together."""
    if not title or not title.strip():
        raise ValidationError("Title is required")

    if not description or not description.strip():
        raise ValidationError("Description is required")
