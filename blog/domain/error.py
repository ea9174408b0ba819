"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Required input is missing, empty or conflicts with stored state.

    Always raised before anything is written to the store.
    """

    pass


def require_text(value: str | None, message: str) -> str:
    """Return `value` unchanged, or raise if it is empty or only whitespace.

    Args:
        value: Text supplied by the caller
        message: Error message for the ValidationError

    Returns:
        The value, unchanged

    Raises:
        ValidationError: If value is None, empty or blank
    """
    if value is None or not value.strip():
        raise ValidationError(message)
    return value
