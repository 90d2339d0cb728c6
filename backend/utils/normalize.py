"""
Input Normalization Utilities
=============================

Single source of truth for normalizing external inputs: query params,
request bodies, persisted slices and model lookup responses.

Usage:
    from utils.normalize import to_str, to_enum, ValidationError

    @schools_bp.route("/progress/<school_id>", methods=["PUT"])
    def set_progress(school_id):
        try:
            status = to_enum(body.get("status"), ProgressStatus, field="status")
        except ValidationError as e:
            return validation_error_response(e)
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional, Type, TypeVar, Union

E = TypeVar('E', bound=Enum)


class ValidationError(ValueError):
    """Raised when input cannot be normalized to expected type."""

    def __init__(self, message: str, field: str = None, received_value=None):
        super().__init__(message)
        self.field = field
        self.received_value = received_value


def to_date(
    value: Optional[Union[str, date]],
    *,
    default: Optional[date] = None,
    field: str = None
) -> Optional[date]:
    """
    Convert an ISO calendar date (YYYY-MM-DD) to a date object.

    Application dates carry no time or timezone component, so datetimes
    are truncated to their date.

    Raises:
        ValidationError: If value cannot be parsed as date
    """
    if value is None or value == "":
        return default
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (ValueError, TypeError):
        raise ValidationError(
            f"Expected date (YYYY-MM-DD), got {type(value).__name__}: {value!r}",
            field=field,
            received_value=value
        )


def to_str(
    value: Optional[str],
    *,
    default: Optional[str] = None,
    strip: bool = True,
    field: str = None
) -> Optional[str]:
    """
    Normalize string input, optionally stripping whitespace.

    Whitespace-only input is treated as empty.
    """
    if value is None or value == "":
        return default
    result = str(value)
    if strip:
        result = result.strip()
    if result == "":
        return default
    return result


def to_enum(
    value: Optional[str],
    enum_class: Type[E],
    *,
    default: Optional[E] = None,
    field: str = None
) -> Optional[E]:
    """
    Convert string to enum member.

    Matching order: exact value, case-insensitive value, member name
    ("british" -> Curriculum.BRITISH).

    Raises:
        ValidationError: If value doesn't match any enum member
    """
    if value is None or value == "":
        return default
    if isinstance(value, enum_class):
        return value

    for member in enum_class:
        if member.value == value:
            return member

    if isinstance(value, str):
        value_lower = value.lower()
        for member in enum_class:
            if str(member.value).lower() == value_lower:
                return member

        try:
            return enum_class[value.upper().replace(" ", "_").replace("-", "_")]
        except KeyError:
            pass

    valid_values = [m.value for m in enum_class]
    raise ValidationError(
        f"Expected one of {valid_values}, got: {value!r}",
        field=field,
        received_value=value
    )


def validation_error_response(error: ValidationError) -> tuple:
    """
    Convert ValidationError to the standard 400 error envelope.

    Usage:
        try:
            status = to_enum(raw, ProgressStatus, field="status")
        except ValidationError as e:
            return validation_error_response(e)
    """
    from api.middleware.error_envelope import make_error_response

    return make_error_response(
        "INVALID_PARAMS",
        str(error),
        field=error.field,
        details={"received_value": str(error.received_value)}
        if error.received_value is not None else None,
    )
