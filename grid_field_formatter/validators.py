"""Validation of the grid column count."""
from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

MIN_COLUMNS = 1
MAX_COLUMNS = 12

# Plain decimal notation with an optional exponent; no digit separators.
NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def to_number(value):
    """Return ``value`` as a finite ``Decimal`` or ``None`` if not numeric."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not NUMERIC_RE.match(text):
        return None
    try:
        number = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


COLUMNS_LABEL = _("Number of columns")
COLUMNS_MESSAGE = _("%(name)s must be a number between %(min)d and %(max)d.")


def columns_message(name=COLUMNS_LABEL) -> str:
    return COLUMNS_MESSAGE % {"name": name, "min": MIN_COLUMNS, "max": MAX_COLUMNS}


def validate_columns(value, name=COLUMNS_LABEL):
    """Reject non-numeric values and values outside ``0 < value < 13``."""
    number = to_number(value)
    if number is None or not (0 < number < MAX_COLUMNS + 1):
        raise ValidationError(
            COLUMNS_MESSAGE,
            code="invalid_columns",
            params={"name": name, "min": MIN_COLUMNS, "max": MAX_COLUMNS},
        )


def coerce_columns(value) -> int:
    """Turn an accepted column value into the stored whole number."""
    number = to_number(value)
    if number is None:
        return MIN_COLUMNS
    return min(MAX_COLUMNS, max(MIN_COLUMNS, math.floor(number)))


__all__ = [
    "COLUMNS_LABEL",
    "MIN_COLUMNS",
    "MAX_COLUMNS",
    "coerce_columns",
    "columns_message",
    "to_number",
    "validate_columns",
]
