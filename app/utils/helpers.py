import re
from typing import Iterable, List, Optional
from typing_extensions import Annotated
from fastapi import Path
from app.errors import ValidationError


# ASCII digits only; \d would also accept other scripts' digits
MOBILE_PHONE_PATTERN = re.compile(r"[0-9]{10}")
NUMERIC_ID_PATTERN = re.compile(r"-?[0-9]+")

# Range of the INTEGER primary/foreign key columns
MIN_INT_ID = -(2 ** 31)
MAX_INT_ID = 2 ** 31 - 1


def is_valid_mobile_phone(phone: str) -> bool:
    """Mobile numbers are stored as exactly 10 digits, no formatting"""
    return bool(phone) and MOBILE_PHONE_PATTERN.fullmatch(phone) is not None


def parse_numeric_id(value: str, name: str = "id") -> int:
    """
    Parse a path identifier that must be an integer.

    Raises ValidationError for anything else (empty, decimal, text) and for
    values outside the integer column range.
    """
    text = (value or "").strip()
    if not NUMERIC_ID_PATTERN.fullmatch(text):
        raise ValidationError(f"Invalid {name}: must be a number")

    number = int(text)
    if not MIN_INT_ID <= number <= MAX_INT_ID:
        raise ValidationError(f"Invalid {name}: out of range")
    return number


def missing_fields(data: dict, required: Iterable[str]) -> List[str]:
    """Names from ``required`` whose value is absent, None or an empty string"""
    return [name for name in required if data.get(name) is None or data.get(name) == ""]


def require_fields(data: dict, required: Iterable[str], message: Optional[str] = None) -> None:
    required = list(required)
    missing = missing_fields(data, required)
    if missing:
        raise ValidationError(
            message or "Missing required fields",
            required_fields=required,
            missing_fields=missing,
        )


# Path parameter bounded to the integer column range
PathId = Annotated[int, Path(ge=MIN_INT_ID, le=MAX_INT_ID)]
