# core/validation.py

import re
from datetime import datetime, timezone

from bson import ObjectId

from booking.core.errors import InvalidArgument

# Optional leading +, then digits with spaces, dots, dashes or parentheses between them
_PHONE_PATTERN = re.compile(r"^\+?[\d\s().-]+$")
_MIN_PHONE_DIGITS = 7
_MAX_PHONE_DIGITS = 15

def to_object_id(value: str, *, what: str = "id") -> ObjectId:
	"""Parses an API identifier into an ObjectId."""
	if not isinstance(value, str) or not ObjectId.is_valid(value):
		raise InvalidArgument(f"invalid {what}: '{value}'")
	return ObjectId(value)

def parse_date(value: str) -> datetime:
	"""
	Parses an ISO-8601 date or datetime string.

	Offsets are converted to UTC and dropped, which is how pymongo hands dates
	back, so values read from the store compare equal to freshly parsed ones.
	Sub-millisecond precision is cut for the same reason.
	"""
	try:
		parsed = datetime.fromisoformat(value.strip())
		if parsed.tzinfo is not None:
			parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
	except (ValueError, OverflowError, AttributeError):
		raise InvalidArgument(f"invalid date: '{value}'") from None
	return parsed.replace(microsecond=parsed.microsecond // 1000 * 1000)

def format_date(value: datetime) -> str:
	return value.isoformat()

def validate_phone(phone: str) -> bool:
	"""Loose international phone check: allowed characters and a sane digit count."""
	if not phone or not _PHONE_PATTERN.match(phone):
		return False
	digits = sum(ch.isdigit() for ch in phone)
	return _MIN_PHONE_DIGITS <= digits <= _MAX_PHONE_DIGITS

def require_text(**fields: str) -> None:
	"""Raises InvalidArgument naming the first blank field."""
	for name, value in fields.items():
		if value is None or not str(value).strip():
			raise InvalidArgument(f"{name} is required")
