# core/errors.py

class BookingError(Exception):
	"""Base for errors surfaced to API callers."""
	status_code: int = 500
	kind: str = "BookingError"

	def __init__(self, message: str):
		super().__init__(message)
		self.message = message

class NotFound(BookingError):
	"""Raised when a referenced patient or appointment does not exist."""
	status_code = 404
	kind = "NotFound"

class Conflict(BookingError):
	"""Raised when a write would break a uniqueness rule."""
	status_code = 409
	kind = "Conflict"

class InvalidArgument(BookingError):
	"""Raised for malformed ids, unparseable dates and rejected phone numbers."""
	status_code = 400
	kind = "InvalidArgument"
