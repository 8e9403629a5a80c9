# utils/logger.py

import inspect
import logging
import sys

_DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s%(tag)s] %(message)s"
_DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

class TaggedFormatter(logging.Formatter):
	"""
	Formatter that tolerates records without a 'tag' attribute.

	Records emitted by third-party libraries (uvicorn, pymongo) do not go through
	the tagged adapter, so the tag is defaulted to an empty string here.
	"""
	def __init__(
		self,
		fmt=_DEFAULT_FORMAT,
		datefmt=_DEFAULT_DATE_FORMAT,
		**kwargs
	):
		super().__init__(fmt, datefmt, **kwargs)

	def format(self, record: logging.LogRecord) -> str:
		if not hasattr(record, "tag"):
			record.tag = ""
		return super().format(record)

def setup_logging(
	level: int | str = logging.INFO,
	stream=sys.stdout
) -> None:
	"""
	Configures the root logger once at startup.

	Args:
		level: Minimum level, either a logging constant or its name ("DEBUG").
		stream: Where log lines are written.
	"""
	root_logger = logging.getLogger()
	if isinstance(level, str):
		level = logging.getLevelName(level.upper())
		if not isinstance(level, int):
			level = logging.INFO

	# Repeated calls (tests, reloads) must not stack handlers
	if root_logger.handlers:
		root_logger.setLevel(level)
		return

	handler = logging.StreamHandler(stream=stream)
	handler.setFormatter(TaggedFormatter())
	root_logger.addHandler(handler)
	root_logger.setLevel(level)
	root_logger.debug("Logging configured")

def logger(
	tag: str | None = None,
	*,
	name: str | None = None
) -> logging.LoggerAdapter:
	"""
	Returns a LoggerAdapter that stamps records with `tag`.

	The logger name defaults to the calling module, so

		logger(tag="patients").info("Created patient")

	inside `booking/core/patients.py` prints as
	`[booking.core.patients:patients] Created patient`.
	"""
	logger_name = name
	if logger_name is None:
		frame = inspect.stack()[1]
		module = inspect.getmodule(frame[0])
		logger_name = module.__name__ if module else "booking"
	return logging.LoggerAdapter(
		logging.getLogger(logger_name),
		{"tag": f":{tag}" if tag is not None else ""}
	)
