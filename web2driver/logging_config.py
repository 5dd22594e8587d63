import logging
import sys

from web2driver.config import CONFIG

LOGGER_NAME = 'web2driver'
_HANDLER_NAME = 'web2driver-stream'


def setup_logging(level: str | None = None, stream=None) -> logging.Logger:
	"""Attach a single stream handler to the web2driver logger.

	Calling this more than once only updates the level; the handler is never duplicated.

	Args:
		level: Logging level name (debug, info, warning, error). Defaults to WEB2DRIVER_LOGGING_LEVEL.
		stream: Stream for the handler. Defaults to stdout.

	Returns:
		The configured package logger
	"""
	level_name = (level or CONFIG.WEB2DRIVER_LOGGING_LEVEL).upper()
	log_level = getattr(logging, level_name, logging.INFO)

	logger = logging.getLogger(LOGGER_NAME)
	logger.setLevel(log_level)

	handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
	if handler is None:
		handler = logging.StreamHandler(stream or sys.stdout)
		handler.set_name(_HANDLER_NAME)
		handler.setFormatter(logging.Formatter('%(levelname)-8s [%(name)s] %(message)s'))
		logger.addHandler(handler)
	handler.setLevel(log_level)

	return logger
