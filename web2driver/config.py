"""Environment-driven configuration for web2driver.

Values are read from the environment on every access so tests and long-running
processes can change them without reimporting the package.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

TRUTHY_VALUES = {'1', 'true', 'yes', 'on'}


class Config:
	"""Lazily evaluated settings, one property per environment variable."""

	@property
	def WEB2DRIVER_LOGGING_LEVEL(self) -> str:
		return os.getenv('WEB2DRIVER_LOGGING_LEVEL', 'info').lower()

	@property
	def WEB2DRIVER_SETUP_LOGGING(self) -> bool:
		return os.getenv('WEB2DRIVER_SETUP_LOGGING', 'true').lower() in TRUTHY_VALUES

	@property
	def WEB2DRIVER_PROTOCOL_PATHS(self) -> list[Path]:
		"""Protocol JSON files compiled into the default command table, in precedence order."""
		raw = os.getenv('WEB2DRIVER_PROTOCOL_PATHS', '')
		return [Path(p).expanduser() for p in raw.split(os.pathsep) if p.strip()]

	@property
	def WEB2DRIVER_WAIT_POLL_INTERVAL(self) -> float:
		raw = os.getenv('WEB2DRIVER_WAIT_POLL_INTERVAL', '0')
		try:
			interval = float(raw)
		except ValueError:
			interval = -1.0
		if interval < 0:
			logger.warning(f'Invalid WEB2DRIVER_WAIT_POLL_INTERVAL={raw!r}, expected a non-negative number of seconds. Using 0.')
			return 0.0
		return interval


CONFIG = Config()
