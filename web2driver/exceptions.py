class Web2DriverError(Exception):
	"""Base class for every error raised by web2driver itself.

	Transport errors raised by the underlying client are never wrapped in this type.
	"""
