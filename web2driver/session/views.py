from web2driver.exceptions import Web2DriverError


class ElementNotFoundTimeout(Web2DriverError, TimeoutError):
	"""Raised when a wait for one or more elements runs past its deadline

	Attributes:
		using: Locator strategy that was polled
		value: Locator value that was polled
		timeout_ms: The wait's timeout in milliseconds
		plural: True when waiting for a non-empty list of elements
	"""

	def __init__(self, using: str, value: str, timeout_ms: float, plural: bool = False):
		self.using = using
		self.value = value
		self.timeout_ms = timeout_ms
		self.plural = plural
		target = 'any elements' if plural else 'element'
		super().__init__(f"Could not find {target} using strategy {using} and value '{value}' after {timeout_ms}ms")
