from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from web2driver.exceptions import Web2DriverError


class ElementKey(str, Enum):
	"""Identifier conventions a remote end can use for element references.

	The member value is the key that appears on the wire.
	"""

	W3C = 'element-6066-11e4-a52e-4f735466cecf'
	JSONWP = 'ELEMENT'


W3C_ELEMENT_KEY = ElementKey.W3C.value
JWP_ELEMENT_KEY = ElementKey.JSONWP.value


class MalformedElementResponse(Web2DriverError, ValueError):
	"""Raised when a find response carries no usable element identifier

	Attributes:
		response: The raw response that could not be resolved
	"""

	def __init__(self, response: Any):
		self.response = response
		super().__init__(f'Bad findElement response; did not have element key. Response was: {response!r}')


class ElementReference(BaseModel):
	"""Server-issued element id together with the convention it was issued in."""

	model_config = ConfigDict(frozen=True)

	key: ElementKey
	id: str = Field(min_length=1)

	@classmethod
	def from_response(cls, response: Any) -> 'ElementReference':
		"""Pick the identifier convention of a raw find response.

		The W3C key wins whenever it holds a value; the JSONWP key is only consulted otherwise.

		Raises:
			MalformedElementResponse: If neither key holds a non-empty string
		"""
		if not isinstance(response, Mapping):
			raise MalformedElementResponse(response)

		key = ElementKey.W3C if response.get(W3C_ELEMENT_KEY) else ElementKey.JSONWP
		element_id = response.get(key.value)
		if not element_id or not isinstance(element_id, str):
			raise MalformedElementResponse(response)

		return cls(key=key, id=element_id)

	def to_wire(self) -> dict[str, str]:
		return {self.key.value: self.id}
