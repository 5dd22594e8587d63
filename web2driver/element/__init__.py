from web2driver.element.service import Element, element_from_response
from web2driver.element.views import (
	JWP_ELEMENT_KEY,
	W3C_ELEMENT_KEY,
	ElementKey,
	ElementReference,
	MalformedElementResponse,
)

__all__ = [
	'Element',
	'ElementKey',
	'ElementReference',
	'JWP_ELEMENT_KEY',
	'MalformedElementResponse',
	'W3C_ELEMENT_KEY',
	'element_from_response',
]
