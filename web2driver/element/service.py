import logging
from typing import Any

from web2driver.commands.service import bind_commands
from web2driver.commands.views import CommandScope, CommandTable
from web2driver.element.views import ElementKey, ElementReference

logger = logging.getLogger(__name__)


class Element:
	"""Handle to one remote UI node.

	Elements are produced by find calls on a Session or another Element and share that
	parent's transport client and command table. Element-scoped commands from the table
	(click, get_text, get_attribute, ...) are bound on each instance and always send this
	element's id as their first argument.
	"""

	def __init__(self, reference: ElementReference, parent: Any):
		self.reference = reference
		self.parent = parent
		self.client = parent.client
		self.command_table: CommandTable = parent.command_table
		bind_commands(self, self.client, self.command_table.entries(CommandScope.ELEMENT), reference.id)

	@property
	def element_key(self) -> ElementKey:
		return self.reference.key

	@property
	def element_id(self) -> str:
		return self.reference.id

	def execute_command_argument(self) -> dict[str, str]:
		"""Wire form of this element when it is passed to a script"""
		return self.reference.to_wire()

	async def find_element(self, using: str, value: str) -> 'Element':
		res = await self.client.findElementFromElement(self.element_id, using, value)
		return element_from_response(res, self)

	async def find_elements(self, using: str, value: str) -> list['Element']:
		ress = await self.client.findElementsFromElement(self.element_id, using, value)
		return [element_from_response(res, self) for res in ress or []]

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Element):
			return NotImplemented
		return self.reference == other.reference

	def __hash__(self) -> int:
		return hash(self.reference)

	def __repr__(self) -> str:
		return f'<Element {self.element_key.name}:{self.element_id}>'


def element_from_response(res: Any, parent: Any) -> Element:
	"""Resolve a raw find response into an Element owned by parent.

	Raises:
		MalformedElementResponse: If the response has no usable element identifier
	"""
	reference = ElementReference.from_response(res)
	logger.debug(f'Resolved element {reference.id} using {reference.key.name} key')
	return Element(reference, parent)
