"""Models for protocol specifications and the compiled command table"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from web2driver.exceptions import Web2DriverError


class CommandScope(str, Enum):
	SESSION = 'session'
	ELEMENT = 'element'


class CommandData(BaseModel):
	"""Descriptor for one route/method pair in a protocol specification.

	Only `command` is required; everything else the protocol file carries
	(description, ref, parameters, ...) is kept as extra fields.
	"""

	model_config = ConfigDict(extra='allow', frozen=True)

	command: str = Field(min_length=1)
	description: str | None = None
	ref: str | None = None


class ProtocolSpec(BaseModel):
	"""One protocol table: route -> HTTP method -> command descriptor"""

	model_config = ConfigDict(frozen=True)

	name: str
	routes: dict[str, dict[str, CommandData]] = Field(default_factory=dict)

	def iter_commands(self):
		"""Yield (route, http_method, command_data) in declaration order"""
		for route, methods in self.routes.items():
			for method, data in methods.items():
				yield route, method.upper(), data


class CommandEntry(BaseModel):
	"""A single compiled command.

	Attributes:
		name: Public method name after aliasing
		scope: Whether the command is bound on sessions or on elements
		command: Protocol command id, which is also the transport client's method name
		method: HTTP method of the winning definition, None if no protocol defined the command
		route: Route of the winning definition, None if no protocol defined the command
		protocol: Name of the protocol that supplied the winning definition
		description: Human readable description from the protocol file, if any
	"""

	model_config = ConfigDict(frozen=True)

	name: str
	scope: CommandScope
	command: str
	method: str | None = None
	route: str | None = None
	protocol: str | None = None
	description: str | None = None


class CommandTable(BaseModel):
	"""Collision-free mapping from public name to command, per scope"""

	model_config = ConfigDict(frozen=True)

	session: dict[str, CommandEntry] = Field(default_factory=dict)
	element: dict[str, CommandEntry] = Field(default_factory=dict)

	def entries(self, scope: CommandScope) -> dict[str, CommandEntry]:
		return self.session if scope == CommandScope.SESSION else self.element

	def get(self, name: str, scope: CommandScope = CommandScope.SESSION) -> CommandEntry | None:
		return self.entries(scope).get(name)

	def __len__(self) -> int:
		return len(self.session) + len(self.element)


class CommandNameCollision(Web2DriverError):
	"""Raised at compile time when two commands would be published under one name

	Attributes:
		name: The public name both commands resolve to
		scope: Scope in which the collision happened
		commands: Command ids (or reserved member names) competing for the name
	"""

	def __init__(self, name: str, scope: CommandScope, commands: list[str]):
		self.name = name
		self.scope = scope
		self.commands = commands
		super().__init__(f"Command name '{name}' in {scope.value} scope is claimed by more than one command: {commands}")


class ProtocolLoadError(Web2DriverError):
	"""Raised when a protocol specification file cannot be read or parsed"""

	pass
