"""Compile protocol specifications into a command table and bind it onto objects"""

import json
import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from functools import cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from web2driver.commands.views import (
	CommandEntry,
	CommandNameCollision,
	CommandScope,
	CommandTable,
	ProtocolLoadError,
	ProtocolSpec,
)
from web2driver.config import CONFIG

logger = logging.getLogger(__name__)

# Commands that Session and Element implement by hand
DEFAULT_EXCLUDED_COMMANDS = frozenset(
	{
		'newSession',
		'findElement',
		'findElements',
		'findElementFromElement',
		'findElementsFromElement',
		'executeScript',
		'executeAsyncScript',
	}
)

SESSION_ALIASES: dict[str, str] = {
	'deleteSession': 'quit',
}

# Protocol command id -> public element method name
ELEMENT_COMMANDS: dict[str, str] = {
	'isElementSelected': 'is_selected',
	'isElementDisplayed': 'is_displayed',
	'getElementAttribute': 'get_attribute',
	'getElementCSSValue': 'get_css_value',
	'getElementText': 'get_text',
	'getElementTagName': 'get_tag_name',
	'getElementLocation': 'get_location',
	'getElementLocationInView': 'get_location_in_view',
	'getElementProperty': 'get_property',
	'getElementRect': 'get_rect',
	'getElementSize': 'get_size',
	'getElementEnabled': 'get_enabled',
	'elementClick': 'click',
	'elementSubmit': 'submit',
	'elementClear': 'clear',
	'elementSendKeys': 'send_keys',
}

# Hand-written members that generated commands must never shadow
RESERVED_NAMES: dict[CommandScope, frozenset[str]] = {
	CommandScope.SESSION: frozenset(
		{
			'client',
			'command_table',
			'poll_interval',
			'capabilities',
			'session_id',
			'connected_url',
			'update_connection_details',
			'find_element',
			'find_elements',
			'wait_for_element',
			'wait_for_elements',
			'execute_script',
			'execute_async_script',
		}
	),
	CommandScope.ELEMENT: frozenset(
		{
			'client',
			'command_table',
			'parent',
			'reference',
			'element_key',
			'element_id',
			'find_element',
			'find_elements',
			'execute_command_argument',
		}
	),
}

_SNAKE_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')


def to_snake_case(command: str) -> str:
	"""getElementCSSValue -> get_element_css_value"""
	return _SNAKE_BOUNDARY.sub('_', command).lower()


def compile_commands(
	specs: Sequence[ProtocolSpec],
	exclusions: Iterable[str] = DEFAULT_EXCLUDED_COMMANDS,
	element_commands: Mapping[str, str] = ELEMENT_COMMANDS,
	aliases: Mapping[str, str] = SESSION_ALIASES,
	reserved: Mapping[CommandScope, Iterable[str]] = RESERVED_NAMES,
) -> CommandTable:
	"""Merge protocol specifications into one command table.

	Specs, routes and methods are walked in order. A command id defined more than once
	keeps a single entry, and the definition processed last supplies its route and method.

	Args:
		specs: Protocol specifications in precedence order
		exclusions: Command ids that get no generated method at all
		element_commands: Command id -> public name for element-scoped commands. These never
			appear in the session scope and are always present in the element scope.
		aliases: Command id -> public name overrides for session-scoped commands
		reserved: Public names per scope that belong to hand-written members

	Returns:
		CommandTable: The immutable compiled table

	Raises:
		CommandNameCollision: If two command ids, or a command id and a reserved member,
			resolve to the same public name within one scope
	"""
	excluded = set(exclusions)
	definitions: dict[str, tuple[str, str, str, str | None]] = {}

	for spec in specs:
		for route, method, data in spec.iter_commands():
			if data.command in excluded:
				continue
			if data.command in definitions:
				previous_protocol = definitions[data.command][2]
				logger.debug(f'{data.command}: definition from {spec.name} replaces the one from {previous_protocol}')
			# re-insert so iteration order follows the winning definition
			definitions.pop(data.command, None)
			definitions[data.command] = (route, method, spec.name, data.description)

	session_entries: list[CommandEntry] = []
	for command, (route, method, protocol, description) in definitions.items():
		if command in element_commands:
			continue
		session_entries.append(
			CommandEntry(
				name=aliases.get(command, to_snake_case(command)),
				scope=CommandScope.SESSION,
				command=command,
				method=method,
				route=route,
				protocol=protocol,
				description=description,
			)
		)

	element_entries: list[CommandEntry] = []
	for command, name in element_commands.items():
		if command in excluded:
			continue
		route, method, protocol, description = definitions.get(command, (None, None, None, None))
		element_entries.append(
			CommandEntry(
				name=name,
				scope=CommandScope.ELEMENT,
				command=command,
				method=method,
				route=route,
				protocol=protocol,
				description=description,
			)
		)

	table = CommandTable(
		session=_index_by_name(session_entries, CommandScope.SESSION, reserved.get(CommandScope.SESSION, ())),
		element=_index_by_name(element_entries, CommandScope.ELEMENT, reserved.get(CommandScope.ELEMENT, ())),
	)
	logger.debug(
		f'Compiled {len(table.session)} session commands and {len(table.element)} element commands '
		f'from {len(specs)} protocol specs'
	)
	return table


def _index_by_name(entries: list[CommandEntry], scope: CommandScope, reserved: Iterable[str]) -> dict[str, CommandEntry]:
	reserved_names = set(reserved)
	indexed: dict[str, CommandEntry] = {}
	for entry in entries:
		if entry.name in reserved_names:
			raise CommandNameCollision(entry.name, scope, [entry.command, f'<{entry.name}>'])
		if entry.name in indexed:
			raise CommandNameCollision(entry.name, scope, [indexed[entry.name].command, entry.command])
		indexed[entry.name] = entry
	return indexed


def load_protocol(path: str | Path, name: str | None = None) -> ProtocolSpec:
	"""Load a protocol specification from a JSON file of the form {route: {METHOD: {"command": ...}}}

	Args:
		path: Path to the JSON file
		name: Name recorded on compiled entries, defaults to the file stem

	Raises:
		ProtocolLoadError: If the file is missing, not JSON, or not shaped like a protocol table
	"""
	path = Path(path)
	try:
		data: Any = json.loads(path.read_text(encoding='utf-8'))
	except (OSError, json.JSONDecodeError) as e:
		raise ProtocolLoadError(f'Could not read protocol file {path}: {e}') from e

	if not isinstance(data, dict):
		raise ProtocolLoadError(f'Protocol file {path} must contain a JSON object, got {type(data).__name__}')

	try:
		return ProtocolSpec(name=name or path.stem, routes=data)
	except ValidationError as e:
		raise ProtocolLoadError(f'Protocol file {path} is not a valid protocol table: {e}') from e


def load_protocols(paths: Iterable[str | Path]) -> list[ProtocolSpec]:
	return [load_protocol(path) for path in paths]


def get_default_command_table() -> CommandTable:
	"""Command table for the protocol files named in WEB2DRIVER_PROTOCOL_PATHS.

	Compiled once per distinct list of paths.
	"""
	return _compile_paths(tuple(CONFIG.WEB2DRIVER_PROTOCOL_PATHS))


@cache
def _compile_paths(paths: tuple[Path, ...]) -> CommandTable:
	if not paths:
		logger.debug('No protocol files configured, only element commands will be available')
	table = compile_commands(load_protocols(paths))
	logger.info(f'Loaded {len(table)} commands from {len(paths)} protocol files')
	return table


def bind_commands(target: Any, client: Any, entries: Mapping[str, CommandEntry], *prefix_args: Any) -> None:
	"""Install one async callable per entry as an instance attribute of target.

	Each callable awaits the client method named after the entry's command id, passing
	prefix_args (the element id for element commands) ahead of the caller's arguments.
	"""
	for name, entry in entries.items():
		setattr(target, name, _make_command(client, entry, prefix_args))


def _make_command(client: Any, entry: CommandEntry, prefix_args: tuple[Any, ...]):
	async def command(*args: Any) -> Any:
		return await getattr(client, entry.command)(*prefix_args, *args)

	command.__name__ = entry.name
	command.__qualname__ = entry.name
	command.__doc__ = entry.description or f'Send the {entry.command} command.'
	return command
