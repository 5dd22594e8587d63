from web2driver.commands.service import (
	DEFAULT_EXCLUDED_COMMANDS,
	ELEMENT_COMMANDS,
	RESERVED_NAMES,
	SESSION_ALIASES,
	bind_commands,
	compile_commands,
	get_default_command_table,
	load_protocol,
	load_protocols,
	to_snake_case,
)
from web2driver.commands.views import (
	CommandData,
	CommandEntry,
	CommandNameCollision,
	CommandScope,
	CommandTable,
	ProtocolLoadError,
	ProtocolSpec,
)

__all__ = [
	'CommandData',
	'CommandEntry',
	'CommandNameCollision',
	'CommandScope',
	'CommandTable',
	'DEFAULT_EXCLUDED_COMMANDS',
	'ELEMENT_COMMANDS',
	'ProtocolLoadError',
	'ProtocolSpec',
	'RESERVED_NAMES',
	'SESSION_ALIASES',
	'bind_commands',
	'compile_commands',
	'get_default_command_table',
	'load_protocol',
	'load_protocols',
	'to_snake_case',
]
