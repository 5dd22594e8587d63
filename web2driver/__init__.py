from web2driver.config import CONFIG
from web2driver.logging_config import setup_logging

if CONFIG.WEB2DRIVER_SETUP_LOGGING:
	setup_logging()

from web2driver.commands import (  # noqa: E402
	CommandEntry,
	CommandNameCollision,
	CommandScope,
	CommandTable,
	ProtocolLoadError,
	ProtocolSpec,
	compile_commands,
	get_default_command_table,
	load_protocol,
	load_protocols,
)
from web2driver.element import Element, ElementKey, ElementReference, MalformedElementResponse  # noqa: E402
from web2driver.exceptions import Web2DriverError  # noqa: E402
from web2driver.session import DirectConnectTarget, ElementNotFoundTimeout, Session, resolve_direct_connect  # noqa: E402

__all__ = [
	'CommandEntry',
	'CommandNameCollision',
	'CommandScope',
	'CommandTable',
	'DirectConnectTarget',
	'Element',
	'ElementKey',
	'ElementNotFoundTimeout',
	'ElementReference',
	'MalformedElementResponse',
	'ProtocolLoadError',
	'ProtocolSpec',
	'Session',
	'Web2DriverError',
	'compile_commands',
	'get_default_command_table',
	'load_protocol',
	'load_protocols',
	'resolve_direct_connect',
	'setup_logging',
]
