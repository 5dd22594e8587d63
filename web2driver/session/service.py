"""Remote automation session bound to a transport client."""

import asyncio
import logging
import time
from collections.abc import Sequence
from typing import Any

from web2driver.commands.service import bind_commands, get_default_command_table
from web2driver.commands.views import CommandScope, CommandTable
from web2driver.config import CONFIG
from web2driver.element.service import Element, element_from_response
from web2driver.exceptions import Web2DriverError
from web2driver.session.direct_connect import resolve_direct_connect
from web2driver.session.views import ElementNotFoundTimeout

logger = logging.getLogger(__name__)


def marshal_script_args(args: Sequence[Any] | None) -> list[Any]:
	"""Replace Element handles with their wire form, leaving every other argument untouched"""
	return [arg.execute_command_argument() if isinstance(arg, Element) else arg for arg in args or []]


class Session:
	"""One remote automation session.

	All commands go through `client`, which must expose `options` (capabilities and
	connection target), `sessionId`, and one async method per protocol command id.

	Besides the hand-written find, wait and script methods, every session-scoped command in
	the command table is bound on the instance under its public name:
	```python
	session = Session(client)
	await session.navigate_to('https://example.com')
	title = await session.get_title()
	button = await session.wait_for_element(5000, 'css selector', '#submit')
	await button.click()
	await session.quit()
	```
	"""

	def __init__(self, client: Any, command_table: CommandTable | None = None, poll_interval: float | None = None):
		self.client = client
		self.command_table = command_table if command_table is not None else get_default_command_table()
		self.poll_interval = poll_interval if poll_interval is not None else CONFIG.WEB2DRIVER_WAIT_POLL_INTERVAL
		bind_commands(self, client, self.command_table.entries(CommandScope.SESSION))
		self.update_connection_details()

	def update_connection_details(self) -> None:
		"""Point the client at the direct-connect endpoint when the remote end advertised one"""
		target = resolve_direct_connect(self.capabilities)
		if target is None:
			return

		logger.info(f'Direct connect caps were provided, will send subsequent requests to {target.url}')
		options = self.client.options
		options.protocol = target.protocol
		options.hostname = target.host
		options.port = target.port
		options.path = target.path

	@property
	def connected_url(self) -> str:
		options = self.client.options
		return f'{options.protocol}://{options.hostname}:{options.port}{options.path}'

	@property
	def session_id(self) -> str | None:
		return self.client.sessionId

	@property
	def capabilities(self) -> dict[str, Any]:
		return self.client.options.capabilities

	async def find_element(self, using: str, value: str) -> Element:
		res = await self.client.findElement(using, value)
		return element_from_response(res, self)

	async def find_elements(self, using: str, value: str) -> list[Element]:
		ress = await self.client.findElements(using, value)
		return [element_from_response(res, self) for res in ress or []]

	async def wait_for_element(self, timeout_ms: float, using: str, value: str) -> Element:
		"""Poll find_element until it succeeds or timeout_ms elapses.

		Transport failures count as "not found yet". web2driver errors such as
		MalformedElementResponse are raised at once. The deadline is only checked between
		attempts, so a slow request can overrun it by that request's latency.

		Raises:
			ElementNotFoundTimeout: If no attempt succeeded before the deadline
		"""
		end = time.monotonic() + timeout_ms / 1000
		while time.monotonic() < end:
			try:
				return await self.find_element(using, value)
			except Web2DriverError:
				raise
			except Exception as e:
				logger.debug(f'Element {using}={value!r} not found yet: {type(e).__name__}: {e}')
			await asyncio.sleep(self.poll_interval)

		raise ElementNotFoundTimeout(using, value, timeout_ms)

	async def wait_for_elements(self, timeout_ms: float, using: str, value: str) -> list[Element]:
		"""Poll find_elements until it returns at least one element or timeout_ms elapses.

		Only an empty result is polled again; errors from find_elements propagate.

		Raises:
			ElementNotFoundTimeout: If every attempt before the deadline came back empty
		"""
		end = time.monotonic() + timeout_ms / 1000
		while time.monotonic() < end:
			els = await self.find_elements(using, value)
			if els:
				return els
			await asyncio.sleep(self.poll_interval)

		raise ElementNotFoundTimeout(using, value, timeout_ms, plural=True)

	async def _execute_base(self, command: str, script: str, args: Sequence[Any] | None) -> Any:
		return await getattr(self.client, command)(script, marshal_script_args(args))

	async def execute_script(self, script: str, args: Sequence[Any] | None = None) -> Any:
		return await self._execute_base('executeScript', script, args)

	async def execute_async_script(self, script: str, args: Sequence[Any] | None = None) -> Any:
		return await self._execute_base('executeAsyncScript', script, args)

	def __repr__(self) -> str:
		return f'<Session {self.session_id}>'
