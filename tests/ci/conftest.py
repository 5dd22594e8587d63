from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from web2driver.commands import ProtocolSpec, compile_commands

W3C_KEY = 'element-6066-11e4-a52e-4f735466cecf'

WEBDRIVER_ROUTES = {
	'/session': {'POST': {'command': 'newSession', 'description': 'Create a new session.'}},
	'/session/:sessionId': {'DELETE': {'command': 'deleteSession', 'description': 'Delete the session.'}},
	'/session/:sessionId/url': {
		'GET': {'command': 'getUrl', 'description': 'Get the current page URL.'},
		'POST': {'command': 'navigateTo', 'description': 'Navigate to a new URL.'},
	},
	'/session/:sessionId/title': {'GET': {'command': 'getTitle', 'description': 'Get the current page title.'}},
	'/session/:sessionId/element': {'POST': {'command': 'findElement'}},
	'/session/:sessionId/elements': {'POST': {'command': 'findElements'}},
	'/session/:sessionId/element/:elementId/element': {'POST': {'command': 'findElementFromElement'}},
	'/session/:sessionId/element/:elementId/elements': {'POST': {'command': 'findElementsFromElement'}},
	'/session/:sessionId/element/:elementId/text': {'GET': {'command': 'getElementText'}},
	'/session/:sessionId/element/:elementId/click': {'POST': {'command': 'elementClick'}},
	'/session/:sessionId/element/:elementId/attribute/:name': {'GET': {'command': 'getElementAttribute'}},
	'/session/:sessionId/execute/sync': {'POST': {'command': 'executeScript'}},
	'/session/:sessionId/execute/async': {'POST': {'command': 'executeAsyncScript'}},
}

APPIUM_ROUTES = {
	'/session/:sessionId/appium/device/lock': {'POST': {'command': 'lock', 'description': 'Lock the device.'}},
	'/session/:sessionId/appium/app/launch': {'POST': {'command': 'launchApp'}},
	'/session/:sessionId/element/:elementId/value': {'POST': {'command': 'elementSendKeys'}},
}


@pytest.fixture
def protocol_specs() -> list[ProtocolSpec]:
	return [
		ProtocolSpec(name='webdriver', routes=WEBDRIVER_ROUTES),
		ProtocolSpec(name='appium', routes=APPIUM_ROUTES),
	]


@pytest.fixture
def command_table(protocol_specs):
	return compile_commands(protocol_specs)


@pytest.fixture
def client():
	"""Transport double: every protocol command is an AsyncMock child"""
	mock_client = AsyncMock()
	mock_client.sessionId = 'session-123'
	mock_client.options = SimpleNamespace(
		capabilities={'platformName': 'Android'},
		protocol='http',
		hostname='localhost',
		port=4723,
		path='/wd/hub',
	)
	return mock_client
