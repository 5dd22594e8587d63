"""Tests for resolving raw find responses into element handles."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from web2driver.commands import CommandTable
from web2driver.element import (
	JWP_ELEMENT_KEY,
	W3C_ELEMENT_KEY,
	Element,
	ElementKey,
	ElementReference,
	MalformedElementResponse,
	element_from_response,
)


def make_parent(command_table=None):
	return SimpleNamespace(client=AsyncMock(), command_table=command_table or CommandTable())


def test_w3c_only_response_resolves_to_w3c_reference():
	ref = ElementReference.from_response({W3C_ELEMENT_KEY: 'abc'})

	assert ref.key is ElementKey.W3C
	assert ref.id == 'abc'


def test_jsonwp_only_response_resolves_to_jsonwp_reference():
	ref = ElementReference.from_response({JWP_ELEMENT_KEY: '5'})

	assert ref.key is ElementKey.JSONWP
	assert ref.id == '5'


def test_w3c_key_wins_when_both_present():
	ref = ElementReference.from_response({W3C_ELEMENT_KEY: 'modern', JWP_ELEMENT_KEY: 'legacy'})

	assert ref.key is ElementKey.W3C
	assert ref.id == 'modern'


def test_empty_w3c_value_falls_back_to_jsonwp():
	ref = ElementReference.from_response({W3C_ELEMENT_KEY: '', JWP_ELEMENT_KEY: 'legacy'})

	assert ref.key is ElementKey.JSONWP
	assert ref.id == 'legacy'


@pytest.mark.parametrize(
	'response',
	[
		{},
		{'value': 'abc'},
		{W3C_ELEMENT_KEY: ''},
		{JWP_ELEMENT_KEY: ''},
		{JWP_ELEMENT_KEY: None},
		{JWP_ELEMENT_KEY: 12},
		None,
		['abc'],
		'abc',
	],
)
def test_malformed_responses_raise(response):
	with pytest.raises(MalformedElementResponse) as exc_info:
		ElementReference.from_response(response)

	assert exc_info.value.response == response
	assert isinstance(exc_info.value, ValueError)


def test_wire_form_round_trips_through_resolver():
	for key in ElementKey:
		parent = make_parent()
		element = element_from_response({key.value: 'el-1'}, parent)

		again = element_from_response(element.execute_command_argument(), parent)

		assert again.element_key is element.element_key is key
		assert again.element_id == element.element_id == 'el-1'
		assert again == element


def test_element_shares_parent_client_and_table(command_table):
	parent = make_parent(command_table)

	element = element_from_response({W3C_ELEMENT_KEY: 'abc'}, parent)

	assert isinstance(element, Element)
	assert element.client is parent.client
	assert element.command_table is command_table
	assert element.parent is parent


def test_reference_is_immutable():
	ref = ElementReference.from_response({W3C_ELEMENT_KEY: 'abc'})

	with pytest.raises(Exception):
		ref.id = 'other'  # type: ignore[misc]


@pytest.mark.asyncio
async def test_element_commands_prefix_element_id(command_table):
	parent = make_parent(command_table)
	parent.client.getElementAttribute.return_value = 'submit'
	element = element_from_response({JWP_ELEMENT_KEY: '7'}, parent)

	await element.click()
	value = await element.get_attribute('type')

	parent.client.elementClick.assert_awaited_once_with('7')
	parent.client.getElementAttribute.assert_awaited_once_with('7', 'type')
	assert value == 'submit'


@pytest.mark.asyncio
async def test_element_commands_exist_without_protocol_definition(command_table):
	"""Element commands are bound even when no protocol defines their route"""
	parent = make_parent(command_table)
	element = element_from_response({W3C_ELEMENT_KEY: 'abc'}, parent)

	await element.is_displayed()

	parent.client.isElementDisplayed.assert_awaited_once_with('abc')
	assert command_table.element['is_displayed'].route is None


@pytest.mark.asyncio
async def test_find_element_from_element_nests_parent(command_table):
	parent = make_parent(command_table)
	parent.client.findElementFromElement.return_value = {W3C_ELEMENT_KEY: 'child'}
	element = element_from_response({W3C_ELEMENT_KEY: 'root'}, parent)

	child = await element.find_element('css selector', '.item')

	parent.client.findElementFromElement.assert_awaited_once_with('root', 'css selector', '.item')
	assert child.element_id == 'child'
	assert child.parent is element
	assert child.client is parent.client


@pytest.mark.asyncio
async def test_find_elements_from_element_keeps_each_key(command_table):
	parent = make_parent(command_table)
	parent.client.findElementsFromElement.return_value = [{W3C_ELEMENT_KEY: 'a'}, {JWP_ELEMENT_KEY: 'b'}]
	element = element_from_response({W3C_ELEMENT_KEY: 'root'}, parent)

	children = await element.find_elements('xpath', './/li')

	assert [(c.element_key, c.element_id) for c in children] == [(ElementKey.W3C, 'a'), (ElementKey.JSONWP, 'b')]


@pytest.mark.asyncio
async def test_find_elements_from_element_empty_is_not_an_error(command_table):
	parent = make_parent(command_table)
	parent.client.findElementsFromElement.return_value = []
	element = element_from_response({W3C_ELEMENT_KEY: 'root'}, parent)

	assert await element.find_elements('xpath', './/li') == []


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged(command_table):
	parent = make_parent(command_table)
	error = ConnectionError('socket closed')
	parent.client.getElementText.side_effect = error
	element = element_from_response({W3C_ELEMENT_KEY: 'abc'}, parent)

	with pytest.raises(ConnectionError) as exc_info:
		await element.get_text()

	assert exc_info.value is error
