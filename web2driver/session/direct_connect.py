"""Direct-connect capability handling.

A remote end may answer session creation with capabilities pointing at a different
endpoint that every later command should be sent to.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DIRECT_CONNECT_PREFIX = 'directConnect'
VENDOR_PREFIX = 'appium:'
DIRECT_CONNECT_FIELDS = ('Protocol', 'Host', 'Port', 'Path')
DIRECT_CONNECT_CAPS = tuple(f'{DIRECT_CONNECT_PREFIX}{field}' for field in DIRECT_CONNECT_FIELDS)
PREFIXED_DIRECT_CAPS = tuple(f'{VENDOR_PREFIX}{cap}' for cap in DIRECT_CONNECT_CAPS)


class DirectConnectTarget(BaseModel):
	"""Endpoint advertised through direct-connect capabilities"""

	model_config = ConfigDict(frozen=True)

	protocol: Any
	host: Any
	port: Any
	path: Any

	@property
	def url(self) -> str:
		return f'{self.protocol}://{self.host}:{self.port}{self.path}'


def resolve_direct_connect(capabilities: Mapping[str, Any] | None) -> DirectConnectTarget | None:
	"""Work out which endpoint, if any, the capabilities redirect the session to.

	The vendor-prefixed family is used only when more of its keys are present than of the
	unprefixed family; on a tie the unprefixed family wins. A family with some but not all
	four keys is ignored with a warning.

	Returns:
		The advertised target, or None when the original endpoint should be kept
	"""
	if not capabilities:
		return None

	direct_caps_present = [cap for cap in DIRECT_CONNECT_CAPS if cap in capabilities]
	prefixed_caps_present = [cap for cap in PREFIXED_DIRECT_CAPS if cap in capabilities]
	use_prefixed_caps = len(prefixed_caps_present) > len(direct_caps_present)
	caps_to_use = prefixed_caps_present if use_prefixed_caps else direct_caps_present

	if not caps_to_use:
		return None

	if len(caps_to_use) < len(DIRECT_CONNECT_CAPS):
		logger.warning(
			f'Direct connect caps were used, but not all were present. '
			f'Required caps are: {json.dumps(list(DIRECT_CONNECT_CAPS))}. '
			f'Caps received were: {json.dumps(caps_to_use)}. Will use original server information.'
		)
		return None

	prefix = f'{VENDOR_PREFIX}{DIRECT_CONNECT_PREFIX}' if use_prefixed_caps else DIRECT_CONNECT_PREFIX
	return DirectConnectTarget(
		protocol=capabilities[f'{prefix}Protocol'],
		host=capabilities[f'{prefix}Host'],
		port=capabilities[f'{prefix}Port'],
		path=capabilities[f'{prefix}Path'],
	)
