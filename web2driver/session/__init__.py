from web2driver.session.direct_connect import DirectConnectTarget, resolve_direct_connect
from web2driver.session.service import Session, marshal_script_args
from web2driver.session.views import ElementNotFoundTimeout

__all__ = [
	'DirectConnectTarget',
	'ElementNotFoundTimeout',
	'Session',
	'marshal_script_args',
	'resolve_direct_connect',
]
