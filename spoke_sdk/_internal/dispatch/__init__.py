"""Request dispatch for the Spoke client."""

from spoke_sdk._internal.dispatch.dispatcher import RequestDispatcher
from spoke_sdk._internal.dispatch.models import RequestContext

__all__ = [
    "RequestDispatcher",
    "RequestContext",
]
