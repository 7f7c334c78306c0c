"""
Provider adapters for the host's chat abstraction.

Protocol defines WHAT, implementations define HOW.
"""

from .base import ApiHandler
from .errors import ClientAcquisitionFailed, ClientNotInitialized, GatewayError
from .puter import PuterHandler

__all__ = [
    "ApiHandler",
    "PuterHandler",
    "ClientAcquisitionFailed",
    "ClientNotInitialized",
    "GatewayError",
]
