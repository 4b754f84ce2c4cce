"""FFIEC UBPR protocol bridge integration."""

from econsim.infrastructure.integration.ffiec.adapter import (
    FFIECBridgeAdapter,
    bank_report_uri,
)
from econsim.infrastructure.integration.ffiec.client import (
    FFIECBridgeClient,
    FFIECBridgeError,
)

__all__ = [
    "FFIECBridgeAdapter",
    "FFIECBridgeClient",
    "FFIECBridgeError",
    "bank_report_uri",
]
