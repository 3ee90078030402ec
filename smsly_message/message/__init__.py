"""
Message Entities
================
The message entity, its kinds, gateway responses and legacy access.
"""

from .response import PartedResponse, FlatResponse, Response, parse_response
from .kinds import (
    MessageKind,
    GENERIC,
    TEXT,
    UNICODE,
    BINARY,
    WAP_PUSH,
    VCARD,
    VCAL,
)
from .entity import Message, CLASS_FLASH
from .factories import (
    text_message,
    unicode_message,
    binary_message,
    wap_push_message,
    vcard_message,
    vcal_message,
)
from .legacy import LegacyMessageView

__all__ = [
    # Responses
    "PartedResponse",
    "FlatResponse",
    "Response",
    "parse_response",
    # Kinds
    "MessageKind",
    "GENERIC",
    "TEXT",
    "UNICODE",
    "BINARY",
    "WAP_PUSH",
    "VCARD",
    "VCAL",
    "text_message",
    "unicode_message",
    "binary_message",
    "wap_push_message",
    "vcard_message",
    "vcal_message",
    # Entity
    "Message",
    "CLASS_FLASH",
    # Legacy
    "LegacyMessageView",
]
