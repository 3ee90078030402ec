"""
SMSLY Message Library
=====================
Message entities for the SMS gateway API.
"""

__version__ = "0.1.0"

# Config
from smsly_message.config import MessageConfig, get_config

# Errors
from smsly_message.exceptions import MessageError, ReadOnlyViolation, ResponseDecodeError

# Encoding
from smsly_message.messaging import (
    EncodingType,
    MessageType,
    detect_encoding,
    requires_unicode_encoding,
)

# Messages
from smsly_message.message import (
    Message,
    MessageKind,
    LegacyMessageView,
    PartedResponse,
    FlatResponse,
    parse_response,
    text_message,
    unicode_message,
    binary_message,
    wap_push_message,
    vcard_message,
    vcal_message,
)

# Serialization
from smsly_message.serialization import encode_request, decode_response, attach_response

__all__ = [
    # Config
    "MessageConfig",
    "get_config",
    # Errors
    "MessageError",
    "ReadOnlyViolation",
    "ResponseDecodeError",
    # Encoding
    "EncodingType",
    "MessageType",
    "detect_encoding",
    "requires_unicode_encoding",
    # Messages
    "Message",
    "MessageKind",
    "LegacyMessageView",
    "PartedResponse",
    "FlatResponse",
    "parse_response",
    "text_message",
    "unicode_message",
    "binary_message",
    "wap_push_message",
    "vcard_message",
    "vcal_message",
    # Serialization
    "encode_request",
    "decode_response",
    "attach_response",
]
