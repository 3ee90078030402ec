"""
Message Encoding
================
Encoding detection and wire type constants for outbound SMS.
"""

from .models import EncodingType, MessageType, GSM7_BASIC, GSM7_EXTENDED
from .encoding import detect_encoding, requires_unicode_encoding

__all__ = [
    # Models
    "EncodingType",
    "MessageType",
    "GSM7_BASIC",
    "GSM7_EXTENDED",
    # Encoding
    "detect_encoding",
    "requires_unicode_encoding",
]
