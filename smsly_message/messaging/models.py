"""
Messaging Models
================
Wire types and GSM 03.38 character tables used for encoding detection.
"""

from enum import Enum


class EncodingType(str, Enum):
    """SMS encoding types."""
    GSM7 = "GSM-7"
    UCS2 = "UCS-2"


class MessageType(str, Enum):
    """Values of the ``type`` request field accepted by the SMS API."""
    TEXT = "text"
    UNICODE = "unicode"
    BINARY = "binary"
    WAP_PUSH = "wappush"
    VCARD = "vcard"
    VCAL = "vcal"


# GSM-7 character set (basic)
GSM7_BASIC = set(
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

# GSM-7 extended characters (escaped, count as 2)
GSM7_EXTENDED = set("€^{}\\[~]|\f")
