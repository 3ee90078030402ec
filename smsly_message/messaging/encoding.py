"""
Encoding Detection
==================
Functions for SMS encoding detection and character counting.
"""

from .models import EncodingType, GSM7_BASIC, GSM7_EXTENDED


def detect_encoding(text: str) -> EncodingType:
    """
    Detect the required encoding for a message.
    
    Args:
        text: Message content
        
    Returns:
        EncodingType.GSM7 or EncodingType.UCS2
    """
    for char in text:
        if char not in GSM7_BASIC and char not in GSM7_EXTENDED:
            return EncodingType.UCS2
    return EncodingType.GSM7


def requires_unicode_encoding(text: str) -> bool:
    """True when ``text`` can not be represented in the GSM-7 alphabet."""
    return detect_encoding(text) == EncodingType.UCS2

