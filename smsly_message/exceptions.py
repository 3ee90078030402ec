"""
Message Exceptions
==================
Exception classes raised by message entities and their codecs.
"""

from typing import Optional, Union


class MessageError(Exception):
    """Base exception for all message model errors."""
    pass


class ReadOnlyViolation(MessageError):
    """Raised when code tries to write a field that can no longer be modified."""
    
    def __init__(self, field, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f"can not modify `{field}` using array access")


class ResponseDecodeError(MessageError):
    """Raised when a gateway reply body is not a JSON object."""
    
    def __init__(self, message: str, body: Optional[Union[str, bytes]] = None):
        super().__init__(message)
        self.body = body
