"""
Message Kinds
=============
Descriptors for the concrete message kinds and the wire ``type`` each sends.
"""

from dataclasses import dataclass
from typing import Optional

from smsly_message.messaging import MessageType


@dataclass(frozen=True)
class MessageKind:
    """A message kind and the wire ``type`` it sends."""
    name: str
    type: Optional[MessageType] = None


GENERIC = MessageKind("generic")
TEXT = MessageKind("text", MessageType.TEXT)
UNICODE = MessageKind("unicode", MessageType.UNICODE)
BINARY = MessageKind("binary", MessageType.BINARY)
WAP_PUSH = MessageKind("wap_push", MessageType.WAP_PUSH)
VCARD = MessageKind("vcard", MessageType.VCARD)
VCAL = MessageKind("vcal", MessageType.VCAL)
