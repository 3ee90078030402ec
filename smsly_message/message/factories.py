"""
Message Factories
=================
Builders for send-mode messages of each concrete kind.
"""

import binascii
from typing import Any, Dict, Optional, Union

from smsly_message.config import MessageConfig, get_config
from smsly_message.message.entity import Message
from smsly_message.message.kinds import BINARY, TEXT, UNICODE, VCAL, VCARD, WAP_PUSH, MessageKind


def _hex(value: Union[bytes, str]) -> str:
    # bytes are raw payload; strings are taken as already hex encoded
    if isinstance(value, (bytes, bytearray)):
        return binascii.hexlify(bytes(value)).decode("ascii")
    return str(value)


def _build(kind: MessageKind, to: str, from_: str, content: Dict[str, Any],
           additional: Optional[Dict[str, Any]], **kwargs) -> Message:
    return Message(to, from_, additional, kind=kind, content=content, **kwargs)


def text_message(to: str, from_: str, text: str, additional: Optional[Dict[str, Any]] = None, **kwargs):
    """Build a plain text SMS."""
    return _build(TEXT, to, from_, {"text": str(text)}, additional, **kwargs)


def unicode_message(to: str, from_: str, text: str, additional: Optional[Dict[str, Any]] = None, **kwargs):
    """Build an SMS sent with UCS-2 encoding."""
    return _build(UNICODE, to, from_, {"text": str(text)}, additional, **kwargs)


def binary_message(
    to: str,
    from_: str,
    body: Union[bytes, str],
    udh: Union[bytes, str],
    protocol_id: Optional[int] = None,
    additional: Optional[Dict[str, Any]] = None,
    **kwargs,
):
    """
    Build a binary SMS.
    
    Args:
        to: Recipient number
        from_: Sender number or alphanumeric ID
        body: Payload, raw bytes or a hex string
        udh: User data header, raw bytes or a hex string
        protocol_id: Optional TP-PID value
    """
    content: Dict[str, Any] = {"body": _hex(body), "udh": _hex(udh)}
    if protocol_id is not None:
        content["protocol-id"] = int(protocol_id)
    return _build(BINARY, to, from_, content, additional, **kwargs)


def wap_push_message(
    to: str,
    from_: str,
    title: str,
    url: str,
    validity: Optional[int] = None,
    additional: Optional[Dict[str, Any]] = None,
    config: Optional[MessageConfig] = None,
    **kwargs,
):
    """Build a WAP push message; ``validity`` is in milliseconds."""
    config = config or get_config()
    content = {
        "title": str(title),
        "url": str(url),
        "validity": int(validity if validity is not None else config.wap_validity_ms),
    }
    return _build(WAP_PUSH, to, from_, content, additional, config=config, **kwargs)


def vcard_message(to: str, from_: str, vcard: str, additional: Optional[Dict[str, Any]] = None, **kwargs):
    """Build a vCard message."""
    return _build(VCARD, to, from_, {"vcard": str(vcard)}, additional, **kwargs)


def vcal_message(to: str, from_: str, vcal: str, additional: Optional[Dict[str, Any]] = None, **kwargs):
    """Build a vCal message."""
    return _build(VCAL, to, from_, {"vcal": str(vcal)}, additional, **kwargs)
