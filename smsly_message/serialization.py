"""
Message Serialization
=====================
JSON encoding of outgoing request fields and decoding of gateway replies.
"""

import json
from typing import Any, Dict, Mapping, Union

import structlog

from smsly_message.exceptions import ResponseDecodeError
from smsly_message.message import Message

logger = structlog.get_logger(__name__)


def encode_request(message: Message) -> str:
    """Commit the message's request fields and encode them as JSON."""
    return json.dumps(message.commit_request())


def decode_response(body: Union[bytes, str, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Decode a gateway reply.
    
    Args:
        body: Raw reply body, or an already decoded JSON object
        
    Returns:
        Decoded JSON object
        
    Raises:
        ResponseDecodeError: If the body is not a JSON object
    """
    if isinstance(body, Mapping):
        return dict(body)
    
    try:
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        data = json.loads(body)
    except ValueError as e:
        logger.warning("Gateway reply is not valid JSON", error=str(e))
        raise ResponseDecodeError("Gateway reply is not valid JSON", body=body) from e
    
    if not isinstance(data, dict):
        raise ResponseDecodeError(
            f"Expected a JSON object, got {type(data).__name__}", body=body
        )
    return data


def attach_response(message: Message, body: Union[bytes, str, Mapping[str, Any]]) -> Message:
    """Decode ``body`` and attach it to ``message``."""
    message.set_response(decode_response(body))
    return message
