"""
Message Entity
==============
One outbound or inbound SMS exchanged with the gateway.

A message is built either from a recipient/sender pair (send mode) or from
the id of a message that was already sent (lookup mode). Request fields
accumulate through the setters; once the gateway reply is attached the
getters resolve fields against it, part by part for long text that the
gateway split into several messages.
"""

import copy
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional, Union

import structlog
from dateutil import parser as date_parser

from smsly_message.config import MessageConfig, get_config
from smsly_message.exceptions import ReadOnlyViolation
from smsly_message.message.kinds import GENERIC, UNICODE, MessageKind
from smsly_message.message.response import (
    FlatResponse,
    PartedResponse,
    Response,
    parse_response,
)
from smsly_message.messaging import requires_unicode_encoding

logger = structlog.get_logger(__name__)

# Data Coding Scheme class 0
CLASS_FLASH = 0


class Message:
    """
    SMS message entity.

    Usage:
        message = Message("447700900000", "SMSLY", {"text": "Hello"})
        message.request_dlr()
        payload = message.commit_request()
        ...
        message.set_response(reply)
        message.get_message_id()
    """

    def __init__(
        self,
        id_or_to: str,
        from_: Optional[str] = None,
        additional: Optional[Dict[str, Any]] = None,
        kind: MessageKind = GENERIC,
        detector: Optional[Callable[[str], bool]] = None,
        config: Optional[MessageConfig] = None,
        content: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            id_or_to: Message id (lookup mode) or recipient number (send mode)
            from_: Sender number or name; omit to look up an existing message
            additional: Extra request fields, overriding the defaults set here
            kind: Message kind, fixes the wire ``type``
            detector: Classifier telling whether text needs unicode encoding
            config: Overrides the process-wide configuration
            content: Fields of the message kind, written after ``additional``
        """
        self.kind = kind
        self._config = config or get_config()
        self._detector = detector or requires_unicode_encoding
        self._autodetect_encoding = self._config.autodetect_encoding
        self._id: Optional[str] = None
        self._index: Optional[int] = None
        self._request_data: Dict[str, Any] = {}
        self._committed: Optional[Dict[str, Any]] = None
        self._response: Optional[Response] = None
        self._data: Dict[str, Any] = {}
        self._parent: Optional["Message"] = None

        if from_ is None:
            self._id = id_or_to
            return

        self._request_data["to"] = str(id_or_to)
        self._request_data["from"] = str(from_)
        if kind.type is not None:
            self._request_data["type"] = kind.type.value

        self._request_data.update(additional or {})
        self._request_data.update(content or {})

    def __repr__(self) -> str:
        if self._id is not None:
            return f"<Message id={self._id!r}>"
        return f"<Message kind={self.kind.name} to={self._request_data.get('to')!r} parts={self.count()}>"

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def id(self) -> Optional[str]:
        """External id given in lookup mode."""
        return self._id

    @property
    def is_lookup(self) -> bool:
        return self._id is not None

    @property
    def index(self) -> Optional[int]:
        """Part pinned by :meth:`part`, None for the whole message."""
        return self._index

    @property
    def response(self) -> Optional[Response]:
        if self._parent is not None:
            return self._parent.response
        return self._response

    @property
    def request_data(self) -> Dict[str, Any]:
        """Current request fields, including changes not yet transmitted."""
        return dict(self._request_data)

    @property
    def committed_request_data(self) -> Optional[Dict[str, Any]]:
        """Request fields as they were read for transmission, if they were."""
        if self._committed is None:
            return None
        return dict(self._committed)

    # =========================================================================
    # Request mutators
    # =========================================================================

    def _set_request_data(self, name: str, value: Any) -> Dict[str, Any]:
        if self._parent is not None:
            raise ReadOnlyViolation(name, f"can not set request parameter `{name}` on a message part")
        if self.response is not None:
            raise ReadOnlyViolation(
                name,
                f"can not set request parameter `{name}` after a response has been attached",
            )
        self._request_data[name] = value
        return dict(self._request_data)

    def request_dlr(self, dlr: bool = True) -> Dict[str, Any]:
        """Ask for a delivery receipt."""
        return self._set_request_data("status-report-req", 1 if dlr else 0)

    def set_callback(self, callback: str) -> Dict[str, Any]:
        """Webhook the delivery receipt is sent to; overrides the account setting."""
        return self._set_request_data("callback", str(callback))

    def set_client_ref(self, ref: str) -> Dict[str, Any]:
        """
        Set the caller's own reference for this message.

        References longer than the configured limit (40 by default) are kept
        as given; the gateway rejects them when the request is sent.
        """
        ref = str(ref)
        if len(ref) > self._config.client_ref_max_length:
            logger.warning(
                "Client reference exceeds gateway limit",
                length=len(ref),
                limit=self._config.client_ref_max_length,
            )
        return self._set_request_data("client-ref", ref)

    def set_network(self, network: str) -> Dict[str, Any]:
        """MCCMNC of the network the recipient is registered with."""
        return self._set_request_data("network-code", str(network))

    def set_ttl(self, ttl: int) -> Dict[str, Any]:
        """How long delivery is attempted, in milliseconds."""
        return self._set_request_data("ttl", int(ttl))

    def set_class(self, message_class: int) -> Dict[str, Any]:
        """Data Coding Scheme class, 0 to 3."""
        return self._set_request_data("message-class", message_class)

    # =========================================================================
    # Encoding detection
    # =========================================================================

    def enable_encoding_detection(self) -> None:
        self._autodetect_encoding = True

    def disable_encoding_detection(self) -> None:
        self._autodetect_encoding = False

    def is_encoding_detection_enabled(self) -> bool:
        return self._autodetect_encoding

    def _detect_encoding(self) -> Optional[str]:
        declared = self.kind.type.value if self.kind.type is not None else None
        text = self._request_data.get("text")
        if text is None:
            return declared

        if self._detector(str(text)):
            return UNICODE.type.value
        return declared

    def _pre_get_request_data_hook(self) -> None:
        if not self.is_encoding_detection_enabled():
            return

        detected = self._detect_encoding()
        if detected is not None:
            self._request_data["type"] = detected
            logger.debug("Encoding detected", type=detected, kind=self.kind.name)

    def get_request_data(self, sent: bool = True) -> Dict[str, Any]:
        """
        Get the request fields.

        Args:
            sent: Prefer the fields as they were transmitted, when the
                request has already been committed

        Returns:
            Copy of the request fields
        """
        if sent and self._committed is not None:
            return dict(self._committed)

        self._pre_get_request_data_hook()
        return dict(self._request_data)

    def commit_request(self) -> Dict[str, Any]:
        """Read the request fields for transmission and remember them as sent."""
        self._committed = self.get_request_data(sent=False)
        return dict(self._committed)

    # =========================================================================
    # Response
    # =========================================================================

    def set_response(self, data: Union[Mapping[str, Any], Response]) -> None:
        """
        Attach the decoded gateway reply.

        Args:
            data: Decoded JSON object or an already parsed response
        """
        if self._parent is not None:
            raise ReadOnlyViolation("response", "can not attach a response to a message part")
        if self._response is not None:
            raise ReadOnlyViolation("response", "can not replace the response of a message")

        if isinstance(data, (PartedResponse, FlatResponse)):
            self._response = data
        else:
            self._response = parse_response(data)

        logger.debug(
            "Response attached",
            shape=type(self._response).__name__,
            parts=self._response.count(),
        )

    def count(self) -> int:
        """Number of parts in the reply, 0 without a parted reply."""
        if self.response is None:
            return 0
        return self.response.count()

    def part(self, index: int) -> "Message":
        """
        Virtual message whose getters always read part ``index``.

        The part follows the response of the message it was taken from and
        holds its own copy of the request fields; it can not be modified.
        """
        sub = copy.copy(self)
        sub._parent = self._parent or self
        sub._index = index
        sub._request_data = dict(self._request_data)
        sub._committed = None if self._committed is None else dict(self._committed)
        sub._data = dict(self._data)
        return sub

    def _get_message_data(self, name: str, index: Optional[int] = None) -> Any:
        if self.response is None:
            return None

        if self._index is not None:
            index = self._index
        elif index is None:
            index = self.count() - 1

        if isinstance(self.response, PartedResponse):
            return self.response.get_field(name, index)
        return self.response.get_field(name)

    def _flat_record(self) -> Dict[str, Any]:
        if isinstance(self.response, FlatResponse):
            return self.response.record
        return self._data

    def get_message_id(self, index: Optional[int] = None) -> Optional[str]:
        if self._id is not None:
            return self._id
        return self._get_message_data("message-id", index)

    def get_status(self, index: Optional[int] = None) -> Any:
        return self._get_message_data("status", index)

    def get_final_status(self, index: Optional[int] = None) -> Any:
        return self._get_message_data("final-status", index)

    def get_remaining_balance(self, index: Optional[int] = None) -> Any:
        return self._get_message_data("remaining-balance", index)

    def get_network(self, index: Optional[int] = None) -> Any:
        return self._get_message_data("network", index)

    def get_to(self, index: Optional[int] = None) -> Optional[str]:
        # send results and lookup results name these fields differently
        if isinstance(self.response, PartedResponse):
            return self._get_message_data("to", index)
        return self._flat_record().get("to")

    def get_price(self, index: Optional[int] = None) -> Any:
        if isinstance(self.response, PartedResponse):
            return self._get_message_data("message-price", index)
        return self._flat_record().get("price")

    def get_delivery_status(self) -> Any:
        """Delivery status of a looked up message; per-part status is :meth:`get_status`."""
        if isinstance(self.response, PartedResponse):
            return None
        return self._flat_record().get("status")

    def get_from(self) -> Optional[str]:
        return self._flat_record().get("from")

    def get_body(self) -> Optional[str]:
        return self._flat_record().get("body")

    def get_date_received(self) -> Optional[datetime]:
        value = self._flat_record().get("date-received")
        if value is None or isinstance(value, datetime):
            return value
        try:
            return date_parser.parse(str(value))
        except (ValueError, OverflowError) as e:
            logger.warning("Unparseable date-received", value=value, error=str(e))
            return None

    def get_delivery_error(self) -> Any:
        return self._flat_record().get("error-code")

    def get_delivery_label(self) -> Optional[str]:
        return self._flat_record().get("error-code-label")

    # =========================================================================
    # Hydration
    # =========================================================================

    def from_array(self, data: Dict[str, Any]) -> None:
        """Replace the flat record with ``data``."""
        self._data = data

    def to_array(self) -> Dict[str, Any]:
        return self._data
