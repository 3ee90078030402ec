"""
Legacy Message Access
=====================
Read-only mapping and cursor access to a message, for callers that still
index messages like arrays instead of using the getters.

Usage:
    view = LegacyMessageView(message)
    view["message-id"]          # field of the latest part
    view[0]                     # first part
    for part in view: ...
"""

import warnings
from typing import Any, Dict, Iterator, Optional

import structlog

from smsly_message.exceptions import ReadOnlyViolation
from smsly_message.message.entity import Message
from smsly_message.message.response import FlatResponse, PartedResponse

logger = structlog.get_logger(__name__)


def _is_offset(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _lookup(data: Optional[Dict[Any, Any]], key: Any) -> Any:
    if not data:
        return None
    try:
        return data.get(key)
    except TypeError:
        return None


class LegacyMessageView:
    """
    Array-style view over a :class:`Message`.

    .. deprecated::
        Use the ``Message`` getters. This view will be removed once no
        caller indexes messages directly.
    """

    def __init__(self, message: Message):
        warnings.warn(
            f"Array access for {type(message).__name__} is deprecated, please use getter methods",
            DeprecationWarning,
            stacklevel=2,
        )
        logger.debug("Legacy message view created", message=repr(message))
        self._message = message
        self._current = 0

    @property
    def message(self) -> Message:
        return self._message

    def _response_view(self) -> Dict[Any, Any]:
        response = self._message.response
        if response is None:
            return {}

        if isinstance(response, FlatResponse):
            return response.record

        index = self._message.index
        if index is not None:
            return response.get_part(index) or {}
        return response.raw

    def _sources(self):
        yield self._response_view()
        yield self._message.committed_request_data
        yield self._message.request_data

    def __contains__(self, offset: Any) -> bool:
        for source in self._sources():
            if _lookup(source, offset) is not None:
                return True

        # split messages are reachable by virtual index
        return _is_offset(offset) and 0 <= offset < self._message.count()

    def __getitem__(self, offset: Any) -> Any:
        response = self._response_view()
        value = _lookup(response, offset)
        if value is not None:
            return value

        parts = self._parts() if self._message.index is None else ()
        if parts:
            if _is_offset(offset) and 0 <= offset < len(parts):
                return parts[offset]

            latest = self._message.count() - 1
            if 0 <= latest < len(parts):
                value = _lookup(parts[latest], offset)
                if value is not None:
                    return value

        value = _lookup(self._message.committed_request_data, offset)
        if value is not None:
            return value
        return _lookup(self._message.request_data, offset)

    def get(self, offset: Any, default: Any = None) -> Any:
        value = self[offset]
        return default if value is None else value

    def __setitem__(self, offset: Any, value: Any) -> None:
        raise ReadOnlyViolation(offset)

    def __delitem__(self, offset: Any) -> None:
        raise ReadOnlyViolation(offset)

    # =========================================================================
    # Cursor over parts
    # =========================================================================

    def _parts(self):
        response = self._message.response
        if isinstance(response, PartedResponse):
            return response.parts
        return ()

    def current(self) -> Optional[Dict[str, Any]]:
        if self._message.response is None:
            return None
        parts = self._parts()
        if 0 <= self._current < len(parts):
            return parts[self._current]
        return None

    def next(self) -> None:
        self._current += 1

    def key(self) -> Optional[int]:
        if self._message.response is None:
            return None
        return self._current

    def valid(self) -> Optional[bool]:
        if self._message.response is None:
            return None
        return 0 <= self._current < len(self._parts())

    def rewind(self) -> None:
        self._current = 0

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        self.rewind()
        while self.valid():
            yield self.current()
            self.next()
