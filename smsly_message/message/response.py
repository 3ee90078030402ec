"""
Gateway Responses
=================
Typed view over a decoded gateway reply.

Send and status calls answer with a ``messages`` list holding one entry per
physical SMS part; inbound lookups answer with a single flat record.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class PartedResponse:
    """Reply describing one or more transmitted parts."""
    parts: Tuple[Dict[str, Any], ...]
    raw: Dict[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        if not self.raw:
            object.__setattr__(self, "raw", {"messages": [dict(part) for part in self.parts]})
    
    def count(self) -> int:
        return len(self.parts)
    
    def get_part(self, index: int) -> Optional[Dict[str, Any]]:
        """Return the part at ``index``, or None when out of range."""
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 <= index < len(self.parts):
            return self.parts[index]
        return None
    
    def get_field(self, name: str, index: int) -> Any:
        part = self.get_part(index)
        if part is None:
            return None
        return part.get(name)


@dataclass(frozen=True)
class FlatResponse:
    """Reply describing a single message directly."""
    record: Dict[str, Any]
    raw: Dict[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        if not self.raw:
            object.__setattr__(self, "raw", self.record)
    
    def count(self) -> int:
        return 0
    
    def get_field(self, name: str, index: Optional[int] = None) -> Any:
        return self.record.get(name)


Response = Union[PartedResponse, FlatResponse]


def parse_response(data: Mapping[str, Any]) -> Response:
    """
    Wrap a decoded reply in the matching response variant.
    
    Args:
        data: Decoded JSON object returned by the gateway
        
    Returns:
        PartedResponse when the reply carries a ``messages`` list,
        FlatResponse otherwise
    """
    raw = dict(data)
    messages = raw.get("messages")
    if isinstance(messages, (list, tuple)):
        parts = tuple(dict(part) if isinstance(part, Mapping) else {} for part in messages)
        return PartedResponse(parts=parts, raw=raw)
    return FlatResponse(record=raw, raw=raw)
