"""
Message Configuration
=====================
Defaults for message entities, read from the environment.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class MessageConfig:
    """Configuration shared by all message entities."""
    autodetect_encoding: bool = field(
        default_factory=lambda: _env_flag("SMSLY_AUTODETECT_ENCODING")
    )
    client_ref_max_length: int = field(
        default_factory=lambda: int(os.getenv("SMSLY_CLIENT_REF_MAX_LENGTH", "40"))
    )
    # 48 hours
    wap_validity_ms: int = field(
        default_factory=lambda: int(os.getenv("SMSLY_WAP_VALIDITY_MS", "172800000"))
    )


@lru_cache(maxsize=1)
def get_config() -> MessageConfig:
    """Get the process-wide configuration."""
    return MessageConfig()
