"""Input-layer public API: terminal key decoding and key-to-event mapping."""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .keys import KEY_EVENTS, key_to_event

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KEY_EVENTS",
    "key_to_event",
    "read_key",
]
