"""Input-layer public API for key decoding and pane key dispatch.

Exports are split between low-level terminal decoding (`read_key`) and the
per-pane transition table used by the runtime loop (`dispatch_key`).
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key
from .dispatch import KEY_TABLE, QUIT_KEYS, build_key_table, dispatch_key
from .key_registry import KeyComboBinding, KeyComboRegistry

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KEY_TABLE",
    "QUIT_KEYS",
    "build_key_table",
    "dispatch_key",
    "KeyComboBinding",
    "KeyComboRegistry",
]
