"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..state import AppState

KeyHandler = Callable[[AppState], bool | None]
FallbackHandler = Callable[[AppState, str], bool | None]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single state transition."""

    combos: tuple[str, ...]
    handler: KeyHandler


class KeyComboRegistry:
    """Key-dispatch table for one pane/mode with an optional catch-all handler."""

    def __init__(self, fallback: FallbackHandler | None = None) -> None:
        """Initialize empty registry; ``fallback`` sees keys no binding claims."""
        self._handlers: dict[str, KeyHandler] = {}
        self._fallback = fallback

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str, state: AppState) -> bool | None:
        """Run the handler bound to ``key`` against ``state``.

        Returns ``None`` when neither a binding nor the fallback claims the key.
        """
        handler = self._handlers.get(key)
        if handler is not None:
            return handler(state)
        if self._fallback is not None:
            return self._fallback(state, key)
        return None
