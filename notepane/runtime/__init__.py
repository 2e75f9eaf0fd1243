"""Session runtime: bootstrap, tick loop, and terminal mode handling."""

from __future__ import annotations

from .app import run_app
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop

__all__ = [
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_app",
    "run_main_loop",
]
