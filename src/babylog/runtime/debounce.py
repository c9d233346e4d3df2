#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Trailing-edge debounce on the running asyncio loop.

Calling a ``Debounced`` schedules the wrapped function after a quiescence
window; every call inside the window replaces the arguments and restarts the
window, so only the last call fires. ``cancel()`` drops a scheduled call.

Once the window elapses the call is handed off: it no longer counts as
pending and ``cancel()`` cannot abort it. Fired calls that are still running
are tracked so that ``drain()`` can wait for them.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import inspect
from typing import Any

from provide.foundation.logger import get_logger

log = get_logger(__name__)


class Debounced:
    """Last-call-wins wrapper around a sync or async callable."""

    def __init__(self, fn: Callable[..., Any], window_ms: int, *, name: str | None = None) -> None:
        if window_ms < 0:
            raise ValueError("Debounce window must be non-negative")
        self.fn = fn
        self.window_ms = window_ms
        self.name = name or getattr(fn, "__qualname__", repr(fn))
        self._timer: asyncio.Task[None] | None = None
        self._fired: set[asyncio.Task[None]] = set()
        self._log = log.bind(debounce=self.name, window_ms=window_ms)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        """Schedule ``fn(*args, **kwargs)``, replacing any scheduled call."""
        if self.cancel():
            self._log.debug("Debounce window restarted")
        loop = asyncio.get_running_loop()
        self._timer = loop.create_task(self._fire_after_window(args, kwargs))

    @property
    def pending(self) -> bool:
        """True while a call is scheduled and its window has not elapsed."""
        return self._timer is not None and not self._timer.done()

    @property
    def in_flight(self) -> int:
        """Number of fired calls still running."""
        return len(self._fired)

    def cancel(self) -> bool:
        """Discard the scheduled call, if any.

        Returns:
            True if a scheduled call was discarded
        """
        timer = self._timer
        self._timer = None
        if timer is None or timer.done():
            return False
        timer.cancel()
        self._log.debug("Scheduled call cancelled")
        return True

    async def drain(self) -> None:
        """Wait until every fired call has finished."""
        while self._fired:
            await asyncio.gather(*list(self._fired), return_exceptions=True)

    async def _fire_after_window(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        await asyncio.sleep(self.window_ms / 1000)

        # Hand off: from here on this task is an in-flight call, not a pending one.
        task = asyncio.current_task()
        if self._timer is task:
            self._timer = None
        if task is not None:
            self._fired.add(task)
            task.add_done_callback(self._fired.discard)

        self._log.debug("Debounce window elapsed, firing")
        try:
            result = self.fn(*args, **kwargs)
            if inspect.isawaitable(result):
                await result
        except Exception:
            self._log.exception("Debounced call failed")


def debounce(fn: Callable[..., Any], window_ms: int) -> Debounced:
    """Wrap ``fn`` in a ``Debounced`` with the given window."""
    return Debounced(fn, window_ms)


# 🔼⚙️🔚
