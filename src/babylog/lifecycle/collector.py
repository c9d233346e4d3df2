#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Fan-out of lifecycle notices to subscribed handlers."""

from __future__ import annotations

from collections.abc import Callable

from provide.foundation.logger import get_logger

from babylog.lifecycle.protocol import Notice

log = get_logger(__name__)

NoticeHandler = Callable[[Notice], None]


class NoticeCollector:
    """Delivers each emitted notice to every subscribed handler, in order.

    A handler that raises is logged and skipped; the remaining handlers still
    receive the notice.
    """

    def __init__(self) -> None:
        self._handlers: list[NoticeHandler] = []

    def subscribe(self, handler: NoticeHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: NoticeHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, notice: Notice) -> None:
        for handler in list(self._handlers):
            try:
                handler(notice)
            except Exception as e:
                log.error(
                    "Notice handler failed",
                    source=notice.source,
                    notice=notice.description,
                    error=str(e),
                )


# 🔼⚙️🔚
