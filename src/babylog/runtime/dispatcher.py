#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Dispatching event mutations to the command endpoint.

Every call the dispatcher issues is registered in ``OutstandingCalls`` for
exactly as long as it is in flight. Pending mutations are derived from that
set on demand; nothing else records local edits, so a call that completes
(successfully or not) stops influencing the display as soon as the caller
refreshes the canonical list.

Failed calls are not retried and never raised to the caller; they are
logged and reported on the returned ``MutationResult`` and the
``MutationSettled`` notice.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import itertools
from types import MappingProxyType
from typing import Any

from attrs import define, field
from provide.foundation.logger import get_logger

from babylog.client.protocol import CommandTransport
from babylog.commands.actions import CareAction, CareOperation, resolve_action
from babylog.commands.forms import build_payload, is_blank
from babylog.config.models import TimingConfig
from babylog.errors import TransportError
from babylog.events.models import CareEvent
from babylog.lifecycle.collector import NoticeCollector
from babylog.lifecycle.mutation import MutationDispatched, MutationSettled
from babylog.runtime.debounce import Debounced

log = get_logger(__name__)


@define(frozen=True, slots=True)
class PendingMutation:
    """An edit sent to the server and not yet confirmed by a canonical refresh."""

    event_id: str
    changed_fields: Mapping[str, Any] = field(converter=lambda m: MappingProxyType(dict(m)), hash=False)
    origin_key: str = field(default=CareAction.EDIT_GENERIC_EVENT.value)
    action: str | None = field(default=None)


@define(frozen=True, slots=True)
class MutationResult:
    action: str
    event_id: str
    succeeded: bool
    error: str | None = field(default=None)


class OutstandingCalls:
    """The set of mutation calls currently in flight, in issue order."""

    def __init__(self) -> None:
        self._calls: dict[int, PendingMutation] = {}
        self._ids = itertools.count(1)

    def register(self, mutation: PendingMutation) -> int:
        call_id = next(self._ids)
        self._calls[call_id] = mutation
        return call_id

    def release(self, call_id: int) -> None:
        self._calls.pop(call_id, None)

    def __iter__(self) -> Iterator[PendingMutation]:
        return iter(list(self._calls.values()))

    def __len__(self) -> int:
        return len(self._calls)

    def pending_mutations(self, origin_key: str | None = None) -> list[PendingMutation]:
        """Snapshot of in-flight mutations, optionally restricted to one origin key."""
        return [m for m in self._calls.values() if origin_key is None or m.origin_key == origin_key]


class MutationDispatcher:
    """Sends update and remove commands for care events.

    Args:
        transport: Command endpoint
        collector: Receives ``MutationDispatched``/``MutationSettled`` notices
        timing: Debounce windows for inline edits
    """

    def __init__(
        self,
        transport: CommandTransport,
        collector: NoticeCollector | None = None,
        timing: TimingConfig | None = None,
    ) -> None:
        self.transport = transport
        self.collector = collector or NoticeCollector()
        self.timing = timing or TimingConfig()
        self.outstanding = OutstandingCalls()
        self._log = log.bind(dispatcher_id=id(self))

    def pending_mutations(self, origin_key: str | None = CareAction.EDIT_GENERIC_EVENT.value) -> list[PendingMutation]:
        return self.outstanding.pending_mutations(origin_key)

    async def update_event(self, event: CareEvent, changes: Mapping[str, Any]) -> MutationResult | None:
        """Send an update for ``event`` carrying only the non-blank ``changes``.

        Returns:
            The call outcome, or None when the event kind has no update action
        """
        action = resolve_action(event, CareOperation.UPDATE)
        if action is None:
            self._log.debug("No update action for event kind, skipping", event_id=event.id)
            return None
        allowed = set(type(event).variant_fields()) | {"time", "comment"}
        fields = {name: value for name, value in changes.items() if name in allowed and not is_blank(value)}
        ignored = sorted(set(changes) - allowed)
        if ignored:
            self._log.debug("Ignoring fields not valid for event kind", event_id=event.id, fields=ignored)
        return await self._dispatch(action, event.id, fields)

    async def remove_event(self, event: CareEvent) -> MutationResult | None:
        """Send the remove action for ``event``; the payload carries only its id."""
        action = resolve_action(event, CareOperation.REMOVE)
        if action is None:
            self._log.debug("No remove action for event kind, skipping", event_id=event.id)
            return None
        return await self._dispatch(action, event.id, {})

    def debounced_update(self, window_ms: int | None = None) -> Debounced:
        """A debounced ``update_event`` using the inline edit window by default."""
        window = self.timing.inline_debounce_ms if window_ms is None else window_ms
        return Debounced(self.update_event, window, name="inline-update")

    async def _dispatch(self, action: CareAction, event_id: str, fields: dict[str, Any]) -> MutationResult:
        payload = build_payload(action.value, event_id, fields)
        mutation = PendingMutation(
            event_id=event_id,
            changed_fields=fields,
            origin_key=CareAction.EDIT_GENERIC_EVENT.value,
            action=action.value,
        )
        call_id = self.outstanding.register(mutation)
        self._log.info("Dispatching mutation", action=action.value, event_id=event_id, fields=sorted(fields))
        self.collector.emit(
            MutationDispatched(
                description=f"{action.value} {event_id}",
                action=action.value,
                event_id=event_id,
                fields=dict(fields),
            )
        )

        error: str | None = None
        try:
            await self.transport.run_command(payload)
        except TransportError as e:
            error = str(e)
            self._log.warning(
                "Mutation failed, canonical state will be shown on refresh",
                action=action.value,
                event_id=event_id,
                error=error,
            )
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            self._log.exception(
                "Command transport raised unexpectedly", action=action.value, event_id=event_id
            )
        finally:
            self.outstanding.release(call_id)

        result = MutationResult(action=action.value, event_id=event_id, succeeded=error is None, error=error)
        self.collector.emit(
            MutationSettled(
                description=f"{action.value} {event_id}",
                action=action.value,
                event_id=event_id,
                succeeded=result.succeeded,
                error=error,
            )
        )
        return result


# 🔼⚙️🔚
