#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""HTTP implementation of the command and suggestion endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from provide.foundation.logger import get_logger

from babylog.commands.actions import ACTION_KEY, CareAction
from babylog.config.models import EndpointConfig
from babylog.errors import TransportError

log = get_logger(__name__)

SUGGESTION_PATH = f"/api/runCommand/{CareAction.FETCH_TOP_PRESCRIPTIONS.value}"


def encode_form_value(value: Any) -> str:
    """Form fields are text; booleans use the lowercase JSON spelling."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class HttpCommandClient:
    """Talks to the command handler over HTTP.

    Commands are POSTed form-encoded to the configured route; suggestions are
    read from the generic ``runCommand`` API. Pass ``client`` to reuse an
    ``httpx.AsyncClient`` (tests hand in one built on ``httpx.MockTransport``).
    """

    def __init__(self, config: EndpointConfig, client: httpx.AsyncClient | None = None) -> None:
        self.config = config
        self._client = client
        self._owns_client = client is None
        self._log = log.bind(base_url=config.base_url)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout_seconds,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpCommandClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def run_command(self, payload: Mapping[str, Any]) -> Any:
        """POST a command payload to the command route.

        Returns:
            Decoded JSON body, or None for an empty response

        Raises:
            TransportError: On connection errors and non-2xx responses
        """
        action = str(payload.get(ACTION_KEY, ""))
        form = {key: encode_form_value(value) for key, value in payload.items()}
        url = self.config.command_route
        try:
            response = await self._get_client().post(url, data=form)
            response.raise_for_status()
        except httpx.HTTPError as e:
            self._log.error("HTTP error running command", action=action, url=url, error=str(e))
            raise TransportError(f"Command {action} failed: {e}", action=action, url=url) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def fetch_top_prescriptions(self, profile_id: str, search_text: str) -> list[str]:
        """Query prescription suggestions for a profile.

        Raises:
            TransportError: On connection errors, non-2xx responses or a malformed body
        """
        params = {"profileId": profile_id, "searchText": search_text}
        try:
            response = await self._get_client().get(SUGGESTION_PATH, params=params)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._log.error("HTTP error fetching suggestions", profile_id=profile_id, error=str(e))
            raise TransportError(
                f"Suggestion query failed: {e}",
                action=CareAction.FETCH_TOP_PRESCRIPTIONS.value,
                url=SUGGESTION_PATH,
            ) from e

        prescriptions = body.get("prescriptions") if isinstance(body, dict) else None
        if not isinstance(prescriptions, list):
            raise TransportError(
                "Suggestion response has no 'prescriptions' list",
                action=CareAction.FETCH_TOP_PRESCRIPTIONS.value,
                url=SUGGESTION_PATH,
            )
        return [str(item) for item in prescriptions]


# 🔼⚙️🔚
