"""
Selection emitter.

Pass-through from a user pick to the connection manager:
1. Validate the pick against the palette
2. Update the current selection (always, connected or not)
3. Hand it to ConnectionManager.send() and move on

The send outcome is never awaited here.
"""

from __future__ import annotations

from typing import Any

from observability.logger import log_event
from sync.connection_manager import ConnectionManager
from sync.selection import ColorSelection


class SelectionEmitter:
    """Holds the current selection and forwards picks to the manager."""

    def __init__(
        self,
        *,
        manager: ConnectionManager,
        initial: ColorSelection | None = None,
    ) -> None:
        self._manager = manager
        self._current = initial if initial is not None else ColorSelection.default()

    @property
    def current(self) -> ColorSelection:
        return self._current

    def on_pick(self, family: Any, depth: Any) -> ColorSelection:
        """
        Record a pick and broadcast it best-effort.

        Raises:
            InvalidSelection if (family, depth) is not a palette entry;
            in that case the current selection is left unchanged.
        """
        selection = ColorSelection.of(family, depth)
        self._current = selection

        dispatched = self._manager.send(selection)

        log_event({
            "event_type": "COLOR_PICKED",
            "family": selection.family.value,
            "depth": int(selection.depth),
            "dispatched": dispatched,
        })
        return selection
