"""Persistence of the user's choice of gesture controllers."""

from __future__ import annotations

from typing import Any, MutableMapping, Optional, Set

from .types import GestureControllerType

MODULE_NAME = "GestureControllers"
GESTURE_CONTROLLERS_KEY = f"{MODULE_NAME}/GESTURE_CONTROLLERS"


class GestureControllerConfiguration:
    """Reads and writes the selected controllers in a settings mapping.

    The selection is stored as a list of integer controller types.
    """

    def __init__(self, settings: Optional[MutableMapping[str, Any]] = None) -> None:
        self.settings: MutableMapping[str, Any] = settings if settings is not None else {}

    def read_selected_controllers(self) -> Optional[Set[GestureControllerType]]:
        """Return the stored selection, or None if nothing valid is stored.

        Raises ValueError if the stored list holds an unknown controller type.
        """
        value = self.settings.get(GESTURE_CONTROLLERS_KEY)
        if not isinstance(value, list):
            return None
        return {GestureControllerType(int(item)) for item in value}

    def write_selected_controllers(self, types: Set[GestureControllerType]) -> None:
        """Store ``types`` as the selection."""
        self.settings[GESTURE_CONTROLLERS_KEY] = sorted(int(t) for t in types)