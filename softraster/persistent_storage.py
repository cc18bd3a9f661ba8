"""Numbered save slots on disk."""

from __future__ import annotations

import os
from pathlib import Path

from softraster.scene_data import Saveable, SceneDataReader, SceneDataWriter


class PersistentStorage:
    """Saves and loads an object in the file of one save slot."""

    def __init__(self, save_slot: int, directory: str | os.PathLike[str] = "data") -> None:
        self.path = Path(directory) / f"save{save_slot}"

    def save(self, obj: Saveable) -> None:
        """Write ``obj`` to the slot, replacing what was there."""
        with self.path.open("wb") as stream:
            obj.save(SceneDataWriter(stream))

    def load(self, obj: Saveable) -> None:
        """Fill ``obj`` from the slot."""
        try:
            stream = self.path.open("rb")
        except FileNotFoundError:
            raise FileNotFoundError(f"save not present: {self.path}") from None
        with stream:
            obj.load(SceneDataReader(stream))