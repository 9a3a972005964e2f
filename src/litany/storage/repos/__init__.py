from __future__ import annotations

from litany.storage.repos.save_game_repo import SaveGameRepo

__all__ = [
    "SaveGameRepo",
]
