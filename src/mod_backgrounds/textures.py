"""In-memory background texture slot table used by style implementations."""

from __future__ import annotations

from mod_backgrounds.models import NO_TEXTURE


class BackgroundTextureTable:
    """Hands out engine-global background slots for ``"Mod/path"`` texture names."""

    def __init__(self, first_slot: int = 0) -> None:
        if first_slot < 0:
            raise ValueError("first_slot must be non-negative")
        self._first_slot = first_slot
        self._slots: dict[str, int] = {}
        self._textures: list[str] = []

    def reserve(self, texture: str) -> int:
        """Return the slot for ``texture``, reserving the next free one if needed."""
        if not texture:
            raise ValueError("Texture name must not be empty")
        if texture in self._slots:
            return self._slots[texture]

        slot = self._first_slot + len(self._textures)
        self._slots[texture] = slot
        self._textures.append(texture)
        return slot

    def get_background_slot(self, texture: str) -> int:
        return self._slots.get(texture, NO_TEXTURE)

    def texture_for(self, slot: int) -> str | None:
        index = slot - self._first_slot
        if 0 <= index < len(self._textures):
            return self._textures[index]
        return None

    def __len__(self) -> int:
        return len(self._textures)
