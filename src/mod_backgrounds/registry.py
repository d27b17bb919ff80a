"""Append-only registries that hand out background style slots."""

from __future__ import annotations

import logging
from typing import Generic, Iterator, TypeVar

from mod_backgrounds.styles.interfaces import BackgroundStyle

StyleT = TypeVar("StyleT", bound=BackgroundStyle)


class BackgroundStyleError(RuntimeError):
    """Base class for background style engine faults."""


class DuplicateStyleError(BackgroundStyleError):
    """Raised when a style instance or full name is registered twice."""


class RegistryPhaseError(BackgroundStyleError):
    """Raised when a registry is used outside of the phase that allows it."""


class StyleRegistry(Generic[StyleT]):
    """Ordered registry of one style category.

    Styles are appended during the load phase and receive consecutive slots
    starting at 0. ``seal`` ends the load phase; after that the registry is
    read-only until ``unload``.
    """

    def __init__(
        self,
        category: str,
        *,
        assign_slots: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._category = category
        self._assign_slots = assign_slots
        self._logger = logger or logging.getLogger("mod_backgrounds.registry")

        self._styles: list[StyleT] = []
        self._by_name: dict[str, StyleT] = {}
        self._sealed = False

    @property
    def category(self) -> str:
        return self._category

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register(self, style: StyleT) -> int:
        """Append ``style`` and return its slot."""
        if self._sealed:
            raise RegistryPhaseError(
                f"Cannot register {style.full_name}: the {self._category} registry is sealed"
            )
        if any(existing is style for existing in self._styles) or (
            self._assign_slots and style.slot is not None
        ):
            raise DuplicateStyleError(f"{style.full_name} is already registered")
        if style.full_name in self._by_name:
            raise DuplicateStyleError(
                f"A {self._category} style named {style.full_name} is already registered"
            )

        slot = len(self._styles)
        self._styles.append(style)
        self._by_name[style.full_name] = style
        if self._assign_slots:
            style._slot = slot

        self._logger.info(
            "style_registered",
            extra={"category": self._category, "style": style.full_name, "slot": slot},
        )
        return slot

    def seal(self) -> None:
        """End the load phase."""
        if self._sealed:
            return
        self._sealed = True
        self._logger.info("registry_sealed", extra={"category": self._category, "count": self.count()})

    def require_sealed(self) -> None:
        if not self._sealed:
            raise RegistryPhaseError(f"The {self._category} registry must be sealed before resolving")

    def unload(self) -> None:
        """Drop every style and reopen the load phase."""
        for style in self._styles:
            if self._assign_slots:
                style._slot = None
            style.is_active = False
        self._styles.clear()
        self._by_name.clear()
        self._sealed = False
        self._logger.info("registry_unloaded", extra={"category": self._category})

    def count(self) -> int:
        return len(self._styles)

    def get(self, slot: int) -> StyleT | None:
        """Return the style registered at ``slot``, or None for any other slot."""
        if 0 <= slot < len(self._styles):
            return self._styles[slot]
        return None

    def find(self, full_name: str) -> StyleT:
        if full_name not in self._by_name:
            raise KeyError(f"Unknown {self._category} style: {full_name}")
        return self._by_name[full_name]

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[StyleT]:
        return iter(self._styles)
