"""Pieces shared by the underground and surface resolvers."""

from __future__ import annotations

from typing import Iterable, Sized

from mod_backgrounds.models import NO_TEXTURE
from mod_backgrounds.registry import BackgroundStyleError
from mod_backgrounds.styles.interfaces import SurfaceBgStyle, UgBgStyle


class BufferSizeError(BackgroundStyleError):
    """Raised when a caller-owned buffer does not match the layout it stands for."""


def check_buffer(name: str, buffer: Sized, expected: int) -> None:
    if len(buffer) != expected:
        raise BufferSizeError(f"{name} must have {expected} entries, got {len(buffer)}")


def first_claiming_slot(styles: Iterable[UgBgStyle | SurfaceBgStyle], default_style: int) -> int:
    """Slot of the first style, in registration order, that wants the frame."""
    for style in styles:
        if style.choose_bg_style():
            return style.slot
    return default_style


def keep_unless_opinion(chosen: int, current: int) -> int:
    return current if chosen == NO_TEXTURE else chosen
