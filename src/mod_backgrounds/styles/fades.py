"""Fade vector helpers for surface styles."""

from __future__ import annotations


def step_fades_toward(fades: list[float], slot: int, transition_speed: float) -> None:
    """Move ``fades[slot]`` up and every other entry down by ``transition_speed``.

    Values are clamped to [0, 1]. This is the usual body of
    ``SurfaceBgStyle.modify_far_fades`` for the style being shown.
    """
    for index, value in enumerate(fades):
        if index == slot:
            fades[index] = min(1.0, value + transition_speed)
        else:
            fades[index] = max(0.0, value - transition_speed)


def fade_out(fades: list[float], slot: int, transition_speed: float) -> None:
    """Lower ``fades[slot]`` by ``transition_speed``, stopping at 0.

    The usual body of ``modify_far_fades`` for a style that is not being shown,
    so its layer keeps fading even when no registered style is active.
    """
    fades[slot] = max(0.0, fades[slot] - transition_speed)


def reset_fades(count: int) -> list[float]:
    return [0.0] * count
