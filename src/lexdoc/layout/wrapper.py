"""Greedy line wrapping against an injected width function.

The wrapper knows nothing about fonts: callers pass ``measure(s) -> width``
so the same code runs with fpdf2 glyph metrics in production and with a
synthetic monospace metric in tests.
"""

from __future__ import annotations

import logging
from typing import Callable

from lexdoc.domain.models.layout import MeasuredLine

logger = logging.getLogger(__name__)

MeasureFn = Callable[[str], float]


def wrap_measured(text: str, max_width: float, measure: MeasureFn) -> list[MeasuredLine]:
    """Break *text* into lines no wider than *max_width*.

    *text* must already be normalized (single spaces, no newlines).
    A word wider than *max_width* gets a line of its own. A word whose
    candidate line cannot be measured is skipped and wrapping carries on.

    Returns:
        Lines in order, trailing separator removed, with their widths.
    """
    lines: list[MeasuredLine] = []
    if not text:
        return lines

    accumulator = ""
    accumulator_width = 0.0

    for word in text.split(" "):
        if not word:
            continue

        candidate = accumulator + word + " "
        try:
            candidate_width = measure(candidate)
        except Exception as exc:
            logger.warning("Could not measure text, skipping word %r: %s", word, exc)
            continue

        if candidate_width > max_width and accumulator:
            lines.append(MeasuredLine(accumulator.rstrip(" "), accumulator_width))
            accumulator = word + " "
            try:
                accumulator_width = measure(accumulator)
            except Exception as exc:
                logger.warning("Could not measure text, skipping word %r: %s", word, exc)
                accumulator, accumulator_width = "", 0.0
        else:
            accumulator = candidate
            accumulator_width = candidate_width

    if accumulator.strip():
        lines.append(MeasuredLine(accumulator.rstrip(" "), accumulator_width))

    return lines


def wrap(text: str, max_width: float, measure: MeasureFn) -> list[str]:
    """Like :func:`wrap_measured` but return only the line strings."""
    return [line.text for line in wrap_measured(text, max_width, measure)]
