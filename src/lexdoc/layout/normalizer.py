"""Text normalisation shared by both renderers.

Rules applied by :func:`normalize`, in order:
  • Emphasis markup (``**x**``, ``*x*``, ``__x__``) replaced by its inner text
  • ``\\r``, ``\\n`` and ``\\t`` turned into spaces            (FULL only)
  • Characters outside printable ASCII dropped               (FULL only)
  • Whitespace runs collapsed to one space, ends trimmed     (FULL only)

Markup matching is non-greedy and not nesting-aware: ``**a *b* c**`` and
similar inputs can come out lopsided.

Preformatted blocks never go through :func:`normalize`; they are split on
newlines and each line is passed to :func:`clean_preformatted_line`.
"""

from __future__ import annotations

import re

from lexdoc.domain.models.enums import NormalizationPolicy

# -- Patterns ------------------------------------------------------------

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_UNDERLINE = re.compile(r"_{2}([^_\s]+.*?[^_\s])_{2}")
_CONTROL = re.compile(r"[\r\n\t]")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E]")
_WHITESPACE_RUN = re.compile(r"\s+")


def strip_markup(text: str) -> str:
    """Remove bold, italic and underline markers, keeping their content."""
    text = _BOLD.sub(r"\1", text)
    text = _ITALIC.sub(r"\1", text)
    return _UNDERLINE.sub(r"\1", text)


def normalize(raw: str, policy: NormalizationPolicy = NormalizationPolicy.FULL) -> str:
    """Clean *raw* for layout according to *policy*."""
    text = strip_markup(raw or "")
    if policy == NormalizationPolicy.MARKUP_ONLY:
        return text

    text = _CONTROL.sub(" ", text)
    text = _NON_PRINTABLE.sub("", text)
    return _WHITESPACE_RUN.sub(" ", text).strip()


def clean_preformatted_line(line: str) -> str:
    """Drop out-of-range characters from one preformatted line."""
    return _NON_PRINTABLE.sub("", line)


def split_preformatted(content: str) -> list[str]:
    """Split a preformatted body into lines, blank lines included.

    Only ``\n`` delimits lines; a trailing ``\r`` from CRLF input is dropped.
    """
    return [line.removesuffix("\r") for line in content.split("\n")]
