"""Text normalization and fallback helpers shared by the field extractors."""

import re
from typing import Callable, Optional, TypeVar

from bs4 import Tag

T = TypeVar("T")

BULLET_CHARS = "•"

_WHITESPACE = re.compile(r"\s+")
_BULLETS = re.compile(f"[{re.escape(BULLET_CHARS)}]")


def clean_text(text: Optional[str]) -> str:
    """Normalize extracted text.

    Strips bullet markers, collapses whitespace runs to one space and trims
    the ends. Bullets are removed before whitespace is collapsed, so
    clean_text(clean_text(s)) == clean_text(s).
    """
    if not text:
        return ""
    text = _BULLETS.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def element_text(element: Optional[Tag]) -> str:
    """Cleaned text content of an element (empty for None)."""
    if element is None:
        return ""
    return clean_text(element.get_text())


def first_text(scope: Tag, selector: str) -> str:
    """Cleaned text of the first element matching selector under scope."""
    return element_text(scope.select_one(selector))


def first_non_empty_text(scope: Tag, selector: str) -> str:
    """Cleaned text of the first matching element whose text is non-empty."""
    for element in scope.select(selector):
        text = element_text(element)
        if text:
            return text
    return ""


def first_non_empty(*candidates: Callable[[], T], default: T) -> T:
    """Evaluate candidates in order and return the first non-empty result.

    Later candidates are only called when every earlier one produced an
    empty value ('' or an empty sequence).
    """
    for candidate in candidates:
        result = candidate()
        if result:
            return result
    return default


def starts_with_any(text: str, markers: list[str]) -> bool:
    return any(text.startswith(marker) for marker in markers if marker)
