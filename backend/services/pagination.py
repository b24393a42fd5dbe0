"""
Stateless page slicing. Bad page/pageSize inputs fall back to defaults, never raise.
"""
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: tuple[T, ...]
    page: int
    page_size: int
    total: int


def coerce_positive_int(raw: int | str | None, default: int) -> int:
    """
    Read the leading integer of raw ("3", " 4abc" -> 4).
    Missing, non-numeric, oversized or non-positive values give default.
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if match is None:
            return default
        try:
            value = int(match.group(1))
        except ValueError:
            # beyond the interpreter's int conversion digit limit
            return default
    return value if value >= 1 else default


def paginate(
    items: Sequence[T],
    page: int | str | None = None,
    page_size: int | str | None = None,
) -> Page[T]:
    page = coerce_positive_int(page, DEFAULT_PAGE)
    page_size = coerce_positive_int(page_size, DEFAULT_PAGE_SIZE)
    start = (page - 1) * page_size
    return Page(
        items=tuple(items[start : start + page_size]),
        page=page,
        page_size=page_size,
        total=len(items),
    )
