import math
from typing import Generic, List, Sequence, TypeVar

import attrs


T = TypeVar('T')


@attrs.frozen
class Page(Generic[T]):
    """One zero-based page of an already ordered result"""

    items: List[T]
    page: int
    size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @classmethod
    def slice(cls, ordered: Sequence[T], *, page: int, size: int) -> 'Page[T]':
        start = page * size
        return cls(
            items=list(ordered[start : start + size]), page=page, size=size, total=len(ordered)
        )
