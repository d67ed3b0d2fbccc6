"""Domain entities for paginated listings."""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page number and a page size."""

    page: int = 1
    limit: int = 20

    def clamped(self, max_limit: int) -> "PageRequest":
        """Return a copy with ``limit`` silently capped at ``max_limit``."""
        return PageRequest(page=max(self.page, 1), limit=max(1, min(self.limit, max_limit)))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """One page of rows plus the total number of rows matching the filter."""

    request: PageRequest
    total: int
    items: list[T] = field(default_factory=list)

    @property
    def page_total(self) -> int:
        if self.total <= 0:
            return 0
        return math.ceil(self.total / self.request.limit)

    @property
    def page_current(self) -> int:
        # "page 0 of 0" is meaningless; an empty result is page 1 of 0.
        if self.total <= 0:
            return 1
        return self.request.page

    @property
    def have_next_page(self) -> bool:
        return self.page_current < self.page_total

    @property
    def have_previous_page(self) -> bool:
        return self.page_current > 1
