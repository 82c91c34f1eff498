"""
Paginated result containers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageParams:
    """Query parameters for one page of a listing."""

    page_size: Optional[int] = None
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results, in server order."""

    results: List[T] = field(default_factory=list)
    next_page_token: Optional[str] = None

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_token)

    def next_params(self, page_size: Optional[int] = None) -> Optional[PageParams]:
        """Return the params for the following page, or None on the last page."""
        if not self.has_next:
            return None
        return PageParams(page_size=page_size, next_page_token=self.next_page_token)

    def __iter__(self) -> Iterator[T]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)
