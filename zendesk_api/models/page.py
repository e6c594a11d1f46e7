from typing import Optional
from pydantic import BaseModel


class Page(BaseModel):
    """Pagination metadata returned alongside list endpoints"""
    previous_page: Optional[str] = None
    next_page: Optional[str] = None
    count: Optional[int] = None

    @property
    def has_next(self) -> bool:
        return bool(self.next_page)

    @property
    def has_prev(self) -> bool:
        return bool(self.previous_page)


class PageOptions(BaseModel):
    """Offset pagination parameters shared by list endpoints"""
    page: Optional[int] = None
    per_page: Optional[int] = None


class PagedResponse(Page):
    """List envelope base: the page fields sit beside the resource list"""

    def page(self) -> Page:
        return Page(
            previous_page=self.previous_page,
            next_page=self.next_page,
            count=self.count
        )
