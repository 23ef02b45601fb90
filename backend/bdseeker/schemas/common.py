from typing import Any, Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class PageParams(BaseModel):
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def normalize(cls, page: int | None, limit: int | None) -> "PageParams":
        page = page if page and page >= 1 else 1
        limit = limit if limit and 1 <= limit <= MAX_LIMIT else DEFAULT_LIMIT
        return cls(page=page, limit=limit)


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return (total + limit - 1) // limit


class Page(BaseModel, Generic[T]):
    data: List[T]
    total_count: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def build(cls, items: List[Any], total: int, params: PageParams) -> "Page[T]":
        return cls(
            data=items,
            total_count=total,
            page=params.page,
            limit=params.limit,
            total_pages=total_pages(total, params.limit),
        )
