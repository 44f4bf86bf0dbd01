"""Page/limit query parameters shared by list endpoints."""

from __future__ import annotations

import math

from fastapi import Query
from pydantic import BaseModel

from vidcontest.models.types import Pagination

MAX_LIMIT = 50
DEFAULT_LIMIT = 20


class PageParams(BaseModel):
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def page_params(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
) -> PageParams:
    """FastAPI dependency reading page and limit, with limit capped at MAX_LIMIT."""
    return PageParams(page=page, limit=min(limit, MAX_LIMIT))


def build_pagination(params: PageParams, total: int) -> Pagination:
    return Pagination(
        page=params.page,
        limit=params.limit,
        total=total,
        pages=math.ceil(total / params.limit),
    )
