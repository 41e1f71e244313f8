"""Query and result shapes for comment listings."""

import math
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, field_validator

from remark.domain.model.common import DomainModel
from remark.domain.value import (
    CommentId,
    CommentStatus,
    SortField,
    SortOrder,
    TenantId,
    UserId,
)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

T = TypeVar("T")


def normalize_page(page: int | None) -> int:
    """Pages start at 1."""
    return page if page and page >= 1 else 1


def normalize_page_size(page_size: int | None) -> int:
    """Out-of-range page sizes fall back to the default."""
    if page_size is None or page_size < 1 or page_size > MAX_PAGE_SIZE:
        return DEFAULT_PAGE_SIZE
    return page_size


class CommentFilter(BaseModel):
    """Filters, sort and pagination for ``CommentRepository.list``.

    ``parent_id`` unset means top-level comments only.
    """

    tenant_id: TenantId
    resource_type: Optional[str] = None
    resource_id: Optional[str] = None
    parent_id: Optional[CommentId] = None
    status: Optional[CommentStatus] = None
    author_id: Optional[UserId] = None
    is_pinned: Optional[bool] = None
    include_deleted: bool = False

    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, v):
        return normalize_page(v)

    @field_validator("page_size", mode="before")
    @classmethod
    def _clamp_page_size(cls, v):
        return normalize_page_size(v)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


class Page(DomainModel, Generic[T]):
    """One page of results plus totals."""

    items: list[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0


class CommentStats(DomainModel):
    """Per-status counts of non-deleted comments on a resource."""

    total: int = 0
    approved: int = 0
    pending: int = 0
    rejected: int = 0
    spam: int = 0
