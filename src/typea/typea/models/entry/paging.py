# ABOUTME: Ordering and pagination entry models
# ABOUTME: Runners apply these after filtering, in order-by, offset, limit sequence

from typing import Literal

from pydantic import Field

from typea.models.entry.base import Entry


class OrderBy(Entry):
    """Order results by ``field``. The first order-by pushed is the primary key; later ones break ties."""

    kind: Literal["order_by"] = "order_by"
    field: str = Field(..., min_length=1, description="Record field to order by")
    descending: bool = Field(default=False, description="Whether to order from largest to smallest")


class Limit(Entry):
    """Cap the number of results."""

    kind: Literal["limit"] = "limit"
    limit: int = Field(..., ge=0, description="Maximum number of results")


class Offset(Entry):
    """Skip the first ``offset`` results."""

    kind: Literal["offset"] = "offset"
    offset: int = Field(..., ge=0, description="Number of results to skip")
