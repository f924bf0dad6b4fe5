"""Shared request dependencies for list endpoints."""

from typing import Annotated

from fastapi import Depends, Query

from musica_api.core.config import Settings, get_settings
from musica_api.repositories.listing import DEFAULT_LIMIT, DEFAULT_PAGE, normalize_list_params
from musica_api.schemas.catalog import ListParams


def get_list_params(
    settings: Annotated[Settings, Depends(get_settings)],
    filter: Annotated[str | None, Query(description="Substring to match")] = None,
    page: Annotated[int, Query(description="1-based page number")] = DEFAULT_PAGE,
    limit: Annotated[int, Query(description="Rows per page")] = DEFAULT_LIMIT,
    order: Annotated[str | None, Query(description="asc or desc; anything else disables ordering")] = "asc",
) -> ListParams:
    """Parse filter/page/limit/order from the query string."""
    return normalize_list_params(filter, page, limit, order, settings.PAGE_LIMIT_MAX)
