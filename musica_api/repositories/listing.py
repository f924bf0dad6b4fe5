"""Filter, order and paginate list queries the same way for every list endpoint."""

from sqlalchemy.orm import Query
from sqlalchemy.orm.attributes import InstrumentedAttribute

from musica_api.schemas.catalog import ListParams

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
SORT_ORDERS = ("asc", "desc")

# Largest OFFSET a 64-bit database integer can hold
MAX_OFFSET = 2**63 - 1


def normalize_list_params(
    filter: str | None,
    page: int,
    limit: int,
    order: str | None,
    limit_max: int,
) -> ListParams:
    """
    Clamp paging input and drop unknown sort orders.

    page below 1 becomes 1 and is capped so the offset fits MAX_OFFSET; limit
    is clamped into [1, limit_max]; an order other than 'asc' or 'desc'
    means no ordering at all.
    """
    limit = min(max(limit, 1), limit_max)
    return ListParams(
        filter=filter or None,
        page=min(max(page, 1), MAX_OFFSET // limit + 1),
        limit=limit,
        order=order if order in SORT_ORDERS else None,
    )


def apply_listing(query: Query, column: InstrumentedAttribute, params: ListParams) -> Query:
    """Apply substring filter and ordering on `column`, then offset/limit."""
    if params.filter:
        query = query.filter(column.contains(params.filter, autoescape=True))
    if params.order == "asc":
        query = query.order_by(column.asc())
    elif params.order == "desc":
        query = query.order_by(column.desc())
    return query.offset(params.offset).limit(params.limit)
