"""Pagination metadata and navigation links."""
from bookstock.models.response_model import PaginationLinks, PaginationMeta

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def _page_url(base_url: str, offset: int, limit: int) -> str:
    return f"{base_url}?offset={offset}&limit={limit}"


def build_pagination_links(base_url: str, offset: int, limit: int, total: int) -> PaginationLinks:
    """Links for the page at offset/limit out of total rows.

    ``next`` is only set while rows remain after this page and ``prev`` only
    when the page does not start at zero.
    """
    links = PaginationLinks(
        self=_page_url(base_url, offset, limit),
        first=_page_url(base_url, 0, limit),
        last=_page_url(base_url, (total // limit) * limit, limit),
    )
    if offset + limit < total:
        links.next = _page_url(base_url, offset + limit, limit)
    if offset > 0:
        links.prev = _page_url(base_url, max(0, offset - limit), limit)
    return links


def build_pagination_meta(offset: int, limit: int, total: int) -> PaginationMeta:
    return PaginationMeta(offset=offset, limit=limit, total=total)
