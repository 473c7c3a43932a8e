"""
ページネーション - ユースケース層

要求されたページ範囲を正規化し、一覧に付与するナビゲーション情報（前後リンク）を構築する
"""
from dataclasses import dataclass

from src.domain.entity.page import Page
from src.port.dto.pagination_dto import PaginationMetadata
from src.port.link_generator import LinkGenerator

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 20


@dataclass(frozen=True)
class PageRequest:
    """正規化済みページ要求: page_number >= 1, 1 <= page_size <= 20"""
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def normalize(cls, page_number: int, page_size: int) -> "PageRequest":
        """範囲外の値は範囲内に丸める（エラーにはしない）"""
        return cls(
            page_number=max(page_number, 1),
            page_size=min(max(page_size, MIN_PAGE_SIZE), MAX_PAGE_SIZE),
        )


def build_page_link(link_generator: LinkGenerator, endpoint: str,
                    page_number: int, page_size: int) -> str:
    return link_generator(endpoint, {"pageNumber": page_number, "pageSize": page_size})


def build_pagination_metadata(page: Page, link_generator: LinkGenerator,
                              endpoint: str) -> PaginationMetadata:
    """
    Build X-Pagination metadata for a fetched page.

    Links reuse page.page_size (the size actually used), not the raw
    requested one.
    """
    previous_page_link = None
    if page.has_previous:
        previous_page_link = build_page_link(
            link_generator, endpoint, page.current_page - 1, page.page_size
        )

    next_page_link = None
    if page.has_next:
        next_page_link = build_page_link(
            link_generator, endpoint, page.current_page + 1, page.page_size
        )

    return PaginationMetadata(
        previous_page_link=previous_page_link,
        next_page_link=next_page_link,
        total_count=page.total_count,
        page_size=page.page_size,
        current_page=page.current_page,
        total_pages=page.total_pages,
    )
