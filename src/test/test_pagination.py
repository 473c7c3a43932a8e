"""
Pagination Engine Tests

ページ番号・ページサイズの正規化とX-Paginationメタデータ生成のテスト
"""

import json
import pytest
import sys
import os

# Add path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from src.domain.entity.page import Page
from src.usecase.user_management.pagination import (
    MAX_PAGE_SIZE, PageRequest, build_pagination_metadata
)


def fake_link_generator(endpoint, params):
    """テスト用のリンク生成関数"""
    query = "&".join(f"{k}={v}" for k, v in params.items())
    return f"http://test/{endpoint}?{query}"


class TestPageRequestNormalization:
    """入力値の正規化テスト"""

    @pytest.mark.parametrize("requested", [21, 50, 999, 10**9])
    def test_oversized_page_size_is_clamped_to_max(self, requested):
        assert PageRequest.normalize(1, requested).page_size == MAX_PAGE_SIZE

    @pytest.mark.parametrize("requested", [0, -1, -100])
    def test_non_positive_page_size_becomes_one(self, requested):
        assert PageRequest.normalize(1, requested).page_size == 1

    @pytest.mark.parametrize("requested", [0, -1, -42])
    def test_non_positive_page_number_becomes_one(self, requested):
        assert PageRequest.normalize(requested, 10).page_number == 1

    def test_in_range_values_are_kept(self):
        request = PageRequest.normalize(3, 20)
        assert request.page_number == 3
        assert request.page_size == 20

    def test_defaults(self):
        request = PageRequest()
        assert request.page_number == 1
        assert request.page_size == 10


class TestPage:
    """Pageエンティティの派生値テスト"""

    def test_total_pages_rounds_up(self):
        assert Page(total_count=45, current_page=1, page_size=20).total_pages == 3
        assert Page(total_count=40, current_page=1, page_size=20).total_pages == 2

    def test_empty_collection_has_no_pages(self):
        page = Page(total_count=0, current_page=1, page_size=10)
        assert page.total_pages == 0
        assert not page.has_previous
        assert not page.has_next

    @pytest.mark.parametrize("current_page,has_previous,has_next", [
        (1, False, True),
        (2, True, True),
        (3, True, False),
        (4, True, False),
    ])
    def test_navigation_flags(self, current_page, has_previous, has_next):
        page = Page(total_count=45, current_page=current_page, page_size=20)
        assert page.has_previous is has_previous
        assert page.has_next is has_next


class TestPaginationMetadata:
    """X-Paginationメタデータ生成テスト"""

    def test_first_page_has_only_next_link(self):
        page = Page(items=[], total_count=45, current_page=1, page_size=20)

        metadata = build_pagination_metadata(page, fake_link_generator, "get_users")

        assert metadata.previous_page_link is None
        assert metadata.next_page_link == "http://test/get_users?pageNumber=2&pageSize=20"
        assert metadata.total_count == 45
        assert metadata.page_size == 20
        assert metadata.current_page == 1
        assert metadata.total_pages == 3

    def test_middle_page_has_both_links(self):
        page = Page(items=[], total_count=45, current_page=2, page_size=20)

        metadata = build_pagination_metadata(page, fake_link_generator, "get_users")

        assert metadata.previous_page_link == "http://test/get_users?pageNumber=1&pageSize=20"
        assert metadata.next_page_link == "http://test/get_users?pageNumber=3&pageSize=20"

    def test_last_page_has_only_previous_link(self):
        page = Page(items=[], total_count=45, current_page=3, page_size=20)

        metadata = build_pagination_metadata(page, fake_link_generator, "get_users")

        assert metadata.previous_page_link == "http://test/get_users?pageNumber=2&pageSize=20"
        assert metadata.next_page_link is None

    def test_links_use_effective_page_size(self):
        """リンクには正規化後のページサイズを使う"""
        request = PageRequest.normalize(2, 999)
        page = Page(items=[], total_count=100, current_page=request.page_number,
                    page_size=request.page_size)

        metadata = build_pagination_metadata(page, fake_link_generator, "get_users")

        assert "pageSize=20" in metadata.previous_page_link
        assert "pageSize=20" in metadata.next_page_link

    def test_header_value_is_camel_case_json(self):
        page = Page(items=[], total_count=5, current_page=1, page_size=10)

        header = json.loads(
            build_pagination_metadata(page, fake_link_generator, "get_users").to_header_value()
        )

        assert header == {
            "previousPageLink": None,
            "nextPageLink": None,
            "totalCount": 5,
            "pageSize": 10,
            "currentPage": 1,
            "totalPages": 1,
        }
