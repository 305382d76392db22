"""페이지 요청 정규화 테스트.

PageRequest normalization tests — page/size are clamped, never rejected.
"""

import pytest

from app.utils.pagination import MAX_SIZE, Page, PageRequest, validate_page_request


class TestValidatePageRequest:
    """page/size 정규화."""

    @pytest.mark.parametrize("page", [None, -1, -100])
    def test_missing_or_negative_page_becomes_zero(self, page):
        assert validate_page_request(page, 20).page == 0

    def test_valid_page_is_kept(self):
        assert validate_page_request(7, 20).page == 7

    @pytest.mark.parametrize("size", [None, 0, -5])
    def test_missing_or_non_positive_size_defaults_to_ten(self, size):
        assert validate_page_request(0, size).size == 10

    def test_size_is_capped(self):
        assert validate_page_request(0, 250).size == MAX_SIZE == 100

    def test_size_in_range_is_kept(self):
        assert validate_page_request(0, 42).size == 42

    def test_boundaries(self):
        assert validate_page_request(0, 1).size == 1
        assert validate_page_request(0, 100).size == 100
        assert validate_page_request(0, 101).size == 100

    @pytest.mark.parametrize(
        "page,size",
        [(None, None), (-3, 0), (0, 250), (5, 42), (2, -1), (1, 100)],
    )
    def test_is_a_fixed_point(self, page, size):
        once = validate_page_request(page, size)
        assert validate_page_request(once.page, once.size) == once

    def test_offset(self):
        assert PageRequest(page=3, size=10).offset == 30


class TestPageBuild:
    """Page 응답 메타데이터."""

    def test_total_pages_rounds_up(self):
        page = Page[int].build([1, 2], PageRequest(page=0, size=2), total=5)
        assert page.total_pages == 3
        assert page.total_elements == 5
        assert page.content == [1, 2]

    def test_empty(self):
        page = Page[int].build([], PageRequest(page=4, size=10), total=0)
        assert page.total_pages == 0
        assert page.page == 4
