"""Tests for request/response schemas."""

import pytest
from pydantic import ValidationError

from snippet_manager.schemas import (
    Page,
    PageRequest,
    SnippetEdit,
    SnippetFilter,
    SnippetInput,
    SnippetSummary,
)


class TestPagination:
    def test_offset(self):
        assert PageRequest(page=3, size=20).offset == 60

    def test_defaults_sort_newest_first(self):
        request = PageRequest()

        assert request.page == 0
        assert request.sort_by == "id"
        assert request.direction == "desc"

    @pytest.mark.parametrize(
        "total,page,expected_pages,is_last",
        [
            (0, 0, 0, True),
            (10, 0, 1, True),
            (11, 0, 2, False),
            (11, 1, 2, True),
        ],
    )
    def test_page_metadata(self, total, page, expected_pages, is_last):
        result = Page[SnippetSummary](items=[], page=page, size=10, total_elements=total)

        assert result.total_pages == expected_pages
        assert result.is_last is is_last

    def test_rejects_negative_page(self):
        with pytest.raises(ValidationError):
            PageRequest(page=-1)


class TestSnippetSchemas:
    def test_input_requires_name_and_language(self):
        with pytest.raises(ValidationError):
            SnippetInput(name="", language="printscript", code="x")
        with pytest.raises(ValidationError):
            SnippetInput(name="sum", language="", code="x")

    def test_empty_code_is_allowed(self):
        assert SnippetEdit(code="").code == ""

    def test_filter_defaults_to_all_relations(self):
        snippet_filter = SnippetFilter()

        assert snippet_filter.relation == "all"
        assert snippet_filter.name is None
        assert snippet_filter.status is None

    def test_filter_rejects_unknown_relation(self):
        with pytest.raises(ValidationError):
            SnippetFilter(relation="everyone")
