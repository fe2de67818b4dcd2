#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_link_registry.py
"""Unit tests for LinkRegistry."""

import pytest

from bbml import LinkNotFoundError, LinkRegistry, ValidationError


@pytest.mark.unit
class TestLinkRegistry:
    """Tests for registration, lookup and sizing."""

    def test_register_returns_sequential_indices(self):
        registry = LinkRegistry()

        assert registry.register("/a") == 0
        assert registry.register("/b") == 1
        assert registry.register("/a") == 2
        assert registry.to_list() == ["/a", "/b", "/a"]
        assert len(registry) == 3

    def test_resolve(self):
        registry = LinkRegistry.from_hrefs(["/a", "/b"])

        assert registry.resolve(1) == "/b"
        assert registry[0] == "/a"
        assert list(registry) == ["/a", "/b"]

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_resolve_out_of_range(self, index):
        registry = LinkRegistry.from_hrefs(["/a", "/b"])

        with pytest.raises(LinkNotFoundError) as exc_info:
            registry.resolve(index)

        assert exc_info.value.index == index
        assert "0-1" in exc_info.value.message

    def test_resolve_on_empty_registry(self):
        with pytest.raises(ValidationError, match="no links"):
            LinkRegistry().resolve(0)

    @pytest.mark.parametrize("count,digits", [(0, 0), (1, 1), (9, 1), (10, 2), (100, 3)])
    def test_index_digits(self, count, digits):
        registry = LinkRegistry.from_hrefs([f"/{n}" for n in range(count)])

        assert registry.index_digits == digits

    def test_from_hrefs_copies_input(self):
        hrefs = ["/a"]
        registry = LinkRegistry.from_hrefs(hrefs)

        hrefs.append("/b")

        assert len(registry) == 1
