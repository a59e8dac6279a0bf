"""Tests for ansible_logs_view.domain.view.layout."""

from __future__ import annotations

import pytest

from ansible_logs_view.config import LayoutConfig
from ansible_logs_view.domain.view.layout import Layout, compute_layout


class TestComputeLayout:
    def test_standard_terminal(self):
        assert compute_layout(80, 24) == Layout(
            width=76, list_height=3, details_height=14, details_text_height=10
        )

    def test_tall_terminal_gives_details_a_third(self):
        layout = compute_layout(120, 60)
        assert layout.details_height == 17
        assert layout.list_height == 36
        assert layout.details_text_height == 13

    def test_medium_terminal_uses_details_minimum(self):
        layout = compute_layout(100, 40)
        assert layout.details_height == 15
        assert layout.list_height == 18

    def test_tiny_terminal_keeps_floors(self):
        layout = compute_layout(10, 10)
        assert layout.details_height == 3
        assert layout.list_height == 1
        assert layout.details_text_height == 0
        assert layout.width == 6

    @pytest.mark.parametrize("height", range(0, 80, 7))
    def test_list_never_below_one_row(self, height):
        assert compute_layout(80, height).list_height >= 1

    def test_custom_config(self):
        config = LayoutConfig(details_min_height=5, vertical_padding=0)
        layout = compute_layout(80, 24, config)
        assert layout.details_height == 7
        assert layout.list_height == 14
