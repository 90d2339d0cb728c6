"""
Unit tests for utils/markdown.py
"""

import pytest

from utils.markdown import strip_markdown


class TestStripMarkdown:
    """strip_markdown()"""

    def test_bold_and_heading(self):
        assert strip_markdown("**Bold** and ### Heading") == "Bold and  Heading"

    def test_only_hash_and_star_removed(self):
        text = "- item_1 [link](https://x.hk) `code` 申請截止 > quote"
        assert strip_markdown(text) == text

    @pytest.mark.parametrize("text", [
        "**Bold** and ### Heading",
        "# 標題\n* 列表",
        "plain",
    ])
    def test_idempotent(self, text):
        once = strip_markdown(text)
        assert strip_markdown(once) == once

    def test_empty_passthrough(self):
        assert strip_markdown("") == ""
        assert strip_markdown(None) is None
