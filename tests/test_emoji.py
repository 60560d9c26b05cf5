"""Tests for emoji-only message detection."""

import pytest

from chat_markdown.utils.emoji import count_emoji, emoji_only_size


class TestEmojiOnlySize:
    """Tests for emoji-only size tiers."""

    @pytest.mark.parametrize(
        "content,size",
        [
            ("😀", 1),
            ("  👍🏽  ", 1),
            ("❤️", 1),
            ("©️", 1),
            ("👨‍👩‍👧", 1),
            ("🇺🇸", 1),
            ("😀 😀", 2),
            ("🎉🎉🎉", 3),
            ("😀😀😀😀😀", 3),
        ],
    )
    def test_size_tiers(self, content, size):
        """Test the size tier of messages made only of emoji."""
        assert emoji_only_size(content) == size

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "   ",
            "hello",
            "hi 😀",
            "😀😀😀😀😀😀",
            "1",
            "**😀**",
            "©",
            "™",
            "↔",
            "© 😀",
        ],
    )
    def test_not_emoji_only(self, content):
        """Test messages that are not displayed as enlarged emoji."""
        assert emoji_only_size(content) is None

    def test_text_style_character_needs_variation_selector(self):
        """Test that text-style characters count only with U+FE0F."""
        assert count_emoji("©") == 0
        assert count_emoji("©️") == 1

    def test_zwj_sequence_counts_once(self):
        """Test that a joined family emoji counts as a single emoji."""
        assert count_emoji("👨‍👩‍👧") == 1

    def test_count_empty(self):
        """Test counting emoji in empty content."""
        assert count_emoji("") == 0
