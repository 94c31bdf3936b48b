"""Tests for quickpopup.text.actions — selection transforms."""

from __future__ import annotations

from datetime import datetime

from quickpopup.text.actions import (
    build_daily_content,
    build_note_content,
    convert_to_link,
    format_memo_entry,
    format_path_reference,
    get_new_file_path,
    sanitize_file_name,
)

NOW = datetime(2024, 5, 1, 9, 5)


class TestConvertToLink:
    def test_wraps_text(self):
        assert convert_to_link("my note") == "[[my note]]"

    def test_existing_link_not_doubled(self):
        assert convert_to_link("[[already linked]]") == "[[already linked]]"

    def test_mixed_brackets_removed(self):
        assert convert_to_link("[mixed [brackets]]") == "[[mixed brackets]]"

    def test_empty(self):
        assert convert_to_link("") == "[[]]"


def test_format_path_reference():
    assert format_path_reference("notes/daily.md", 12) == "@notes/daily.md:12"


class TestSanitizeFileName:
    def test_unsafe_characters_replaced(self):
        assert sanitize_file_name('a/b\\c:d*e?f"g<h>i|j') == "a-b-c-d-e-f-g-h-i-j"

    def test_first_line_only(self):
        assert sanitize_file_name("タイトル\n本文の続き") == "タイトル"

    def test_truncated_to_50(self):
        assert sanitize_file_name("x" * 80) == "x" * 50

    def test_blank_is_untitled(self):
        assert sanitize_file_name("   ") == "Untitled"
        assert sanitize_file_name("") == "Untitled"

    def test_surrounding_whitespace_trimmed(self):
        assert sanitize_file_name("  hello  ") == "hello"


class TestNewFilePath:
    def test_with_folder(self):
        assert get_new_file_path("My Note", "inbox") == "inbox/My Note.md"

    def test_trailing_slashes_stripped(self):
        assert get_new_file_path("My Note", "inbox//") == "inbox/My Note.md"

    def test_without_folder(self):
        assert get_new_file_path("My Note", "") == "My Note.md"
        assert get_new_file_path("My Note") == "My Note.md"


class TestDailyContent:
    def test_memo_entry(self):
        assert format_memo_entry("  メモ  ", NOW) == "- 09:05 メモ"

    def test_appends_to_existing(self):
        existing = "# 2024-05-01\n- 08:00 first\n\n\n"
        assert build_daily_content(existing, "second", NOW) == "# 2024-05-01\n- 08:00 first\n- 09:05 second"

    def test_empty_note(self):
        assert build_daily_content("", "first", NOW) == "\n- 09:05 first"


class TestNoteContent:
    def test_without_source(self):
        assert build_note_content("selected") == "selected"

    def test_with_source(self):
        assert build_note_content("selected", "https://example.com") == (
            "selected\n\n---\nSource: https://example.com"
        )
