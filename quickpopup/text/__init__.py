"""Text processing: paragraph splitting and selection transforms."""

from quickpopup.text.actions import (
    build_daily_content,
    build_note_content,
    convert_to_link,
    format_memo_entry,
    format_path_reference,
    get_new_file_path,
    sanitize_file_name,
)
from quickpopup.text.splitter import (
    ParagraphSplitter,
    SplitResult,
    merge_bracket_paragraphs,
    split_into_paragraphs,
)

__all__ = [
    "ParagraphSplitter",
    "SplitResult",
    "build_daily_content",
    "build_note_content",
    "convert_to_link",
    "format_memo_entry",
    "format_path_reference",
    "get_new_file_path",
    "merge_bracket_paragraphs",
    "sanitize_file_name",
    "split_into_paragraphs",
]
