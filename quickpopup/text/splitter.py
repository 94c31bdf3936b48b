"""Bracket-aware paragraph splitting for Japanese prose.

Breaks one long block of text into paragraph-sized chunks. Split priority:
period count (。) > period in the search window > newline > ？！?! > 、 > hard
cut. Bracket spans are never split, and a paragraph never starts with an
opening bracket: such spans are folded into the neighbouring paragraph.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from loguru import logger

from quickpopup.config.schema import SplitterSettings

FULL_OPEN = "（"
FULL_CLOSE = "）"
HALF_OPEN = "("
HALF_CLOSE = ")"
OPEN_BRACKETS = (FULL_OPEN, HALF_OPEN)

PERIOD = "。"
COMMA = "、"
EXCLAMATIONS = ("？", "！", "?", "!")

PARAGRAPH_SEPARATOR = "\n\n"

# Full-width and half-width brackets never cross-match.
_CLOSE_FOR = {FULL_OPEN: FULL_CLOSE, HALF_OPEN: HALF_CLOSE}


@dataclass(frozen=True)
class SplitResult:
    """One split step: the paragraph and the text left to process."""

    paragraph: str
    remaining: str


class BracketDepth:
    """Full-width bracket depth before every position of a text.

    Built once per text so that inside-bracket checks are O(1).
    """

    def __init__(self, text: str):
        depths = [0]
        depth = 0
        for ch in text:
            if ch == FULL_OPEN:
                depth += 1
            elif ch == FULL_CLOSE:
                depth -= 1
            depths.append(depth)
        self._depths = depths

    def depth_at(self, position: int) -> int:
        """Depth counted over ``text[:position]``."""
        position = max(0, min(position, len(self._depths) - 1))
        return self._depths[position]

    def is_inside(self, position: int) -> bool:
        return self.depth_at(position) > 0


def is_inside_bracket(text: str, position: int) -> bool:
    """Check if a position falls inside a full-width bracket span."""
    return BracketDepth(text).is_inside(position)


def is_after_open_bracket(text: str, position: int) -> bool:
    """Check if the character before *position* is an opening bracket."""
    if position <= 0 or position > len(text):
        return False
    return text[position - 1] in OPEN_BRACKETS


def is_before_bracket(text: str, position: int) -> bool:
    """Check if the character after *position* is an opening bracket."""
    if position < 0 or position >= len(text) - 1:
        return False
    return text[position + 1] in OPEN_BRACKETS


def find_matching_bracket_close(text: str, open_pos: int) -> int:
    """Return the index closing the bracket at *open_pos*, or -1."""
    if open_pos < 0 or open_pos >= len(text):
        return -1
    open_bracket = text[open_pos]
    close_bracket = _CLOSE_FOR.get(open_bracket)
    if close_bracket is None:
        return -1

    depth = 1
    for i in range(open_pos + 1, len(text)):
        if text[i] == open_bracket:
            depth += 1
        elif text[i] == close_bracket:
            depth -= 1
            if depth == 0:
                return i
    return -1


def absorb_bracket_pair(text: str) -> SplitResult:
    """Take the leading bracket span (plus a directly following 。).

    Returns an empty paragraph and the untouched text when the bracket at
    position 0 has no matching close.
    """
    close = find_matching_bracket_close(text, 0)
    if close == -1:
        return SplitResult("", text)

    end = close + 1
    if text[end:end + 1] == PERIOD:
        end += 1
    return SplitResult(text[:end], text[end:])


def merge_bracket_paragraphs(paragraphs: list[str]) -> list[str]:
    """Fold paragraphs starting with an opening bracket into the previous one.

    The first paragraph is never merged.
    """
    merged: list[str] = []
    for para in paragraphs:
        if merged and para.startswith(OPEN_BRACKETS):
            merged[-1] = f"{merged[-1]} {para}"
        else:
            merged.append(para)
    return merged


def _cut(text: str, end: int, skip: int = 0) -> SplitResult:
    """Split *text* at *end*, dropping *skip* characters after it."""
    return SplitResult(text[:end], text[end + skip:].lstrip())


def _find_first_of(text: str, chars: tuple[str, ...]) -> int:
    """Earliest index of any of *chars* in *text*, or -1."""
    hits = [idx for idx in (text.find(c) for c in chars) if idx != -1]
    return min(hits) if hits else -1


class ParagraphSplitter:
    """Stateless paragraph splitter; settings are fixed at construction."""

    def __init__(self, settings: SplitterSettings | None = None):
        self.settings = settings or SplitterSettings()

    def split(self, text: str | None) -> str | None:
        """Return *text* with paragraph breaks (blank lines) inserted.

        Empty and whitespace-only input is returned unchanged.
        """
        if not text or not text.strip():
            return text
        return PARAGRAPH_SEPARATOR.join(self.paragraphs(text))

    def paragraphs(self, text: str | None) -> list[str]:
        """Split *text* into a list of trimmed, non-empty paragraphs."""
        if not text or not text.strip():
            return []

        lead = self._absorb_leading_bracket(text)
        paragraphs: list[str] = [lead.paragraph] if lead.paragraph else []
        remaining = lead.remaining

        while remaining:
            result = self.find_split_point(remaining)
            paragraph = result.paragraph
            remaining = result.remaining.lstrip()

            # Keep bracket spans with the paragraph they follow
            while remaining.startswith(OPEN_BRACKETS):
                absorbed = absorb_bracket_pair(remaining)
                if not absorbed.paragraph:
                    logger.debug("Unmatched bracket after split point, leaving as-is")
                    break
                paragraph += absorbed.paragraph
                remaining = absorbed.remaining.lstrip()

            paragraph = paragraph.strip()
            if paragraph:
                paragraphs.append(paragraph)

        merged = merge_bracket_paragraphs(paragraphs)
        logger.debug(f"Split {len(text)} chars into {len(merged)} paragraphs")
        return merged

    def find_split_point(self, text: str) -> SplitResult:
        """Choose where the first paragraph of *text* ends."""
        if len(text) <= self.settings.soft_limit:
            return SplitResult(text, "")

        periods = self._collect_periods(text)
        if len(periods) >= self.settings.period_threshold:
            return self._split_by_period_count(text, periods)
        return self._split_by_char_limit(text)

    def _collect_periods(self, text: str) -> list[int]:
        """Usable 。 positions: outside full-width brackets, not after an open one.

        Only periods that can still change the split are collected. Scanning
        stops past ``soft_limit`` unless exactly ``period_threshold - 1``
        periods were found there, in which case it stops at the next one.
        """
        limit = self.settings.soft_limit
        needed = self.settings.period_threshold
        periods: list[int] = []
        depth = 0

        for i, ch in enumerate(text):
            if i > limit and len(periods) != needed - 1:
                break
            if ch == FULL_OPEN:
                depth += 1
            elif ch == FULL_CLOSE:
                depth -= 1
            elif ch == PERIOD and depth <= 0 and not is_after_open_bracket(text, i):
                periods.append(i)
                if i > limit:
                    break
        return periods

    def _absorb_leading_bracket(self, text: str) -> SplitResult:
        """Move bracket spans at the very start of *text* out of the way.

        The payload is re-inserted after the first 。 of the rest (or at its
        end), so the first paragraph does not start with a bracket. When
        nothing else is left, the payload is returned as a standalone
        paragraph. Text that does not start with a matched bracket is
        returned untouched, leading whitespace included.
        """
        payload = ""
        remaining = text.lstrip()
        while remaining.startswith(OPEN_BRACKETS):
            absorbed = absorb_bracket_pair(remaining)
            if not absorbed.paragraph:
                break
            payload += absorbed.paragraph
            remaining = absorbed.remaining.lstrip()

        if not payload:
            if text.lstrip().startswith(OPEN_BRACKETS):
                logger.debug("Unmatched leading bracket, splitting as prose")
            return SplitResult("", text)

        if not remaining:
            return SplitResult(payload, "")

        period = remaining.find(PERIOD)
        if period == -1:
            return SplitResult("", f"{remaining} {payload}")
        insert_at = period + 1
        return SplitResult("", f"{remaining[:insert_at]}{payload} {remaining[insert_at:]}")

    def _split_by_period_count(self, text: str, periods: list[int]) -> SplitResult:
        limit = self.settings.soft_limit
        nth = self.settings.period_threshold - 1

        if periods[nth] <= limit:
            # Extend through every further period still within the limit
            split_at = periods[bisect_right(periods, limit) - 1]
            return _cut(text, split_at + 1)

        if periods[nth - 1] <= limit:
            return _cut(text, periods[nth - 1] + 1)

        return self._split_by_char_limit(text)

    def _split_by_char_limit(self, text: str) -> SplitResult:
        start = self.settings.search_start
        end = min(len(text), self.settings.search_end)
        window = text[start:end]
        depth = BracketDepth(text[:end])

        # 1. Period outside brackets, not followed by one
        for offset, ch in enumerate(window):
            if ch != PERIOD:
                continue
            pos = start + offset
            if not depth.is_inside(pos) and not is_before_bracket(text, pos):
                return _cut(text, pos + 1)

        # 2. Newline (dropped)
        idx = window.find("\n")
        if idx != -1:
            return _cut(text, start + idx, skip=1)

        # 3. Question / exclamation mark
        idx = _find_first_of(window, EXCLAMATIONS)
        if idx != -1:
            return _cut(text, start + idx + 1)

        # 4. Comma
        idx = window.find(COMMA)
        if idx != -1:
            return _cut(text, start + idx + 1)

        # 5. Hard cut
        return _cut(text, min(len(text), self.settings.hard_limit))


_default_splitter = ParagraphSplitter()


def split_into_paragraphs(text: str | None, settings: SplitterSettings | None = None) -> str | None:
    """Split *text* into paragraphs separated by blank lines."""
    splitter = ParagraphSplitter(settings) if settings is not None else _default_splitter
    return splitter.split(text)
