"""Plain-language summary for paginated documents (HWP section lists)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from plansight.models.elements import DocumentSection, TextSection

# Body text shorter than this is quoted whole; otherwise only a preview.
_FULL_QUOTE_MAX_CHARS = 200
_PREVIEW_CHARS = 100

_SECTION_NOUNS = (
    ("text", "text section"),
    ("table", "table"),
    ("image", "image"),
)

_CLOSING = "This is a brief summary and does not replace the full document."


def summarize_document(sections: Sequence[DocumentSection], title: str) -> str:
    counts = Counter(s.type for s in sections)
    text = f'The document "{title}" consists of {len(sections)} section'
    text += "" if len(sections) == 1 else "s"

    parts = [
        f"{counts[kind]} {noun if counts[kind] == 1 else noun + 's'}"
        for kind, noun in _SECTION_NOUNS
        if counts[kind]
    ]
    text += f", including {', '.join(parts)}. " if parts else ". "

    body = " ".join(s.content for s in sections if isinstance(s, TextSection))
    if body:
        if len(body) < _FULL_QUOTE_MAX_CHARS:
            text += f'Its main content reads: "{body}". '
        else:
            text += f'Its main content begins: "{body[:_PREVIEW_CHARS]}...". '

    return text + _CLOSING
