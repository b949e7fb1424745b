from __future__ import annotations
from typing import Iterable, List, Tuple
from rich.text import Text
from .summarizer import locate_occurrences


def highlight_spans(text: str, key_sentences: Iterable[str]) -> List[Tuple[int, int]]:
    spans: List[Tuple[int, int]] = []
    for s in key_sentences:
        spans.extend(locate_occurrences(text, s))
    return sorted(spans)


def render_highlighted(text: str, key_sentences: Iterable[str], style: str = "bold black on yellow") -> Text:
    """Original text with every occurrence of a key sentence styled."""
    out = Text(text)
    for start, end in highlight_spans(text, key_sentences):
        out.stylize(style, start, end)
    return out
