from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
import logging
import re

log = logging.getLogger(__name__)

_SENT_SPLIT = re.compile(r"(?<=[.!?])\s+", re.ASCII)
_NON_LETTER = re.compile(r"[^a-zA-Z\s]", re.ASCII)

# space and ASCII control characters; NBSP and other Unicode spaces are kept
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))

STOP_WORDS = frozenset({
    "the", "and", "is", "in", "at", "of", "a", "an", "to", "it",
    "for", "on", "with", "as", "by", "this", "that", "from", "i",
    "you", "he", "she", "they", "we", "but", "or", "if", "so", "are",
    "was", "were", "be", "been", "being", "am", "do", "does", "did",
})

BULLET = "• "


@dataclass
class Summary:
    bulleted_summary: str = ""
    key_sentences: List[str] = field(default_factory=list)
    top_words: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "bulleted_summary": self.bulleted_summary,
            "key_sentences": list(self.key_sentences),
            "top_words": list(self.top_words),
        }


def segment(text: str) -> List[str]:
    """Split after `.`, `!` or `?` followed by whitespace. Pieces keep their padding."""
    parts = _SENT_SPLIT.split(text)
    while parts and not parts[-1]:
        parts.pop()
    return parts


def normalize(text: str) -> str:
    return _NON_LETTER.sub(" ", text.lower())


def tokenize(normalized: str) -> List[str]:
    return normalized.split()


def count_frequencies(tokens: Iterable[str], stop_words: frozenset = STOP_WORDS) -> Dict[str, int]:
    freq: Dict[str, int] = {}
    for tok in tokens:
        tok = tok.strip()
        if not tok or tok in stop_words:
            continue
        freq[tok] = freq.get(tok, 0) + 1
    return freq


def select_top_terms(freq: Dict[str, int], k: int) -> List[str]:
    """
    Highest counts first; equal counts fall back to alphabetical order so the
    result does not depend on table insertion order.
    """
    if k <= 0:
        return []
    ranked = sorted(freq.items(), key=lambda kv: (-kv[1], kv[0]))
    return [tok for tok, _ in ranked[:min(k, len(ranked))]]


def _score(tokens: Iterable[str], freq: Dict[str, int], stop_words: frozenset) -> int:
    return sum(freq.get(t, 0) for t in tokens if t and t not in stop_words)


def select_key_sentences(
    sentences: List[str],
    top_words: List[str],
    freq: Dict[str, int],
    stop_words: frozenset = STOP_WORDS,
) -> List[str]:
    """
    For every top word pick the best-scoring sentence whose normalized text
    contains the word. Containment is a plain substring test, so "scat"
    matches "scatter". Ties keep the earlier sentence.
    """
    # normalized text and score per sentence do not depend on the top word
    prepared: List[Tuple[str, int, str]] = []
    for s in sentences:
        norm = normalize(s)
        prepared.append((norm, _score(tokenize(norm), freq, stop_words), s))

    # dict keys give us an insertion-ordered set
    selected: Dict[str, None] = {}
    for word in top_words:
        best_score = 0
        best: Optional[str] = None
        for norm, score, s in prepared:
            if word not in norm:
                continue
            if score > best_score:
                best_score = score
                best = s.strip(_TRIM_CHARS)
        if best is not None:
            selected.setdefault(best, None)
    return list(selected)


def format_summary(key_sentences: Iterable[str], bullet: str = BULLET) -> str:
    return "".join(f"{bullet}{s}\n" for s in key_sentences).rstrip(_TRIM_CHARS)


def summarize(text: Optional[str], top_word_count: int, bullet: str = BULLET) -> Summary:
    """
    Frequency-based key sentence extraction:
    - Split into sentences
    - Count non-stop-word tokens over the whole text
    - Take the top_word_count most frequent tokens
    - For each, keep the highest scoring sentence that mentions it
    """
    if not text:
        return Summary()

    sents = segment(text)
    freq = count_frequencies(tokenize(normalize(text)))
    top = select_top_terms(freq, top_word_count)
    keys = select_key_sentences(sents, top, freq)
    log.debug(
        "summarize: %d sentences, %d distinct terms, %d top words, %d key sentences",
        len(sents), len(freq), len(top), len(keys),
    )
    return Summary(bulleted_summary=format_summary(keys, bullet), key_sentences=keys, top_words=top)


def locate_occurrences(text: str, sentence: str) -> List[Tuple[int, int]]:
    """Non-overlapping (start, end) offsets of `sentence` in `text`, left to right."""
    spans: List[Tuple[int, int]] = []
    if not text or not sentence:
        return spans
    pos = text.find(sentence)
    while pos != -1:
        end = pos + len(sentence)
        spans.append((pos, end))
        pos = text.find(sentence, end)
    return spans
