import re
from typing import List, Set

from plagiarism_engine.config import MIN_SENTENCE_LENGTH

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def normalize_text(text: str) -> str:
    if not text:
        return ""
    text = text.lower()
    text = re.sub(r"[^\w\s]", "", text)
    text = re.sub(r"\s+", " ", text).strip()
    return text


def split_into_sentences(text: str) -> List[str]:
    """Split raw text on runs of ., ! and ?, dropping fragments too short to compare.

    Pieces are stripped but otherwise left untouched, so each one is still a
    substring of ``text`` and can be located in it later.
    """
    pieces = _SENTENCE_BOUNDARY.split(text or "")
    return [p.strip() for p in pieces if len(p.strip()) >= MIN_SENTENCE_LENGTH]


def _word_set(norm_text: str) -> Set[str]:
    return set(norm_text.split())


def _jaccard(a: Set[str], b: Set[str]) -> float:
    if not a and not b:
        return 0.0
    inter = len(a & b)
    union = len(a | b)
    return inter / union


def calculate_similarity(norm_a: str, norm_b: str) -> float:
    """Jaccard similarity of the two word sets, as a percentage (0–100)."""
    return _jaccard(_word_set(norm_a), _word_set(norm_b)) * 100.0
