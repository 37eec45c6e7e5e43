import math
from typing import Iterable, List

from plagiarism_engine.config import SIMILARITY_THRESHOLD
from plagiarism_engine.schemas.plagiarism_schemas import MatchedSegment
from plagiarism_engine.utils.lexical_utils import (
    normalize_text,
    split_into_sentences,
    calculate_similarity,
)


def find_matching_segments(
    original_text: str,
    compared_text: str,
    compared_submission_id: str,
    threshold: float = SIMILARITY_THRESHOLD,
) -> List[MatchedSegment]:
    """
    Compare every sentence of ``original_text`` with every sentence of
    ``compared_text`` and record a segment for each pair scoring at or above
    ``threshold``.

    Segments point at the first occurrence of the original sentence in
    ``original_text``. A sentence matching several compared sentences is
    recorded once per match; duplicates are only folded away when merging.
    """
    matches: List[MatchedSegment] = []
    original_sentences = split_into_sentences(original_text)
    compared_normalized = [normalize_text(s) for s in split_into_sentences(compared_text)]

    for sentence in original_sentences:
        norm_sentence = normalize_text(sentence)

        for norm_compared in compared_normalized:
            if calculate_similarity(norm_sentence, norm_compared) < threshold:
                continue
            start = original_text.find(sentence)
            if start == -1:
                continue
            matches.append(MatchedSegment(
                text=sentence,
                startIndex=start,
                endIndex=start + len(sentence),
                matchedSubmissionId=compared_submission_id,
            ))

    return matches


def merge_overlapping_segments(segments: Iterable[MatchedSegment]) -> List[MatchedSegment]:
    """
    Coalesce touching or overlapping segments into non-overlapping spans.

    The merged ``text`` joins the parts with a space and is only a display
    aid; slice the original content by ``[startIndex, endIndex)`` for the real
    substring. Input segments are left unchanged.
    """
    ordered = sorted(segments, key=lambda s: s.startIndex)
    if not ordered:
        return []

    merged: List[MatchedSegment] = [ordered[0].model_copy()]
    for current in ordered[1:]:
        last = merged[-1]
        if current.startIndex <= last.endIndex:
            last.endIndex = max(last.endIndex, current.endIndex)
            last.text = f"{last.text} {current.text}"
        else:
            merged.append(current.model_copy())

    return merged


def matched_length(segments: Iterable[MatchedSegment]) -> int:
    return sum(s.endIndex - s.startIndex for s in segments)


def round_percentage(value: float) -> float:
    """Round to 2 decimals with halves going up (3.125 -> 3.13)."""
    return math.floor(value * 100 + 0.5) / 100


def coverage_percentage(segments: Iterable[MatchedSegment], content: str) -> float:
    """Share of ``content`` covered by ``segments``, rounded half-up to 2 decimals.

    Overlaps are counted as many times as they appear; merge first for an
    overlap-corrected figure.
    """
    if not content:
        return 0.0
    return round_percentage(matched_length(segments) / len(content) * 100.0)
