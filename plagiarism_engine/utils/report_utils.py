"""
Display helpers layered on top of the numeric results: severity bands for an
overall score and HTML highlighting of matched spans.
"""
import html
from typing import Iterable

from plagiarism_engine.config import (
    LOW_SIMILARITY_MAX,
    MODERATE_SIMILARITY_MAX,
    HIGH_SIMILARITY_MAX,
)
from plagiarism_engine.schemas.plagiarism_schemas import MatchedSegment
from plagiarism_engine.utils.segment_utils import merge_overlapping_segments

SEVERITY_MESSAGES = {
    "low": "Low similarity - looks good!",
    "moderate": "Moderate similarity - review recommended",
    "high": "High similarity - investigation needed",
    "very_high": "Very high similarity - significant concern",
}

NO_PEERS_MESSAGE = "No other submissions to compare against"
NOT_CHECKED_MESSAGE = "No plagiarism check has been run for this submission yet"


def severity_band(score: float) -> str:
    if score < LOW_SIMILARITY_MAX:
        return "low"
    if score < MODERATE_SIMILARITY_MAX:
        return "moderate"
    if score < HIGH_SIMILARITY_MAX:
        return "high"
    return "very_high"


def severity_message(score: float) -> str:
    return SEVERITY_MESSAGES[severity_band(score)]


def highlight_content(
    content: str,
    segments: Iterable[MatchedSegment],
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
) -> str:
    """Wrap every matched span of ``content`` in highlight tags.

    Spans are merged first so overlapping matches from different peers never
    produce nested or repeated markup. Text outside the tags is HTML-escaped.
    """
    parts = []
    last = 0
    for span in merge_overlapping_segments(segments):
        start = max(span.startIndex, last)
        end = min(span.endIndex, len(content))
        if start >= end:
            continue
        parts.append(html.escape(content[last:start]))
        parts.append(f"{open_tag}{html.escape(content[start:end])}{close_tag}")
        last = end
    parts.append(html.escape(content[last:]))
    return "".join(parts)
