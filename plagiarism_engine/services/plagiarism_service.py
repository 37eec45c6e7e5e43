"""
Similarity check for one submission against the other submitted work of the
same assignment.

``check_plagiarism`` compares the checked submission with every submitted
peer, appends one report per peer with matches, and returns the
overlap-corrected overall similarity. Per-pair scores are not corrected for
overlapping sentences within the pair; only the overall figure is. A
sentence matching several peer sentences can push the per-pair score past
100: the returned report keeps that raw value and only the stored copy is
capped at 100.
"""
import logging
from typing import List

from plagiarism_engine.config import SIMILARITY_THRESHOLD
from plagiarism_engine.errors import StoreError, SubmissionNotFoundError
from plagiarism_engine.schemas.plagiarism_schemas import (
    HighlightedSubmission,
    MatchedSegment,
    PlagiarismCheckResult,
    PlagiarismReport,
    StoredPlagiarismReport,
)
from plagiarism_engine.stores.base import ReportStore, SubmissionStore
from plagiarism_engine.utils.report_utils import (
    NOT_CHECKED_MESSAGE,
    NO_PEERS_MESSAGE,
    highlight_content,
    severity_band,
    severity_message,
)
from plagiarism_engine.utils.segment_utils import (
    coverage_percentage,
    find_matching_segments,
    merge_overlapping_segments,
)

logger = logging.getLogger("plagiarism_service")


def _stored_copy(report: PlagiarismReport) -> PlagiarismReport:
    # Persisted scores must stay within 0..100
    return report.model_copy(update={"similarity_score": min(report.similarity_score, 100.0)})


async def check_plagiarism(
    submission_id: str,
    assignment_id: str,
    submission_store: SubmissionStore,
    report_store: ReportStore,
    threshold: float = SIMILARITY_THRESHOLD,
) -> PlagiarismCheckResult:
    content = await submission_store.get_content(submission_id)
    if not content:
        raise SubmissionNotFoundError(submission_id)

    peers = await submission_store.list_submitted(assignment_id, excluding_id=submission_id)
    logger.info(f"🔍 Checking submission {submission_id} against {len(peers)} peer(s)")

    if not peers:
        return PlagiarismCheckResult(
            overallSimilarity=0.0,
            severity=severity_band(0.0),
            message=NO_PEERS_MESSAGE,
        )

    all_segments: List[MatchedSegment] = []
    reports: List[PlagiarismReport] = []

    for peer in peers:
        if not peer.content:
            continue

        matches = find_matching_segments(content, peer.content, peer.id, threshold=threshold)
        if not matches:
            continue

        report = PlagiarismReport(
            submission_id=submission_id,
            compared_submission_id=peer.id,
            similarity_score=coverage_percentage(matches, content),
            matched_content=matches,
        )
        try:
            await report_store.insert(_stored_copy(report))
            logger.info(f"   ➤ {peer.id}: {report.similarity_score}% ({len(matches)} segment(s)) saved")
        except StoreError as e:
            logger.error(f"   ❌ Could not save report {submission_id} vs {peer.id}: {e}")

        all_segments.extend(matches)
        reports.append(report)

    merged = merge_overlapping_segments(all_segments)
    overall = coverage_percentage(merged, content)
    logger.info(f"✅ Submission {submission_id}: overall similarity {overall}% across {len(reports)} report(s)")

    return PlagiarismCheckResult(
        overallSimilarity=overall,
        severity=severity_band(overall),
        reports=sorted(reports, key=lambda r: r.similarity_score, reverse=True),
        matchedSegments=merged,
        message=severity_message(overall),
    )


async def get_plagiarism_reports(
    submission_id: str,
    report_store: ReportStore,
) -> List[StoredPlagiarismReport]:
    reports = await report_store.list_by_submission(submission_id)
    return sorted(reports, key=lambda r: r.similarity_score, reverse=True)


async def get_highlighted_submission(
    submission_id: str,
    submission_store: SubmissionStore,
    report_store: ReportStore,
) -> HighlightedSubmission:
    """Submission content with every previously stored match highlighted."""
    content = await submission_store.get_content(submission_id)
    if content is None:
        raise SubmissionNotFoundError(submission_id)

    reports = await get_plagiarism_reports(submission_id, report_store)
    if not reports:
        return HighlightedSubmission(
            submission_id=submission_id,
            checked=False,
            highlightedContent=highlight_content(content, []),
            message=NOT_CHECKED_MESSAGE,
        )

    segments = [segment for r in reports for segment in r.matched_content]
    top_score = reports[0].similarity_score
    return HighlightedSubmission(
        submission_id=submission_id,
        checked=True,
        highlightedContent=highlight_content(content, segments),
        similarity=top_score,
        severity=severity_band(top_score),
        message=severity_message(top_score),
    )
