from fastapi import APIRouter, HTTPException, Depends
from typing import List
import logging

from plagiarism_engine.dependencies.stores import get_report_store, get_submission_store
from plagiarism_engine.errors import StoreError, SubmissionNotFoundError
from plagiarism_engine.schemas.plagiarism_schemas import (
    HighlightedSubmission,
    PlagiarismCheckRequest,
    PlagiarismCheckResult,
    StoredPlagiarismReport,
)
from plagiarism_engine.services.plagiarism_service import (
    check_plagiarism,
    get_highlighted_submission,
    get_plagiarism_reports,
)
from plagiarism_engine.stores.base import ReportStore, SubmissionStore

router = APIRouter(prefix="/teacher", tags=["teacher-plagiarism"])
logger = logging.getLogger("plagiarism_check")


@router.post("/submissions/{submission_id}/plagiarism-check", response_model=PlagiarismCheckResult)
async def run_plagiarism_check(
    submission_id: str,
    body: PlagiarismCheckRequest,
    submissions: SubmissionStore = Depends(get_submission_store),
    reports: ReportStore = Depends(get_report_store),
):
    try:
        return await check_plagiarism(submission_id, body.assignment_id, submissions, reports)
    except SubmissionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        logger.error(f"❌ Plagiarism check failed for {submission_id}: {e}")
        raise HTTPException(status_code=503, detail="Submission storage unavailable")


@router.get("/submissions/{submission_id}/plagiarism-reports", response_model=List[StoredPlagiarismReport])
async def list_plagiarism_reports(
    submission_id: str,
    reports: ReportStore = Depends(get_report_store),
):
    try:
        return await get_plagiarism_reports(submission_id, reports)
    except StoreError as e:
        logger.error(f"❌ Could not load reports for {submission_id}: {e}")
        raise HTTPException(status_code=503, detail="Report storage unavailable")


@router.get("/submissions/{submission_id}/plagiarism-highlight", response_model=HighlightedSubmission)
async def highlight_submission(
    submission_id: str,
    submissions: SubmissionStore = Depends(get_submission_store),
    reports: ReportStore = Depends(get_report_store),
):
    try:
        return await get_highlighted_submission(submission_id, submissions, reports)
    except SubmissionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        logger.error(f"❌ Could not highlight {submission_id}: {e}")
        raise HTTPException(status_code=503, detail="Storage unavailable")
