from typing import List, Optional, Protocol

from plagiarism_engine.schemas.plagiarism_schemas import PlagiarismReport, StoredPlagiarismReport
from plagiarism_engine.schemas.submission_schemas import PeerSubmission


class SubmissionStore(Protocol):
    async def get_content(self, submission_id: str) -> Optional[str]:
        """Text of a submission, or None when it does not exist."""
        ...

    async def list_submitted(self, assignment_id: str, excluding_id: str) -> List[PeerSubmission]:
        """Submitted peers of an assignment, without ``excluding_id``."""
        ...


class ReportStore(Protocol):
    async def insert(self, report: PlagiarismReport) -> str:
        """Append a report and return its id."""
        ...

    async def list_by_submission(self, submission_id: str) -> List[StoredPlagiarismReport]:
        """Reports of a submission, highest score first, compared student attached."""
        ...
