"""
Pytest configuration and shared fixtures for testing.
"""
import pytest
import os
import sys
from typing import Dict, List, Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from plagiarism_engine.errors import StoreError
from plagiarism_engine.schemas.plagiarism_schemas import (
    ComparedStudent,
    PlagiarismReport,
    StoredPlagiarismReport,
)
from plagiarism_engine.schemas.submission_schemas import PeerSubmission, Submission


class InMemorySubmissionStore:
    """Submission store backed by a dict, mirroring the MongoDB query semantics."""

    def __init__(self, submissions: List[Submission] = (), students: Optional[Dict[str, ComparedStudent]] = None):
        self.submissions = {s.id: s for s in submissions}
        self.students = students or {}
        self.fail_reads = False

    def add(self, submission: Submission):
        self.submissions[submission.id] = submission

    async def get_content(self, submission_id: str) -> Optional[str]:
        if self.fail_reads:
            raise StoreError("submissions unavailable")
        submission = self.submissions.get(submission_id)
        return submission.content if submission else None

    async def list_submitted(self, assignment_id: str, excluding_id: str) -> List[PeerSubmission]:
        if self.fail_reads:
            raise StoreError("submissions unavailable")
        return [
            PeerSubmission(id=s.id, content=s.content)
            for s in self.submissions.values()
            if s.assignment_id == assignment_id and s.id != excluding_id and s.status == "submitted"
        ]


class InMemoryReportStore:
    def __init__(self, submissions: Optional[InMemorySubmissionStore] = None):
        self.rows: List[StoredPlagiarismReport] = []
        self.submissions = submissions
        self.fail_for = set()

    async def insert(self, report: PlagiarismReport) -> str:
        if report.compared_submission_id in self.fail_for:
            raise StoreError("insert rejected")
        report_id = f"report-{len(self.rows) + 1}"
        self.rows.append(StoredPlagiarismReport(id=report_id, **report.model_dump()))
        return report_id

    async def list_by_submission(self, submission_id: str) -> List[StoredPlagiarismReport]:
        found = []
        for row in self.rows:
            if row.submission_id != submission_id:
                continue
            student = None
            if self.submissions is not None:
                compared = self.submissions.submissions.get(row.compared_submission_id)
                if compared is not None:
                    student = self.submissions.students.get(compared.student_id)
            found.append(row.model_copy(update={"compared_student": student}))
        return sorted(found, key=lambda r: r.similarity_score, reverse=True)


@pytest.fixture
def submission_store():
    return InMemorySubmissionStore(students={
        "student-a": ComparedStudent(full_name="Ada Checked", email="ada@example.edu"),
        "student-b": ComparedStudent(full_name="Ben Peer", email="ben@example.edu"),
        "student-c": ComparedStudent(full_name="Cy Peer", email="cy@example.edu"),
    })


@pytest.fixture
def report_store(submission_store):
    return InMemoryReportStore(submission_store)


@pytest.fixture
def make_submission():
    def _make(submission_id: str, content: str, status: str = "submitted",
              assignment_id: str = "assignment-1", student_id: Optional[str] = None) -> Submission:
        return Submission(
            id=submission_id,
            student_id=student_id or f"student-{submission_id}",
            assignment_id=assignment_id,
            content=content,
            status=status,
        )
    return _make
