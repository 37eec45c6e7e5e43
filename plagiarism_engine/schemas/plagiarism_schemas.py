from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime, timezone


class MatchedSegment(BaseModel):
    # Half-open offsets into the checked submission's original text
    text: str
    startIndex: int
    endIndex: int
    matchedSubmissionId: str


class PlagiarismReport(BaseModel):
    submission_id: str
    compared_submission_id: str
    similarity_score: float  # percent (0–100)
    matched_content: List[MatchedSegment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ComparedStudent(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None


class StoredPlagiarismReport(PlagiarismReport):
    id: str
    compared_student: Optional[ComparedStudent] = None


class PlagiarismCheckRequest(BaseModel):
    assignment_id: str


class PlagiarismCheckResult(BaseModel):
    overallSimilarity: float
    severity: str                  # "low" | "moderate" | "high" | "very_high"
    reports: List[PlagiarismReport] = Field(default_factory=list)
    matchedSegments: List[MatchedSegment] = Field(default_factory=list)
    message: Optional[str] = None


class HighlightedSubmission(BaseModel):
    submission_id: str
    checked: bool
    highlightedContent: str
    similarity: Optional[float] = None   # highest stored per-pair score
    severity: Optional[str] = None
    message: str
