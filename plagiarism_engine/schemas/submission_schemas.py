from enum import Enum
from pydantic import BaseModel


class SubmissionStatus(str, Enum):
    draft = "draft"
    submitted = "submitted"
    graded = "graded"


class Submission(BaseModel):
    id: str
    student_id: str
    assignment_id: str
    content: str = ""
    status: SubmissionStatus = SubmissionStatus.draft


class PeerSubmission(BaseModel):
    """Comparison target: just enough of a peer submission to match against."""
    id: str
    content: str = ""
