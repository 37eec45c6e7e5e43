class PlagiarismEngineError(Exception):
    """Base class for errors raised by the similarity engine."""


class SubmissionNotFoundError(PlagiarismEngineError, LookupError):
    """The checked submission does not exist or has no content."""

    def __init__(self, submission_id: str):
        super().__init__(f"Submission not found or empty: {submission_id}")
        self.submission_id = submission_id


class StoreError(PlagiarismEngineError):
    """A submission or report store call failed."""
