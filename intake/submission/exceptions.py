class SubmissionError(Exception):
    """Base exception for all submission-related errors."""


class SubmissionBlockedError(SubmissionError):
    """Raised when a submission is attempted while it is disabled."""
