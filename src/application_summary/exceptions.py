"""Exception hierarchy for application-summary."""


class SummaryError(Exception):
    """Base exception for all application-summary errors."""


class RecordParseError(SummaryError):
    """Raised when an application record cannot be parsed into the model."""


class MalformedDeclarationError(SummaryError):
    """Raised when the declaration HTML fragment has no usable content."""

    def __init__(self, message: str, fragment: str = "") -> None:
        super().__init__(message)
        self.fragment = fragment


class LayoutError(SummaryError):
    """Raised when document composition cannot place content."""


class QuestionRenderError(LayoutError):
    """Raised when a question's answer cannot be rendered (e.g. bad date)."""

    def __init__(self, message: str, question_id: str = "") -> None:
        super().__init__(message)
        self.question_id = question_id


class SinkWriteError(SummaryError):
    """Raised when the output sink rejects the rendered document."""
