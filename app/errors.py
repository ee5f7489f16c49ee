class InvalidBranch(Exception):
    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(
            f'Invalid branch "{branch}"; must be either "senate" or "treasury"'
        )


class CandidateValidationError(ValueError):
    """A candidate submission the client has to fix. `field` names the culprit."""
    field = ""
    message = ""

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class MissingName(CandidateValidationError):
    field = "name"
    message = "missing name"


class MissingAnswers(CandidateValidationError):
    field = "answers"
    message = "missing answers"


class AnswersTooLong(CandidateValidationError):
    field = "answers"
    message = "one or more answers are too long"


class WrongAnswerCount(CandidateValidationError):
    field = "answers"


class StoreError(Exception):
    """The database call itself failed."""


class DecodeError(Exception):
    """A stored document doesn't have the shape we expect."""


class MalformedBody(Exception):
    """Request body isn't JSON, or has fields of the wrong type."""

    def __init__(self, data: dict):
        self.data = data
        super().__init__(str(data))
