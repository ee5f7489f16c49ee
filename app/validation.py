from app.config import ANSWER_MAX_LENGTH, QUESTION_COUNT
from app.errors import AnswersTooLong, MissingAnswers, MissingName, WrongAnswerCount
from app.models.candidate_model import CandidateRequest


def validate_candidate(request: CandidateRequest) -> None:
    """
    Check a submission before it is stored. Stops at the first problem:
    name, then presence of answers, then answer length, then answer count.
    Raises a CandidateValidationError subclass.
    """
    if not request.name:
        raise MissingName()
    if request.answers is None:
        raise MissingAnswers()
    for answer in request.answers:
        if len(answer) > ANSWER_MAX_LENGTH:
            raise AnswersTooLong()
    if len(request.answers) != QUESTION_COUNT:
        raise WrongAnswerCount(
            f"expected {QUESTION_COUNT} answers, got {len(request.answers)}"
        )
