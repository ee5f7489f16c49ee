import logging
import random
from typing import List, TypeVar

from app.config import QUESTION_COUNT
from app.errors import DecodeError
from app.models.candidate_model import Answer, Candidate

logger = logging.getLogger(__name__)

T = TypeVar("T")


def randomize(items: List[T]) -> List[T]:
    """Shuffle in place with a freshly seeded generator, so each call differs."""
    random.Random().shuffle(items)
    return items


def group_answers(candidates: List[Candidate]) -> List[List[Answer]]:
    """
    Regroup candidates' answers by question: bucket i holds every candidate's
    answer to question i. Each bucket is shuffled on its own.
    Raises DecodeError if a candidate doesn't have exactly one answer per question.
    """
    buckets: List[List[Answer]] = [[] for _ in range(QUESTION_COUNT)]
    for candidate in candidates:
        if len(candidate.answers) != QUESTION_COUNT:
            logger.error(
                f"Candidate {candidate.id} has {len(candidate.answers)} answers, "
                f"expected {QUESTION_COUNT}"
            )
            raise DecodeError("Could not decode into candidate")
        for i, text in enumerate(candidate.answers):
            buckets[i].append(
                Answer(id=candidate.id, name=candidate.name, votes=candidate.votes, answer=text)
            )
    for bucket in buckets:
        randomize(bucket)
    return buckets
