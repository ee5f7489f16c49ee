import json
import logging

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from app import crud
from app.database import MongoConnector, get_db
from app.dependencies import valid_branch
from app.errors import CandidateValidationError, DecodeError, MalformedBody, StoreError
from app.models.candidate_model import CandidateRequest
from app.schemas import error, fail, success
from app.utils import group_answers, randomize
from app.validation import validate_candidate

logger = logging.getLogger(__name__)

# valid_branch runs for every route here, before the handler
router = APIRouter(
    prefix="/api/{branch}",
    tags=["Candidates"],
    dependencies=[Depends(valid_branch)],
)


async def _read_candidate_request(request: Request) -> CandidateRequest:
    """Parse the body ourselves so bad input becomes a "fail" envelope, not a 422."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise MalformedBody({"body": "request body must be valid JSON"})
    try:
        return CandidateRequest.model_validate(body)
    except ValidationError as e:
        data = {}
        for err in e.errors():
            key = str(err["loc"][0]) if err["loc"] else "body"
            data.setdefault(key, err["msg"])
        raise MalformedBody(data) from e


@router.get("/candidates")
async def list_candidates(
    branch: str = Depends(valid_branch),
    db: MongoConnector = Depends(get_db),
):
    """All candidates in the branch, in a new random order every time."""
    try:
        candidates = await crud.get_candidates(db, branch)
    except (StoreError, DecodeError) as e:
        return error(str(e))
    randomize(candidates)
    return success({"candidates": [c.model_dump(by_alias=True) for c in candidates]})


@router.post("/candidates")
async def add_candidate(
    request: Request,
    branch: str = Depends(valid_branch),
    db: MongoConnector = Depends(get_db),
):
    try:
        data = await _read_candidate_request(request)
        validate_candidate(data)
    except MalformedBody as e:
        logger.warning(f"Rejected candidate for {branch}: {e.data}")
        return fail(e.data)
    except CandidateValidationError as e:
        logger.warning(f"Rejected candidate for {branch}: {e}")
        return fail({e.field: str(e)})

    try:
        await crud.create_candidate(db, branch, data)
    except StoreError as e:
        return error(str(e))
    return success(None, status_code=status.HTTP_201_CREATED)


@router.patch("/candidates/{candidate_id}/votes")
async def add_vote(
    candidate_id: str,
    branch: str = Depends(valid_branch),
    db: MongoConnector = Depends(get_db),
):
    """
    Adds one vote. An unknown (but well-formed) id is not an error: nothing
    matches and nothing changes.
    """
    try:
        oid = ObjectId(candidate_id)
    except InvalidId:
        logger.warning(f"Bad candidate id {candidate_id!r}")
        return error("Could not get ObjectID")

    try:
        await crud.increment_votes(db, branch, oid)
    except StoreError as e:
        return error(str(e))
    return success(None)


@router.get("/answers")
async def list_answers(
    branch: str = Depends(valid_branch),
    db: MongoConnector = Depends(get_db),
):
    """Answers grouped by question; order within each question is random."""
    try:
        candidates = await crud.get_candidates(db, branch)
        buckets = group_answers(candidates)
    except (StoreError, DecodeError) as e:
        return error(str(e))
    return success(
        {"answers": [[a.model_dump(by_alias=True) for a in bucket] for bucket in buckets]}
    )


@router.get("/leaderboard")
async def list_leaderboard(
    branch: str = Depends(valid_branch),
    db: MongoConnector = Depends(get_db),
):
    try:
        entries = await crud.get_leaderboard(db, branch)
    except (StoreError, DecodeError) as e:
        return error(str(e))
    return success({"leaderboard": [entry.model_dump(by_alias=True) for entry in entries]})


@router.get("/questions")
async def list_questions():
    # TODO: store the question texts per branch and return them here
    return error("Not implemented")
