import logging
from typing import List

from bson import ObjectId
from pydantic import ValidationError
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from app.database import MongoConnector
from app.errors import DecodeError, StoreError
from app.models.candidate_model import CandidateRequest, Candidate, LeaderboardEntry

logger = logging.getLogger(__name__)


# Get every candidate in a branch, in store order
async def get_candidates(db: MongoConnector, branch: str) -> List[Candidate]:
    collection = db.collection(branch)
    candidates = []
    try:
        async for doc in collection.find({}):
            try:
                candidates.append(Candidate.model_validate(doc))
            except ValidationError as e:
                logger.error(f"Bad candidate document {doc.get('_id')} in {branch}: {e}")
                raise DecodeError("Could not decode into candidate") from e
    except PyMongoError as e:
        logger.error(f"Error reading candidates from {branch}: {e}")
        raise StoreError("Could not get cursor from db") from e
    return candidates


# Insert a validated submission with zero votes
async def create_candidate(db: MongoConnector, branch: str, data: CandidateRequest) -> ObjectId:
    collection = db.collection(branch)
    try:
        result = await collection.insert_one(
            {"name": data.name, "answers": data.answers, "votes": 0}
        )
    except PyMongoError as e:
        logger.error(f"Error adding candidate to {branch}: {e}")
        raise StoreError("There was an error adding the candidate to the database.") from e
    logger.info(f"Candidate {result.inserted_id} added to {branch}")
    return result.inserted_id


# Atomically add one vote; returns how many documents matched (0 or 1)
async def increment_votes(db: MongoConnector, branch: str, candidate_id: ObjectId) -> int:
    collection = db.collection(branch)
    try:
        result = await collection.update_one(
            {"_id": candidate_id},
            {"$inc": {"votes": 1}},
        )
    except PyMongoError as e:
        logger.error(f"Error incrementing votes for {candidate_id} in {branch}: {e}")
        raise StoreError("Could not increment votes") from e
    if result.matched_count == 0:
        logger.info(f"No candidate {candidate_id} in {branch}; vote ignored")
    return result.matched_count


# Most votes first; ties come back in whatever order MongoDB gives
async def get_leaderboard(db: MongoConnector, branch: str) -> List[LeaderboardEntry]:
    collection = db.collection(branch)
    entries = []
    try:
        async for doc in collection.find({}, sort=[("votes", DESCENDING)]):
            try:
                entries.append(LeaderboardEntry.model_validate(doc))
            except ValidationError as e:
                logger.error(f"Bad leaderboard document {doc.get('_id')} in {branch}: {e}")
                raise DecodeError("Could not decode into leaderboard entry") from e
    except PyMongoError as e:
        logger.error(f"Error reading leaderboard from {branch}: {e}")
        raise StoreError("Could not get cursor from db") from e
    return entries
