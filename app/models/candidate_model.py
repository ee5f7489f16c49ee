from typing import Annotated, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# MongoDB's ObjectId, rendered as its hex string
PyObjectId = Annotated[str, BeforeValidator(str)]


class Candidate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: PyObjectId = Field(..., alias="_id")
    name: str
    votes: int = Field(0, ge=0)
    answers: List[str]


class LeaderboardEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: PyObjectId = Field(..., alias="_id")
    name: str
    votes: int = Field(0, ge=0)


class Answer(BaseModel):
    """One candidate's answer to one question."""
    model_config = ConfigDict(populate_by_name=True)

    id: PyObjectId = Field(..., alias="_id")
    name: str
    votes: int
    answer: str


class CandidateRequest(BaseModel):
    # Both optional here so that a missing field becomes a "fail" envelope,
    # not FastAPI's 422. answers=None (absent) is not the same as answers=[].
    name: Optional[str] = None
    answers: Optional[List[str]] = None
