import logging

from fastapi import Path

from app.config import BRANCHES
from app.errors import InvalidBranch

logger = logging.getLogger(__name__)


def valid_branch(branch: str = Path(...)) -> str:
    """
    Checks that the {branch} path segment is "senate" or "treasury".
    Raises InvalidBranch otherwise, before the route handler (or its body) is touched.
    """
    if branch not in BRANCHES:
        logger.warning(f"Rejected request for unknown branch {branch!r}")
        raise InvalidBranch(branch)
    return branch
