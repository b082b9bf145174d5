"""
Directory Router

Public, read-only access to the community directory used by the signup form.

Endpoints:
- GET /communities - State -> City -> Community -> Block -> Flat tree
"""

from fastapi import APIRouter

from docuprint.modules.directory.models import State
from docuprint.modules.directory.service import get_directory
from docuprint.modules.shared.schemas import DataResponse

router = APIRouter()


@router.get(
    "/communities",
    response_model=DataResponse[list[State]],
    summary="Community Directory",
)
async def list_communities() -> DataResponse[list[State]]:
    """Return the full location tree."""
    return DataResponse(data=list(get_directory().tree()))
