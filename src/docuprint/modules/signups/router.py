"""
Signup Router

Public endpoint used by the signup form; no authentication.

Endpoints:
- POST /resident-signup - Submit a signup for admin approval
"""

import logging

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from docuprint.core.database import get_db
from docuprint.core.exceptions import ServiceError, to_http_exception
from docuprint.modules.shared.schemas import DataResponse
from docuprint.modules.signups import service
from docuprint.modules.signups.schemas import SignupResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/resident-signup",
    response_model=DataResponse[SignupResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Submit Resident Signup",
    description="""
Submit a request for DocuPrint access.

The location ids must form a path in the community directory
(state -> city -> community -> block -> flat). A mobile number that already
belongs to a resident, or has a signup pending approval, is rejected.
Every admin of the community is notified.
""",
    responses={
        201: {"description": "Signup created and pending approval"},
        400: {
            "description": "Validation error or duplicate signup",
            "content": {
                "application/json": {
                    "example": {
                        "error": "A signup for this mobile number is already pending approval",
                        "code": "DUPLICATE_SIGNUP",
                    }
                }
            },
        },
    },
)
async def submit_signup(
    data: dict = Body(...),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[SignupResponse]:
    """
    Raw JSON is passed to the service so that every validation failure is
    reported as a 400 with the same error shape.
    """
    try:
        signup = await service.submit_signup(db, data)
    except ServiceError as e:
        logger.warning(f"Signup rejected: {e.error_code}")
        raise to_http_exception(e) from e

    return DataResponse(
        data=SignupResponse.model_validate(signup),
        message="Signup submitted for approval",
    )
