"""Staff record endpoint."""

import datetime as dt

from fastapi import APIRouter, Depends

from record_validation.api.dependencies import get_reference_date
from record_validation.api.service import validate_record
from record_validation.models import Staff

router = APIRouter(tags=["Staff"])


@router.post(
    "/staff",
    response_model=Staff,
    response_model_exclude_unset=True,
    summary="Validate a staff record",
    responses={422: {"description": "The record violates one or more rules"}},
)
def post_staff(
    staff: Staff,
    today: dt.date = Depends(get_reference_date),
):
    """Validate a staff record and echo it back when every rule passes."""
    return validate_record("staff", staff, today)
