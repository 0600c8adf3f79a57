"""Employee record endpoint."""

import datetime as dt

from fastapi import APIRouter, Depends

from record_validation.api.dependencies import get_reference_date
from record_validation.api.service import validate_record
from record_validation.models import Employee

router = APIRouter(tags=["Employees"])


@router.post(
    "/employees",
    response_model=Employee,
    response_model_exclude_unset=True,
    summary="Validate an employee record",
    responses={422: {"description": "The record violates one or more rules"}},
)
def post_employee(
    employee: Employee,
    today: dt.date = Depends(get_reference_date),
):
    """Validate an employee record and echo it back when every rule passes."""
    return validate_record("employee", employee, today)
