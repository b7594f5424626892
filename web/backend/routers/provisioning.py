#!/usr/bin/env python3
"""
Provisioning endpoints - effective application access per employee.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.provisioning_service import ProvisioningApiService
from ..models.requests import EvaluateRequest
from ..models.responses import EmployeeProvisioningResponse, EvaluateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/provisioning", tags=["provisioning"])


@router.get("/employees/{employee_id}", response_model=EmployeeProvisioningResponse)
def get_employee_provisioning(
    employee_id: str,
    app_id: Optional[str] = Query(default=None, description="Limit to a single application"),
    db: Session = Depends(get_db)
):
    """
    Effective provisioning for every enabled application.

    Applications where no rule matched are returned with an empty payload.
    """
    return ProvisioningApiService(db).for_employee(employee_id, app_id=app_id)


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_rules(request: EvaluateRequest):
    """
    Evaluate attributes against inline rules.

    Matching rules are applied in ascending priority; on key collisions the
    highest-priority rule wins.
    """
    return ProvisioningApiService.evaluate(request)
