#!/usr/bin/env python3
"""
Contract endpoints - render templates into contracts.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.templates.service import ContractRenderer
from ..dependencies import get_db, get_renderer
from ..services.contract_service import ContractService
from ..models.requests import ContractCreate, ContractFromForm
from ..models.responses import ContractResponse, ContractsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/contracts", tags=["contracts"])


@router.post("", response_model=ContractResponse, status_code=201)
def create_contract(
    request: ContractCreate,
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    """
    Render a template with the given variables and store the contract.

    Placeholders without a value stay in the rendered text and are listed in
    `unresolved`, unless `strict` is set, in which case the request fails.
    """
    service = ContractService(db, renderer)
    return ContractResponse(contract=service.create_contract(request))


@router.post("/from-form", response_model=ContractResponse, status_code=201)
def create_contract_from_form(
    request: ContractFromForm,
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    """
    Create a contract from the contract form.

    The template is chosen by the form's employment type; salary, bonus,
    offer expiration and signature variables are derived from the form.
    """
    service = ContractService(db, renderer)
    return ContractResponse(contract=service.create_from_form(request))


@router.get("", response_model=ContractsResponse)
def list_contracts(
    employee_id: str = Query(..., description="Employee whose contracts to list"),
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    contracts = ContractService(db, renderer).list_for_employee(employee_id)
    return ContractsResponse(count=len(contracts), contracts=contracts)


@router.get("/{contract_id}", response_model=ContractResponse)
def get_contract(
    contract_id: str,
    db: Session = Depends(get_db),
    renderer: ContractRenderer = Depends(get_renderer)
):
    service = ContractService(db, renderer)
    return ContractResponse(contract=service.get_contract(contract_id))
