from fastapi import APIRouter, Depends, Query
from typing import List

from constants import HTTPStatus
from dependencies import get_owner_service
from dtos.request.owner_request import OwnerCreateRequest, OwnerUpdateRequest
from dtos.response.owner_response import OwnerResponse
from services.interfaces import IOwnerService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/owners", response_model=OwnerResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create owner")
def create_owner(
    request: OwnerCreateRequest,
    owner_service: IOwnerService = Depends(get_owner_service)
):
    """Create an owner; the id is assigned by the database."""
    owner = owner_service.create(request.to_model())
    return OwnerResponse.model_validate(owner)


@router.get("/owners", response_model=List[OwnerResponse])
@handle_api_errors("Find owners by last name")
def find_owners_by_last_name(
    last_name: str = Query(..., description="Exact last name to match"),
    owner_service: IOwnerService = Depends(get_owner_service)
):
    """List owners whose last name matches exactly. An empty list is not an error."""
    owners = owner_service.find_by_last_name(last_name)
    return [OwnerResponse.model_validate(o) for o in owners]


@router.get("/owners/{owner_id}", response_model=OwnerResponse)
@handle_api_errors("Get owner")
def get_owner(
    owner_id: int,
    owner_service: IOwnerService = Depends(get_owner_service)
):
    """Get an owner by id; 404 when it does not exist."""
    return OwnerResponse.model_validate(owner_service.find_by_id(owner_id))


@router.put("/owners/{owner_id}", response_model=OwnerResponse)
@handle_api_errors("Update owner")
def update_owner(
    owner_id: int,
    request: OwnerUpdateRequest,
    owner_service: IOwnerService = Depends(get_owner_service)
):
    """
    Replace every field of an existing owner.

    Fields missing from the body are stored as null. Returns 404 when no
    owner has this id, in which case nothing is written.
    """
    owner = owner_service.update(request.to_model(owner_id))
    return OwnerResponse.model_validate(owner)
