"""Business API endpoints: profile, services and client list."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from appointme.api.deps import AuthenticatedUser, Store, authorize_business, require_bearer
from appointme.api.validation import (
    valid_body,
    valid_business_id,
    valid_service_id,
    validation_check,
)
from appointme.schemas.business import BusinessEnvelope, BusinessResponse, BusinessUpdate
from appointme.schemas.client import (
    ClientCreate,
    ClientEnvelope,
    ClientListEnvelope,
    ClientResponse,
)
from appointme.schemas.common import Envelope, ErrorEnvelope
from appointme.schemas.service import (
    ServiceCreate,
    ServiceEnvelope,
    ServiceListEnvelope,
    ServiceResponse,
    ServiceUpdate,
)
from appointme.services import business as business_service
from appointme.services import catalog as catalog_service
from appointme.services import clients as client_service

router = APIRouter(
    prefix="/businesses",
    tags=["businesses"],
    responses={
        400: {"model": ErrorEnvelope},
        404: {"model": ErrorEnvelope},
    },
)

BusinessId = Annotated[UUID, Depends(valid_business_id)]
ServiceId = Annotated[UUID, Depends(valid_service_id)]
Validated = Annotated[None, Depends(validation_check)]
BusinessRep = Annotated[AuthenticatedUser, Depends(authorize_business)]

valid_service_create = valid_body(ServiceCreate)
valid_service_update = valid_body(ServiceUpdate)
valid_business_update = valid_body(BusinessUpdate)
valid_client_create = valid_body(ClientCreate)

# Routes that need a logged in representative check for the header first
protected = [Depends(require_bearer)]


# Services
@router.get(
    "/services/{business_id}",
    response_model=ServiceListEnvelope,
    summary="List a business's services",
)
async def get_business_services(
    business_id: BusinessId,
    _: Validated,
    store: Store,
) -> ServiceListEnvelope:
    services = await catalog_service.get_business_services(store, business_id)
    return ServiceListEnvelope(
        message=f"Found {len(services)} services",
        services=[ServiceResponse.model_validate(s) for s in services],
    )


@router.post(
    "/services/{business_id}",
    response_model=ServiceEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=protected,
    summary="Create a service",
)
async def create_business_service(
    business_id: BusinessId,
    service_data: Annotated[ServiceCreate, Depends(valid_service_create)],
    _: Validated,
    rep: BusinessRep,
    store: Store,
) -> ServiceEnvelope:
    service = await catalog_service.create_business_service(store, business_id, service_data)
    return ServiceEnvelope(
        message="Service created",
        service=ServiceResponse.model_validate(service),
    )


@router.get(
    "/services/{business_id}/{service_id}",
    response_model=ServiceEnvelope,
    summary="Get a service",
)
async def get_business_service(
    business_id: BusinessId,
    service_id: ServiceId,
    _: Validated,
    store: Store,
) -> ServiceEnvelope:
    service = await catalog_service.get_business_service(store, business_id, service_id)
    return ServiceEnvelope(
        message="Service found",
        service=ServiceResponse.model_validate(service),
    )


@router.put(
    "/services/{business_id}/{service_id}",
    response_model=ServiceEnvelope,
    dependencies=protected,
    summary="Update a service",
)
async def update_business_service(
    business_id: BusinessId,
    service_id: ServiceId,
    service_data: Annotated[ServiceUpdate, Depends(valid_service_update)],
    _: Validated,
    rep: BusinessRep,
    store: Store,
) -> ServiceEnvelope:
    service = await catalog_service.update_business_service(
        store, business_id, service_id, service_data
    )
    return ServiceEnvelope(
        message="Service updated",
        service=ServiceResponse.model_validate(service),
    )


@router.delete(
    "/services/{business_id}/{service_id}",
    response_model=Envelope,
    dependencies=protected,
    summary="Delete a service",
)
async def delete_business_service(
    business_id: BusinessId,
    service_id: ServiceId,
    _: Validated,
    rep: BusinessRep,
    store: Store,
) -> Envelope:
    await catalog_service.delete_business_service(store, business_id, service_id)
    return Envelope(message="Service deleted")


# Client list
@router.get(
    "/client-list/{business_id}",
    response_model=ClientListEnvelope,
    dependencies=protected,
    summary="List a business's clients",
)
async def get_client_list(
    business_id: BusinessId,
    _: Validated,
    rep: BusinessRep,
    store: Store,
) -> ClientListEnvelope:
    clients = await client_service.get_client_list(store, business_id)
    return ClientListEnvelope(
        message=f"Found {len(clients)} clients",
        clients=[ClientResponse.model_validate(c) for c in clients],
    )


@router.post(
    "/client-list/{business_id}",
    response_model=ClientEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=protected,
    summary="Add a client",
)
async def add_client(
    business_id: BusinessId,
    client_data: Annotated[ClientCreate, Depends(valid_client_create)],
    _: Validated,
    rep: BusinessRep,
    store: Store,
) -> ClientEnvelope:
    client = await client_service.add_client(store, business_id, client_data)
    return ClientEnvelope(
        message="Client added",
        client=ClientResponse.model_validate(client),
    )


# Business profile
@router.get(
    "/{business_id}",
    response_model=BusinessEnvelope,
    summary="Get a business profile",
)
async def get_business(
    business_id: BusinessId,
    _: Validated,
    store: Store,
) -> BusinessEnvelope:
    business = await business_service.get_business(store, business_id)
    return BusinessEnvelope(
        message="Business found",
        business=BusinessResponse.model_validate(business),
    )


@router.put(
    "/{business_id}",
    response_model=BusinessEnvelope,
    dependencies=protected,
    summary="Update a business profile",
)
async def update_business(
    business_id: BusinessId,
    business_data: Annotated[BusinessUpdate, Depends(valid_business_update)],
    _: Validated,
    rep: BusinessRep,
    store: Store,
) -> BusinessEnvelope:
    business = await business_service.update_business(store, business_id, business_data)
    return BusinessEnvelope(
        message="Business updated",
        business=BusinessResponse.model_validate(business),
    )
