"""Cylinder CRUD endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette import status

from core.database import DbSession
from core.ratelimit import SHAPE_LIMIT, limiter
from domain.shapes import Cylinder
from schemas import (
    CreateCylinderRequest,
    CylinderResponse,
    ErrorResponse,
    UpdateCylinderRequest,
)
from services.cylinder_service import CylinderService

router = APIRouter(prefix="/api/cylinders", tags=["cylinders"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Cylinder not found"}}


def get_cylinder_service(db: DbSession) -> CylinderService:
    return CylinderService.for_session(db)


CylinderServiceDep = Annotated[CylinderService, Depends(get_cylinder_service)]


def _cylinder_not_found(cylinder_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Cylinder {cylinder_id} not found",
    )


@router.post(
    "",
    response_model=CylinderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Radius and height must be greater than 0"}},
)
@limiter.limit(SHAPE_LIMIT)
async def create_cylinder(
    request: Request, payload: CreateCylinderRequest, service: CylinderServiceDep
) -> CylinderResponse:
    """Create a cylinder with a server-generated ID."""
    cylinder = Cylinder(radius=payload.radius, height=payload.height)
    await service.insert(cylinder)
    return CylinderResponse.from_domain(cylinder)


@router.get("/{cylinder_id}", response_model=CylinderResponse, responses=_NOT_FOUND)
@limiter.limit(SHAPE_LIMIT)
async def get_cylinder(
    request: Request, cylinder_id: UUID, service: CylinderServiceDep
) -> CylinderResponse:
    """Get a cylinder by ID."""
    cylinder = await service.read_by_id(cylinder_id)
    if cylinder is None:
        raise _cylinder_not_found(cylinder_id)
    return CylinderResponse.from_domain(cylinder)


@router.put("/{cylinder_id}", response_model=CylinderResponse, responses=_NOT_FOUND)
@limiter.limit(SHAPE_LIMIT)
async def update_cylinder(
    request: Request,
    cylinder_id: UUID,
    payload: UpdateCylinderRequest,
    service: CylinderServiceDep,
) -> CylinderResponse:
    """Replace a cylinder's radius and height."""
    cylinder = Cylinder(radius=payload.radius, height=payload.height, id=cylinder_id)
    if not await service.update(cylinder):
        raise _cylinder_not_found(cylinder_id)
    return CylinderResponse.from_domain(cylinder)


@router.delete(
    "/{cylinder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
@limiter.limit(SHAPE_LIMIT)
async def delete_cylinder(
    request: Request, cylinder_id: UUID, service: CylinderServiceDep
) -> Response:
    """Delete a cylinder."""
    if not await service.delete(cylinder_id):
        raise _cylinder_not_found(cylinder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
