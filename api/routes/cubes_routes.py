"""Cube CRUD endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette import status

from core.database import DbSession
from core.ratelimit import SHAPE_LIMIT, limiter
from domain.shapes import Cube
from schemas import CreateCubeRequest, CubeResponse, ErrorResponse, UpdateCubeRequest
from services.cube_service import CubeService

router = APIRouter(prefix="/api/cubes", tags=["cubes"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Cube not found"}}


def get_cube_service(db: DbSession) -> CubeService:
    return CubeService.for_session(db)


CubeServiceDep = Annotated[CubeService, Depends(get_cube_service)]


def _cube_not_found(cube_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"Cube {cube_id} not found"
    )


@router.post(
    "",
    response_model=CubeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Side length must be greater than 0"}},
)
@limiter.limit(SHAPE_LIMIT)
async def create_cube(
    request: Request, payload: CreateCubeRequest, service: CubeServiceDep
) -> CubeResponse:
    """Create a cube with a server-generated ID."""
    cube = Cube(side_length=payload.side_length)
    await service.insert(cube)
    return CubeResponse.from_domain(cube)


@router.get("/{cube_id}", response_model=CubeResponse, responses=_NOT_FOUND)
@limiter.limit(SHAPE_LIMIT)
async def get_cube(
    request: Request, cube_id: UUID, service: CubeServiceDep
) -> CubeResponse:
    """Get a cube by ID."""
    cube = await service.read_by_id(cube_id)
    if cube is None:
        raise _cube_not_found(cube_id)
    return CubeResponse.from_domain(cube)


@router.put("/{cube_id}", response_model=CubeResponse, responses=_NOT_FOUND)
@limiter.limit(SHAPE_LIMIT)
async def update_cube(
    request: Request,
    cube_id: UUID,
    payload: UpdateCubeRequest,
    service: CubeServiceDep,
) -> CubeResponse:
    """Replace a cube's side length."""
    cube = Cube(side_length=payload.side_length, id=cube_id)
    if not await service.update(cube):
        raise _cube_not_found(cube_id)
    return CubeResponse.from_domain(cube)


@router.delete(
    "/{cube_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
@limiter.limit(SHAPE_LIMIT)
async def delete_cube(
    request: Request, cube_id: UUID, service: CubeServiceDep
) -> Response:
    """Delete a cube."""
    if not await service.delete(cube_id):
        raise _cube_not_found(cube_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
