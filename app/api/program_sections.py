"""
Program-section endpoints.

Reads are public; creating a section needs the API bearer token.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from app.api.deps import get_repository, read_json_body, require_public
from app.core.auth import verify_auth_header
from app.services.exceptions import NotFoundError
from app.services.program_sections import COLLECTION, ProgramSectionService
from app.services.repository import ContentRepository

router = APIRouter(prefix="/api/program-sections", tags=["program-sections"])


def get_program_section_service(
    repository: ContentRepository = Depends(get_repository),
) -> ProgramSectionService:
    return ProgramSectionService(repository)


def _params(populate: Optional[str]) -> dict:
    return {"populate": populate} if populate is not None else {}


@router.get(
    "",
    summary="List program sections",
    dependencies=[Depends(require_public(COLLECTION, "find"))],
)
async def list_program_sections(
    populate: Optional[str] = Query(
        default=None,
        max_length=200,
        description="Comma separated relations, or * for all. Defaults to icon,program."
    ),
    service: ProgramSectionService = Depends(get_program_section_service),
) -> dict:
    items = service.find(_params(populate))
    return {"data": items, "meta": {"count": len(items)}}


@router.get(
    "/{entity_id}",
    summary="Get a program section",
    responses={404: {"description": "Program section not found"}},
    dependencies=[Depends(require_public(COLLECTION, "findOne"))],
)
async def get_program_section(
    entity_id: int,
    populate: Optional[str] = Query(default=None, max_length=200),
    service: ProgramSectionService = Depends(get_program_section_service),
) -> dict:
    item = service.find_one(entity_id, _params(populate))
    if item is None:
        raise NotFoundError("program-section")
    return {"data": item}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a program section",
    responses={400: {"description": "Invalid program section data"}},
    dependencies=[Depends(verify_auth_header)],
)
async def create_program_section(
    request: Request,
    service: ProgramSectionService = Depends(get_program_section_service),
) -> dict:
    body = await read_json_body(request)
    return {"data": service.create(body)}
