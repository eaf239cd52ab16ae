"""
Institution endpoints.

Reads are public once the bootstrap has granted find/findOne. Writes need
the API bearer token and pass through the banner middleware.
"""
from fastapi import APIRouter, Depends, Request, status

from app.api.deps import get_repository, read_json_body, require_public
from app.core.auth import verify_auth_header
from app.schemas.response import InstitutionEnvelope, InstitutionListEnvelope
from app.services.institutions import COLLECTION, InstitutionService
from app.services.repository import ContentRepository

router = APIRouter(prefix="/api/institutions", tags=["institutions"])


def get_institution_service(
    repository: ContentRepository = Depends(get_repository),
) -> InstitutionService:
    return InstitutionService(repository)


@router.get(
    "",
    response_model=InstitutionListEnvelope,
    summary="List institutions",
    dependencies=[Depends(require_public(COLLECTION, "find"))],
)
async def list_institutions(
    service: InstitutionService = Depends(get_institution_service),
):
    items = service.list_institutions()
    return {"data": items, "meta": {"count": len(items)}}


@router.get(
    "/{slug}",
    response_model=InstitutionEnvelope,
    summary="Get an institution by slug",
    responses={404: {"description": "Institution not found"}},
    dependencies=[Depends(require_public(COLLECTION, "findOne"))],
)
async def get_institution(
    slug: str,
    service: InstitutionService = Depends(get_institution_service),
):
    return {"data": service.get_by_slug(slug)}


@router.post(
    "",
    response_model=InstitutionEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create an institution",
    responses={400: {"description": "Invalid institution or banner data"}},
    dependencies=[Depends(verify_auth_header)],
)
async def create_institution(
    request: Request,
    service: InstitutionService = Depends(get_institution_service),
):
    body = await read_json_body(request)
    return {"data": service.create(body)}


@router.put(
    "/{entity_id}",
    response_model=InstitutionEnvelope,
    summary="Update an institution",
    responses={
        400: {"description": "Invalid institution or banner data"},
        404: {"description": "Institution not found"},
    },
    dependencies=[Depends(verify_auth_header)],
)
async def update_institution(
    entity_id: int,
    request: Request,
    service: InstitutionService = Depends(get_institution_service),
):
    body = await read_json_body(request)
    return {"data": service.update(entity_id, body)}
