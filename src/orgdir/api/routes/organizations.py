"""Organization API routes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from orgdir.api.responses import error_response, handle_body
from orgdir.dependencies import DBSession, OrgScope
from orgdir.errors.result import DirectoryError, ErrorKind
from orgdir.models.organization import Organization
from orgdir.repositories.organization_repo import OrganizationRepository
from orgdir.services import reconciler, registration

router = APIRouter(tags=["Organizations"])


@router.post("/organizations")
async def create_organization(request: Request, db: DBSession) -> JSONResponse:
    """Create an organization from ``{name, description}``."""
    return await handle_body(request, db, lambda body: registration.create_organization(db, body))


@router.put("/organizations")
async def update_organization(request: Request, db: DBSession) -> JSONResponse:
    """Partially update the organization named by ``orgId`` in the body."""
    return await handle_body(request, db, lambda body: reconciler.update_organization(db, body))


@router.get("/organizations/{org_id}")
async def get_organization(org_id: OrgScope, db: DBSession) -> JSONResponse:
    row = await OrganizationRepository(db).get(org_id)
    if row is None:
        return error_response(DirectoryError(ErrorKind.NOT_FOUND, "Organization not found"))
    return JSONResponse(content=Organization.model_validate(row).to_json())
