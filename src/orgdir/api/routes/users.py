"""User API routes, scoped under their owning organization."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from orgdir.api.responses import error_response, handle_body
from orgdir.dependencies import DBSession, OrgScope
from orgdir.errors.result import DirectoryError, ErrorKind
from orgdir.models.user import User
from orgdir.repositories.organization_repo import OrganizationRepository
from orgdir.repositories.user_repo import UserRepository
from orgdir.services import reconciler, registration

router = APIRouter(tags=["Users"])


@router.post("/organizations/{org_id}/users")
async def create_user(org_id: OrgScope, request: Request, db: DBSession) -> JSONResponse:
    """Create a user from ``{name, email}`` inside the path organization."""
    return await handle_body(request, db, lambda body: registration.create_user(db, org_id, body))


@router.put("/organizations/{org_id}/users")
async def update_user(org_id: OrgScope, request: Request, db: DBSession) -> JSONResponse:
    """Partially update the user named by ``userId``; it must belong to the path org."""
    return await handle_body(request, db, lambda body: reconciler.update_user(db, org_id, body))


@router.get("/organizations/{org_id}/users")
async def list_users(org_id: OrgScope, db: DBSession) -> JSONResponse:
    if not await OrganizationRepository(db).exists(org_id):
        return error_response(DirectoryError(ErrorKind.NOT_FOUND, "Organization not found"))
    rows = await UserRepository(db).list_by_org(org_id)
    return JSONResponse(content=[User.model_validate(row).to_json() for row in rows])


@router.get("/organizations/{org_id}/users/{user_id}")
async def get_user(org_id: OrgScope, user_id: str, db: DBSession) -> JSONResponse:
    row = await UserRepository(db).get(user_id)
    if row is None:
        return error_response(DirectoryError(ErrorKind.NOT_FOUND, "User not found"))
    if row.org_id != org_id:
        return error_response(
            DirectoryError(ErrorKind.FORBIDDEN, "User does not belong to the specified organization")
        )
    return JSONResponse(content=User.model_validate(row).to_json())
