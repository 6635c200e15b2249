"""Users Resource — REST routes for the user record collection.

Invariants:
    - Routes contain no business logic: every decision is made by UserHandler
    - Bodies are parsed by Pydantic (UserIn) before reaching the handler
    - Handler errors propagate to the global RosterError handler (400/404/409)

Design Decisions:
    - UserHandler built per request from the request's DB session and the
      app-owned mutation lock (dependency injection, no module-level state)
    - Location header is absolute, resolved against the request's base URL
"""

from typing import Annotated
from urllib.parse import urljoin

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from roster.core.domain_types import USER_ID_MAX, USER_ID_MIN, UserId
from roster.infrastructure.database import DatabaseSessionManager, get_db, get_db_manager
from roster.infrastructure.user_repository import SqlUserRepository
from roster.schemas.user import UserIn, UserOut
from roster.services.user_handler import UserHandler

router = APIRouter(prefix="/users", tags=["users"])

UserIdPath = Annotated[int, Path(ge=USER_ID_MIN, le=USER_ID_MAX)]


def get_user_handler(
    db: AsyncSession = Depends(get_db),
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> UserHandler:
    return UserHandler(SqlUserRepository(db), db_manager.mutation_lock)


@router.get("", response_model=list[UserOut])
async def list_users(handler: UserHandler = Depends(get_user_handler)):
    """List every user."""
    users = await handler.list_users()
    return [UserOut.from_domain(u) for u in users]


@router.get("/{user_id}", response_model=UserOut)
async def get_user(
    user_id: UserIdPath, handler: UserHandler = Depends(get_user_handler),
):
    """Get one user by id."""
    return UserOut.from_domain(await handler.get_user(UserId(user_id)))


@router.post(
    "", response_model=UserOut, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserIn,
    request: Request,
    response: Response,
    handler: UserHandler = Depends(get_user_handler),
):
    """Create a user with a caller-supplied id."""
    created = await handler.create_user(body.to_candidate())
    response.headers["Location"] = urljoin(
        str(request.base_url), created.location.lstrip("/"),
    )
    return UserOut.from_domain(created.user)


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def update_user(
    user_id: UserIdPath,
    body: UserIn,
    handler: UserHandler = Depends(get_user_handler),
):
    """Replace name and surname of an existing user. The body id must match."""
    await handler.update_user(UserId(user_id), body.to_candidate())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", response_model=UserOut)
async def delete_user(
    user_id: UserIdPath, handler: UserHandler = Depends(get_user_handler),
):
    """Delete a user and return the deleted record."""
    return UserOut.from_domain(await handler.delete_user(UserId(user_id)))
