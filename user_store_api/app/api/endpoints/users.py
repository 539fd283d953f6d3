"""
User endpoints.

Create, fetch and delete users.  Handlers are plain ``def`` functions,
so each request runs on a worker thread of the server's thread pool;
concurrent requests meet only inside the record store.  Every handler
parses its input, performs one service call and serialises the result.
Errors are raised as ``HTTPException`` and rendered as plain text by
``core.errors``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from user_store_api.app.schemas.user import User, UserCreate
from user_store_api.app.services.user_service import UserService, get_user_service

router = APIRouter()

USER_NOT_FOUND = "user not found"

# Plain decimal integers only: no spaces, underscores, decimals or exponents.
UserIdPath = Annotated[str, Path(pattern=r"^[+-]?[0-9]+$")]


@router.post("", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Register a new user.

    Responds with ``204 No Content``.  The assigned id is not part of the
    body; it is reported through the ``Location`` header instead.
    """
    if not payload.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required")
    user_id = service.create_user(payload)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={"Location": f"/users/{user_id}"},
    )


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: UserIdPath,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Return a single user as ``{"name": ...}``."""
    user = service.get_user(int(user_id))
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    try:
        body = user.model_dump_json()
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return Response(content=body, media_type="application/json")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    user_id: UserIdPath,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user by id.

    The existence check and the removal are a single store operation, so
    of two concurrent deletes of the same id exactly one gets ``204`` and
    the other ``404``.
    """
    if not service.delete_user(int(user_id)):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
