"""
Root endpoint.

Answers every request method on the base path with a fixed greeting.
Useful as a liveness check; it never touches the record store.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.api_route(
    "/",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    response_class=PlainTextResponse,
)
def read_root() -> str:
    return "Hello World"
