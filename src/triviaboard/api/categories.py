"""Category catalog endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from triviaboard.api.deps import JServiceDep
from triviaboard.errors import UpstreamError

router = APIRouter()


class CategoryInfoResponse(BaseModel):
    """Catalog entry from the trivia API."""

    id: int
    title: str
    clue_count: int


@router.get("", response_model=list[CategoryInfoResponse])
async def list_categories(
    client: JServiceDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    """Preview the trivia API's category catalog."""
    try:
        catalog = await client.list_categories(limit=limit)
    except UpstreamError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    return [
        CategoryInfoResponse(id=c.id, title=c.title, clue_count=c.clue_count) for c in catalog
    ]
