"""Title brainstorming endpoint."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from blogstudio.deps import get_idea_brainstormer
from blogstudio.schemas.posts import IdeaRequest, IdeaResponse
from blogstudio.services.errors import GenerationError, InputError
from blogstudio.services.ideas import IdeaBrainstormer

router = APIRouter(prefix="/ideas", tags=["ideas"])


@router.post("", response_model=IdeaResponse, summary="Brainstorm a post title from a theme")
async def brainstorm_idea(
    payload: IdeaRequest,
    brainstormer: IdeaBrainstormer = Depends(get_idea_brainstormer),
) -> IdeaResponse:
    try:
        title = await brainstormer.brainstorm(payload.theme, payload.language)
    except InputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except GenerationError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return IdeaResponse(title=title)
