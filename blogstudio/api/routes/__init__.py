"""API route registrations."""
from fastapi import APIRouter

from blogstudio.api.routes import ideas, posts


api_router = APIRouter()
api_router.include_router(posts.router)
api_router.include_router(ideas.router)

__all__ = ["api_router"]
