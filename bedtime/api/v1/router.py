from fastapi import APIRouter

from bedtime.api.v1.endpoints import files
from bedtime.features.auth.api import router as auth_router
from bedtime.features.children.api import router as children_router
from bedtime.features.credentials.api import router as credentials_router
from bedtime.features.stories.api import router as stories_router
from bedtime.features.voice_presets.api import router as voice_presets_router

api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(credentials_router)
api_router.include_router(children_router)
api_router.include_router(voice_presets_router)
api_router.include_router(stories_router)
api_router.include_router(files.router, tags=["Files"])
