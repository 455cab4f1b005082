from fastapi import APIRouter

from diary_backend.api.v1.routes_auth import router as auth_router
from diary_backend.api.v1.routes_diary import router as diary_router


api_router = APIRouter()

api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(diary_router, prefix="/diary", tags=["diary"])
