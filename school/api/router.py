from fastapi import APIRouter

from school.api.endpoints import analytics, avatars, faculties, info, students

api_router = APIRouter()

api_router.include_router(students.router, prefix="/student", tags=["Students"])
api_router.include_router(faculties.router, prefix="/faculty", tags=["Faculties"])
api_router.include_router(avatars.router, prefix="/avatar", tags=["Avatars"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["Analytics"])
api_router.include_router(info.router, prefix="/info", tags=["Info"])
