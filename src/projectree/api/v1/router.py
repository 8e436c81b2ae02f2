from fastapi import APIRouter

from src.projectree.api.v1 import projects

api_router = APIRouter()
api_router.include_router(projects.router)
