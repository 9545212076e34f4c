from fastapi import APIRouter

from projecthub.endpoints.v1 import (
    auth_api,
    users_api,
    projects_api,
    tasks_api,
    notifications_api,
    dashboard_api,
    chat_api,
    member_api,
)

api_router = APIRouter(prefix="/api")

api_router.include_router(auth_api.router)
api_router.include_router(users_api.router)
api_router.include_router(projects_api.router)
api_router.include_router(tasks_api.router)
api_router.include_router(notifications_api.router)
api_router.include_router(dashboard_api.router)
api_router.include_router(chat_api.router)
api_router.include_router(member_api.router)
