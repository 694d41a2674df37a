from memberauth.web.routers.auth import router as auth_router
from memberauth.web.routers.members import router as members_router

__all__ = [
    "auth_router",
    "members_router",
]
