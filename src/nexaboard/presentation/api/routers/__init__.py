from nexaboard.presentation.api.routers.auth import router as auth_router
from nexaboard.presentation.api.routers.messages import router as messages_router
from nexaboard.presentation.api.routers.projects import router as projects_router
from nexaboard.presentation.api.routers.stats import router as stats_router
from nexaboard.presentation.api.routers.tasks import router as tasks_router
from nexaboard.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "messages_router",
    "projects_router",
    "stats_router",
    "tasks_router",
    "users_router",
]
