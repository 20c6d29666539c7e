import logging
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from builderkit.adapters.demo_user_provider import DemoUserProvider
from builderkit.domain.errors import DomainError
from builderkit.services.user_service import UserService


### COMMENTS
# ==========================================================
# HTTP API (FastAPI) — jeden endpoint GET /user.
# ==========================================================
# - Zero logiki biznesowej — deleguj do UserService.
# - Serwis wstrzykiwany przez Depends(get_user_service), więc testy mogą
#   podmienić go przez app.dependency_overrides.
# - DomainError → 400 z {"detail": "..."}; reszta to domyślne zachowanie FastAPI.

logger = logging.getLogger(__name__)


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    password: str


def get_user_service() -> UserService:
    return UserService(DemoUserProvider())


def create_app() -> FastAPI:
    """Tworzy aplikację FastAPI z zarejestrowanymi trasami."""
    app = FastAPI(title="builderkit")

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning("domain error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/user", response_model=UserResponse)
    def get_data(service: UserService = Depends(get_user_service)):
        user = service.get_current_user()
        return UserResponse(**user.to_dict())

    return app


app = create_app()
