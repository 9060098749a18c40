# bookstore/main.py
"""
FastAPI application entry point.

Run with: uvicorn bookstore.main:app --port 5000
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .catalog import CatalogStore, catalog_router
from .errors import BookstoreError, MissingField
from .models import Message, RegisterRequest
from .settings import Settings, settings as default_settings
from .storage import UserStore


logger = logging.getLogger(__name__)

router = APIRouter()


def get_users(request: Request) -> UserStore:
    return request.app.state.users


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.post("/register", response_model=Message)
def register_api(req: RegisterRequest, users: UserStore = Depends(get_users)):
    return Message(message=users.register(req.username, req.password))


def _bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    strict = request.app.state.settings.STRICT_STATUS_CODES
    return JSONResponse(status_code=exc.status_for(strict), content={"message": exc.message})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # An absent or unparseable registration body counts as missing fields.
    if request.scope.get("endpoint") is register_api:
        return _bookstore_error_handler(request, MissingField("Missing username or password"))
    return await request_validation_exception_handler(request, exc)


def create_app(
    catalog: Optional[CatalogStore] = None,
    users: Optional[UserStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around its own catalogue and user stores.

    Stores that are not passed in are created fresh, the catalogue
    from the configured seed file.
    """
    settings = settings or default_settings
    app = FastAPI(
        title="Bookstore Catalog",
        description="Public catalogue lookups and customer registration.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else CatalogStore.from_seed(settings.SEED_FILE)
    app.state.users = users if users is not None else UserStore()

    app.add_exception_handler(BookstoreError, _bookstore_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(router)
    app.include_router(catalog_router)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=default_settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving %d books on %s:%s", len(app.state.catalog), default_settings.HOST, default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
