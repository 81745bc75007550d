import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dnd_generator.validation import CharacterValidationError
from dnd_web import db
from dnd_web.api.routes import router
from dnd_web.core.config import get_settings
from dnd_web.repository import CharacterNotFoundError
from dnd_web.web.pages import router as pages_router

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db.init_db()
    logger.info("Database ready at %s", settings.database_url)
    yield


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CharacterValidationError)
async def character_validation_handler(request: Request, exc: CharacterValidationError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": [{"field": e.field, "message": e.message} for e in exc.errors]},
    )


@app.exception_handler(CharacterNotFoundError)
async def character_not_found_handler(request: Request, exc: CharacterNotFoundError) -> JSONResponse:
    logger.info("Character %s not found (%s %s)", exc.character_id, request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Character not found"})


@app.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(router, prefix=settings.api_prefix)
app.include_router(pages_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("dnd_web.main:app", host="127.0.0.1", port=8000, reload=settings.debug)
