import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from filehub.core.config import get_settings
from filehub.core.exceptions import FileConflictError, FileHubError
from filehub.core.logging_config import setup_logging
from filehub.models.database import Base, engine
from filehub.routers import auth, files
from filehub.routers.files import get_current_user_id

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    logger.info("FileHub started, storing files under %s", settings.storage_root.resolve())
    yield


app = FastAPI(title="FileHub", lifespan=lifespan)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

# include our routers
app.include_router(auth.router)
app.include_router(files.router)


@app.exception_handler(FileConflictError)
async def conflict_handler(request: Request, exc: FileConflictError):
    # the page offers overwrite or upload-as-copy based on this body
    return JSONResponse(status_code=409, content={"exists": True, "name": exc.name})


@app.exception_handler(FileHubError)
async def filehub_error_handler(request: Request, exc: FileHubError):
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


@app.get("/", response_class=HTMLResponse)
def home(user_id: int | None = Depends(get_current_user_id)):
    if user_id:
        return RedirectResponse(url="/files", status_code=303)
    return RedirectResponse(url="/login", status_code=303)
