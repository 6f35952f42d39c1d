from pathlib import Path

from fastapi import APIRouter, Request, Depends, UploadFile, File as FastAPIFile, Form, Query
from fastapi.responses import HTMLResponse, RedirectResponse, FileResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from filehub.core.config import Settings, get_settings
from filehub.core.exceptions import NotAuthenticatedError
from filehub.core.listing import DEFAULT_FILTER, DEFAULT_SORT, list_files
from filehub.core.namespace import NamespaceResolver
from filehub.core.operations import delete_file, open_for_download, preview_file, upload_file
from filehub.core.security import SESSION_COOKIE, read_user_id
from filehub.models.database import get_db
from filehub.models.user import User
from filehub.schemas.files import FileInfo, FileListResponse, PreviewResponse, UploadResponse

BASE_DIR = Path(__file__).resolve().parent.parent

router = APIRouter(prefix="/files", tags=["files"])
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


# --- helper: get current logged in user id from the signed cookie ---
def get_current_user_id(request: Request, settings: Settings = Depends(get_settings)) -> int | None:
    token = request.cookies.get(SESSION_COOKIE)
    if not token:
        return None
    return read_user_id(token, settings.secret_key)


# --- the username owns the storage namespace ---
def get_current_username(
    user_id: int | None = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> str | None:
    if user_id is None:
        return None
    user = db.query(User).filter(User.id == user_id).first()
    return user.username if user else None


def require_username(username: str | None = Depends(get_current_username)) -> str:
    if not username:
        raise NotAuthenticatedError()
    return username


def get_resolver(settings: Settings = Depends(get_settings)) -> NamespaceResolver:
    return NamespaceResolver(settings.storage_root, anonymous=settings.anonymous_user)


# --- show user's files (drive/dashboard) ---
@router.get("", response_class=HTMLResponse)
def files_page(
    request: Request,
    sort: str = DEFAULT_SORT,
    filter_key: str = Query(DEFAULT_FILTER, alias="filter"),
    username: str | None = Depends(get_current_username),
    resolver: NamespaceResolver = Depends(get_resolver),
):
    if not username:
        return RedirectResponse(url="/login", status_code=303)

    listing = list_files(resolver.resolve(username), username, sort, filter_key)

    return templates.TemplateResponse(
        request,
        "files.html",
        {
            "username": username,
            "files": listing.files,
            # lets the page highlight the active controls
            "sort": listing.sort,
            "filter": listing.filter,
        },
    )


# --- same listing as JSON ---
@router.get("/list", response_model=FileListResponse)
def files_json(
    sort: str = DEFAULT_SORT,
    filter_key: str = Query(DEFAULT_FILTER, alias="filter"),
    username: str = Depends(require_username),
    resolver: NamespaceResolver = Depends(get_resolver),
):
    listing = list_files(resolver.resolve(username), username, sort, filter_key)
    return FileListResponse(
        sort=listing.sort,
        filter=listing.filter,
        files=[FileInfo.from_descriptor(d) for d in listing.files],
    )


# --- upload a file; 409 when it exists and overwrite is off ---
@router.post("/upload", response_model=UploadResponse)
def upload(
    file: UploadFile | None = FastAPIFile(None),
    overwrite: bool = Form(False),
    username: str = Depends(require_username),
    resolver: NamespaceResolver = Depends(get_resolver),
):
    # sync route: the read and the disk write run in the threadpool
    content = file.file.read() if file is not None else None
    file_name = file.filename if file is not None else None

    upload_file(resolver.resolve(username), file_name, content, overwrite=overwrite)
    return UploadResponse(success=True)


# --- delete a file (missing files are ignored) ---
@router.post("/delete")
def delete(
    name: str = Form(...),
    username: str | None = Depends(get_current_username),
    resolver: NamespaceResolver = Depends(get_resolver),
):
    if not username:
        return RedirectResponse(url="/login", status_code=303)

    delete_file(resolver.resolve(username), name)
    return RedirectResponse(url="/files", status_code=303)


# --- download a file ---
@router.get("/download")
def download(
    name: str,
    username: str | None = Depends(get_current_username),
    resolver: NamespaceResolver = Depends(get_resolver),
):
    if not username:
        return RedirectResponse(url="/login", status_code=303)

    path = open_for_download(resolver.resolve(username), name)
    return FileResponse(path, media_type="application/octet-stream", filename=name)


# --- inline preview: image, text or unsupported ---
@router.get("/preview", response_model=PreviewResponse, response_model_exclude_none=True)
def preview(
    name: str,
    username: str = Depends(require_username),
    resolver: NamespaceResolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
):
    result = preview_file(
        resolver.resolve(username),
        name,
        text_encoding=settings.preview_text_encoding,
        max_bytes=settings.preview_max_bytes,
    )
    return PreviewResponse(**result.as_dict())
