import logging
from pathlib import Path

from fastapi import APIRouter, Request, Form, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from filehub.core.config import Settings, get_settings
from filehub.core.exceptions import InvalidNameError
from filehub.core.namespace import check_segment
from filehub.core.security import SESSION_COOKIE, sign_user_id
from filehub.models.database import get_db
from filehub.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _signed_in(user: User, settings: Settings) -> RedirectResponse:
    response = RedirectResponse(url="/files", status_code=303)
    # signed user id; unsigned or altered values read as signed out
    response.set_cookie(SESSION_COOKIE, sign_user_id(user.id, settings.secret_key), httponly=True, samesite="lax")
    return response


@router.get("/signup", response_class=HTMLResponse)
def signup_page(request: Request):
    return templates.TemplateResponse(request, "signup.html", {})


@router.post("/signup")
def signup(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    username = username.strip()

    # The username becomes a directory name
    try:
        check_segment(username)
    except InvalidNameError:
        return templates.TemplateResponse(
            request, "signup.html", {"error": "Invalid username"}, status_code=400
        )

    # Check if user exists
    existing_user = db.query(User).filter(User.username == username).first()
    if existing_user:
        return templates.TemplateResponse(request, "signup.html", {"error": "Username already exists"})

    # Hash password
    hashed_pw = generate_password_hash(password)

    # Save user
    new_user = User(username=username, password=hashed_pw)
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info("Registered user %s", username)

    # sign straight in after registering
    return _signed_in(new_user, settings)


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html", {})


@router.post("/login")
def login(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = db.query(User).filter(User.username == username.strip()).first()

    if not user or not check_password_hash(user.password, password):
        logger.info("Failed sign-in for %s", username)
        return templates.TemplateResponse(request, "login.html", {"error": "Invalid credentials"})

    # login success → set a cookie
    return _signed_in(user, settings)


@router.post("/logout")
def logout():
    response = RedirectResponse(url="/login", status_code=303)
    response.delete_cookie(SESSION_COOKIE)
    return response
