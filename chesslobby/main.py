import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .auth import CallerIdentity, authorize, get_caller
from .config import get_config
from .crud import create_user, get_challenges, get_games, get_user_by_uid
from .db import get_db, init_db
from .errors import ServerError, StoreError, ValidationError
from .schemas import ChallengeResponse, GameResponse, NewUserRequest, UserResponse
from .utils import GUEST_PREFIX, random_guest_name
from .views import assemble_challenge_views, game_view

config = get_config()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Chess Lobby API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─────────────────────────────────────────────────────────────
# Error mapping
# ─────────────────────────────────────────────────────────────

@app.exception_handler(ServerError)
async def server_error_handler(request: Request, exc: ServerError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc.detail)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.response_detail})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    return await server_error_handler(request, StoreError(str(exc)))


@app.get("/health")
def health():
    return {"status": "ok"}


# ─────────────────────────────────────────────────────────────
# 🔓 PUBLIC: user profile and games
# ─────────────────────────────────────────────────────────────

@app.get("/user/{uid}", response_model=UserResponse)
def get_user(uid: str, db: Session = Depends(get_db)):
    return get_user_by_uid(db, uid)


@app.get("/user/{uid}/games", response_model=list[GameResponse])
def get_user_games(uid: str, db: Session = Depends(get_db)):
    user = get_user_by_uid(db, uid)
    return [game_view(g) for g in get_games(db, user.uid)]


# ─────────────────────────────────────────────────────────────
# Signup (bound identity REQUIRED)
# ─────────────────────────────────────────────────────────────

@app.post("/user", response_model=UserResponse, status_code=201)
def signup(
    payload: NewUserRequest,
    caller: CallerIdentity = Depends(get_caller),
    db: Session = Depends(get_db),
):
    username = payload.username
    if username.lower().startswith(GUEST_PREFIX):
        raise ValidationError(f"Usernames starting with '{GUEST_PREFIX}' are reserved")

    return create_user(db, caller.uid, username, is_guest=False)


@app.post("/guest-user", response_model=UserResponse, status_code=201)
def guest_signup(
    caller: CallerIdentity = Depends(get_caller),
    db: Session = Depends(get_db),
):
    return create_user(db, caller.uid, random_guest_name(), is_guest=True)


# ─────────────────────────────────────────────────────────────
# 🔒 OWNER ONLY: challenges
# ─────────────────────────────────────────────────────────────

@app.get("/user/{uid}/challenges", response_model=list[ChallengeResponse])
def get_user_challenges(
    uid: str,
    caller: CallerIdentity = Depends(get_caller),
    db: Session = Depends(get_db),
):
    authorize(caller, uid)
    user = get_user_by_uid(db, uid)
    return assemble_challenge_views(get_challenges(db, user.uid), user)
