import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
import chess

from .errors import Conflict, NotFound, StoreError
from .models import Challenge, Game, User
from .sides import PlayerSide

logger = logging.getLogger(__name__)


def get_user_by_uid(db: Session, uid: str) -> User:
    user = db.get(User, uid)
    if user is None:
        raise NotFound("User not found")
    return user


def insert_user(db: Session, user: User) -> User:
    """Single atomic insert; a second user for the same uid is a Conflict."""
    if db.get(User, user.uid) is not None:
        raise Conflict("User already exists")
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise Conflict("User already exists or username is taken") from e
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreError(f"Failed to insert user {user.uid}: {e}") from e
    db.refresh(user)
    return user


def create_user(db: Session, uid: str, username: str, is_guest: bool = False) -> User:
    user = insert_user(db, User(uid=uid, username=username, is_guest=is_guest))
    logger.info("Created %s user %s (%s)", "guest" if is_guest else "registered", user.uid, user.username)
    return user


def get_challenges(db: Session, uid: str) -> list[Challenge]:
    return db.query(Challenge) \
        .filter(or_(Challenge.challenger_uid == uid, Challenge.opponent_uid == uid)) \
        .order_by(Challenge.created_at, Challenge.id) \
        .all()


def get_games(db: Session, uid: str) -> list[Game]:
    return db.query(Game) \
        .filter(or_(Game.white_uid == uid, Game.black_uid == uid)) \
        .order_by(Game.created_at, Game.id) \
        .all()


def create_challenge(
    db: Session,
    *,
    challenger_uid: str,
    challenger_side: PlayerSide,
    opponent_uid: str | None = None,
    is_public: bool = True,
    status: str = "pending",
    challenge_id: str | None = None,
    created_at: datetime | None = None,
) -> Challenge:
    challenge = Challenge(
        id=challenge_id or str(uuid.uuid4()),
        challenger_uid=challenger_uid,
        opponent_uid=opponent_uid,
        challenger_side=str(challenger_side),
        is_public=is_public,
        status=status,
        created_at=created_at or datetime.now(timezone.utc),
    )
    db.add(challenge)
    db.commit()
    db.refresh(challenge)
    return challenge


def create_game(
    db: Session,
    *,
    white_uid: str,
    black_uid: str,
    fen: str = chess.STARTING_FEN,
    status: str = "ongoing",
    result: str | None = None,
    game_id: str | None = None,
    created_at: datetime | None = None,
) -> Game:
    game = Game(
        id=game_id or str(uuid.uuid4()),
        white_uid=white_uid,
        black_uid=black_uid,
        fen=fen,
        status=status,
        result=result,
        created_at=created_at or datetime.now(timezone.utc),
    )
    db.add(game)
    db.commit()
    db.refresh(game)
    return game
