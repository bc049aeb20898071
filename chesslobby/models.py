from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.sql import func
import chess

from .db import Base


class User(Base):
    __tablename__ = "users"

    uid = Column(String(128), primary_key=True)  # identity from the auth boundary
    username = Column(String(64), unique=True, nullable=False)
    is_guest = Column(Boolean, nullable=False, default=False)
    joined_at = Column(DateTime(timezone=True), server_default=func.now())


class Challenge(Base):
    __tablename__ = "challenges"

    id = Column(String(64), primary_key=True)
    challenger_uid = Column(String(128), ForeignKey("users.uid"), nullable=False, index=True)
    opponent_uid = Column(String(128), ForeignKey("users.uid"), nullable=True, index=True)  # null = open
    challenger_side = Column(String(1), nullable=False)  # b | w
    is_public = Column(Boolean, nullable=False, default=True)
    status = Column(String(16), nullable=False, default="pending")  # pending | accepted | declined
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Game(Base):
    __tablename__ = "games"

    id = Column(String(64), primary_key=True)
    white_uid = Column(String(128), ForeignKey("users.uid"), nullable=False, index=True)
    black_uid = Column(String(128), ForeignKey("users.uid"), nullable=False, index=True)
    fen = Column(String(100), nullable=False, default=chess.STARTING_FEN)
    status = Column(String(16), nullable=False, default="ongoing")  # ongoing | finished
    result = Column(String(8), nullable=True)  # None | 1-0 | 0-1 | 1/2-1/2
    created_at = Column(DateTime(timezone=True), server_default=func.now())
