from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .sides import PlayerSide


class NewUserRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=20, pattern=r"^[A-Za-z0-9_-]+$")


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uid: str
    username: str
    is_guest: bool
    joined_at: datetime | None = None


class ChallengeResponse(BaseModel):
    id: str
    role: Literal["challenger", "opponent"]
    challenger: UserResponse | None = None
    challenger_uid: str
    opponent: UserResponse | None = None
    opponent_uid: str | None = None
    challenger_side: PlayerSide
    opponent_side: PlayerSide
    is_public: bool
    status: str
    created_at: datetime | None = None


class GameResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    white_uid: str
    black_uid: str
    fen: str
    turn: PlayerSide | None = None
    status: str
    result: str | None = None
    created_at: datetime | None = None
