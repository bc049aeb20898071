"""The two sides of a game and their one-letter encoding."""
from enum import Enum

import chess

from .errors import DecodeError


class PlayerSide(str, Enum):
    BLACK = "b"
    WHITE = "w"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "PlayerSide":
        """
        Placeholder for building composite values before a side is known.
        Never meaningful on its own; use None for an unset side.
        """
        return cls.BLACK

    @classmethod
    def decode(cls, token: str) -> "PlayerSide":
        try:
            return cls(token)
        except ValueError:
            raise DecodeError(f"{token!r} is not a player side") from None

    def opposite(self) -> "PlayerSide":
        return PlayerSide.WHITE if self is PlayerSide.BLACK else PlayerSide.BLACK

    @classmethod
    def from_chess(cls, color: chess.Color) -> "PlayerSide":
        return cls.WHITE if color == chess.WHITE else cls.BLACK
