"""Compose challenge rows with the requesting user into response views."""
import logging
from collections.abc import Iterable

import chess

from .errors import AssemblyError
from .models import Challenge, Game, User
from .schemas import ChallengeResponse, GameResponse, UserResponse
from .sides import PlayerSide

logger = logging.getLogger(__name__)


def assemble_challenge_view(challenge: Challenge, user: User) -> ChallengeResponse:
    """
    Embed `user` in the slot of the role it plays in `challenge`.

    Pure: everything needed is passed in. Raises AssemblyError when the
    challenge does not reference the user at all.
    """
    try:
        challenger_side = PlayerSide.decode(challenge.challenger_side)
    except ValueError as e:
        raise AssemblyError(f"Challenge {challenge.id}: {e}") from e

    public_user = UserResponse.model_validate(user)

    if challenge.challenger_uid == user.uid:
        role, challenger, opponent = "challenger", public_user, None
    elif challenge.opponent_uid is not None and challenge.opponent_uid == user.uid:
        role, challenger, opponent = "opponent", None, public_user
    else:
        raise AssemblyError(
            f"Challenge {challenge.id} does not reference user {user.uid}"
        )

    return ChallengeResponse(
        id=challenge.id,
        role=role,
        challenger=challenger,
        challenger_uid=challenge.challenger_uid,
        opponent=opponent,
        opponent_uid=challenge.opponent_uid,
        challenger_side=challenger_side,
        opponent_side=challenger_side.opposite(),
        is_public=challenge.is_public,
        status=challenge.status,
        created_at=challenge.created_at,
    )


def assemble_challenge_views(challenges: Iterable[Challenge], user: User) -> list[ChallengeResponse]:
    return [assemble_challenge_view(c, user) for c in challenges]


def game_view(game: Game) -> GameResponse:
    response = GameResponse.model_validate(game)
    try:
        response.turn = PlayerSide.from_chess(chess.Board(game.fen).turn)
    except ValueError as e:
        logger.warning("Game %s has an unparseable FEN %r: %s", game.id, game.fen, e)
        response.turn = None
    return response
