"""Tests for user, challenge and game persistence."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from chesslobby import crud
from chesslobby.errors import Conflict, NotFound, StoreError
from chesslobby.sides import PlayerSide

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


# ── users ────────────────────────────────────────────────────


def test_create_and_get_user(db):
    user = crud.create_user(db, "U1", "black")
    assert user.uid == "U1"
    assert user.username == "black"
    assert user.is_guest is False
    assert crud.get_user_by_uid(db, "U1").username == "black"


def test_get_user_missing(db):
    with pytest.raises(NotFound):
        crud.get_user_by_uid(db, "nobody")


def test_duplicate_identity_conflicts(db, session_factory):
    crud.create_user(db, "U1", "black")
    with pytest.raises(Conflict):
        crud.create_user(db, "U1", "white", is_guest=True)

    fresh = session_factory()
    user = crud.get_user_by_uid(fresh, "U1")
    assert user.username == "black"
    assert user.is_guest is False
    fresh.close()


def test_duplicate_username_conflicts(db):
    crud.create_user(db, "U1", "black")
    with pytest.raises(Conflict):
        crud.create_user(db, "U2", "black")
    with pytest.raises(NotFound):
        crud.get_user_by_uid(db, "U2")


def test_session_usable_after_conflict(db):
    crud.create_user(db, "U1", "black")
    with pytest.raises(Conflict):
        crud.create_user(db, "U2", "black")
    assert crud.create_user(db, "U2", "white").uid == "U2"


def test_insert_store_failure_rolls_back():
    session = MagicMock()
    session.get.return_value = None
    session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))

    with pytest.raises(StoreError):
        crud.create_user(session, "U1", "black")
    session.rollback.assert_called_once()
    session.refresh.assert_not_called()


# ── challenges ───────────────────────────────────────────────


def test_get_challenges_both_roles(db):
    crud.create_user(db, "U1", "black")
    crud.create_user(db, "U2", "white")
    crud.create_user(db, "U3", "grey")
    crud.create_challenge(db, challenge_id="c1", challenger_uid="U1", challenger_side=PlayerSide.BLACK,
                          created_at=T0)
    crud.create_challenge(db, challenge_id="c2", challenger_uid="U2", opponent_uid="U1",
                          challenger_side=PlayerSide.WHITE, created_at=T0 + timedelta(minutes=1))
    crud.create_challenge(db, challenge_id="c3", challenger_uid="U2", opponent_uid="U3",
                          challenger_side=PlayerSide.WHITE, created_at=T0 + timedelta(minutes=2))

    assert [c.id for c in crud.get_challenges(db, "U1")] == ["c1", "c2"]
    assert [c.id for c in crud.get_challenges(db, "U3")] == ["c3"]


def test_get_challenges_empty(db):
    crud.create_user(db, "U1", "black")
    assert crud.get_challenges(db, "U1") == []


def test_challenge_side_stored_as_letter(db):
    crud.create_user(db, "U1", "black")
    challenge = crud.create_challenge(db, challenger_uid="U1", challenger_side=PlayerSide.WHITE)
    assert challenge.challenger_side == "w"
    assert challenge.status == "pending"


# ── games ────────────────────────────────────────────────────


def test_get_games(db):
    crud.create_user(db, "U1", "black")
    crud.create_user(db, "U2", "white")
    crud.create_user(db, "U3", "grey")
    crud.create_game(db, game_id="g2", white_uid="U2", black_uid="U1", created_at=T0 + timedelta(hours=1))
    crud.create_game(db, game_id="g1", white_uid="U1", black_uid="U2", created_at=T0)
    crud.create_game(db, game_id="g3", white_uid="U2", black_uid="U3", created_at=T0)

    assert [g.id for g in crud.get_games(db, "U1")] == ["g1", "g2"]
    assert [g.id for g in crud.get_games(db, "U3")] == ["g3"]
