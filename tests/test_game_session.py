"""Tests for the session state machine and computer turn gating."""

import logging
import random

import pytest

import config as cfg
from game_session import GameSession, IDLE, IN_PROGRESS
from ttt_game import WON, DRAW, X, O

DELAY = 0.5


@pytest.fixture
def session():
    s = GameSession(delay=DELAY, rng=random.Random(7))
    s.select_mode(cfg.HUMAN_VS_HUMAN)
    return s


@pytest.fixture
def vs_computer():
    s = GameSession(delay=DELAY, rng=random.Random(7))
    s.select_mode(cfg.HUMAN_VS_COMPUTER)
    return s


def test_new_session_is_idle_and_ignores_clicks():
    s = GameSession()
    assert s.phase == IDLE
    assert s.click(0, now=0.0) is False
    assert s.game.board == [None] * 9
    assert s.status_text() == "Choose a mode to start."


def test_select_mode_starts_game(session):
    assert session.phase == IN_PROGRESS
    assert session.status_text() == "X's turn"


def test_two_player_scenario_win(session):
    for index in (0, 4, 1, 7, 2):
        assert session.click(index, now=0.0)

    assert session.phase == WON
    assert session.status_text() == "X wins!"
    assert session.highlighted_cells() == (0, 1, 2)
    assert session.click(8, now=0.0) is False


def test_two_player_draw(session):
    for index in (0, 1, 2, 3, 4, 6, 5, 8, 7):
        session.click(index, now=0.0)

    assert session.phase == DRAW
    assert session.status_text() == "It's a draw!"
    assert session.highlighted_cells() == ()


def test_two_player_never_schedules_computer(session):
    session.click(0, now=0.0)
    assert not session.computer_turn.pending
    assert session.tick(now=10.0) is None
    assert session.game.current_player == O


def test_mode_switch_mid_game_resets(session):
    session.click(0, now=0.0)
    session.click(4, now=0.0)
    session.select_mode(cfg.HUMAN_VS_COMPUTER)

    assert session.game.board == [None] * 9
    assert session.game.current_player == X
    assert session.game.active is True
    assert session.phase == IN_PROGRESS


def test_reset_after_win(session):
    for index in (0, 4, 1, 7, 2):
        session.click(index, now=0.0)
    session.reset()

    assert session.phase == IN_PROGRESS
    assert session.game.board == [None] * 9
    assert session.game.current_player == X


def test_human_move_schedules_one_reply(vs_computer):
    assert vs_computer.click(4, now=1.0)
    assert vs_computer.computer_turn.pending
    assert vs_computer.status_text() == "O's turn"

    # Not yet due.
    assert vs_computer.tick(now=1.2) is None
    assert vs_computer.game.current_player == O

    index = vs_computer.tick(now=1.5)
    assert index is not None
    assert vs_computer.game.board[index] == O
    assert vs_computer.game.current_player == X
    assert not vs_computer.computer_turn.pending


def test_clicks_ignored_while_reply_pending(vs_computer):
    vs_computer.click(0, now=0.0)
    assert vs_computer.click(1, now=0.1) is False
    assert vs_computer.game.board[1] is None
    assert vs_computer.game.board.count(X) == 1


def test_computer_takes_win_over_block(vs_computer):
    game = vs_computer.game
    game.board = [O, O, None,
                  X, X, None,
                  None, None, None]
    game.current_player = O
    vs_computer.computer_turn.schedule(0.0, 0.0)

    assert vs_computer.tick(now=0.0) == 2
    assert vs_computer.phase == WON
    assert vs_computer.status_text() == "O wins!"


def test_computer_blocks_human(vs_computer):
    game = vs_computer.game
    game.board = [X, X, None,
                  None, O, None,
                  None, None, None]
    game.current_player = O
    vs_computer.computer_turn.schedule(0.0, DELAY)
    assert vs_computer.tick(now=DELAY) == 2


def test_reset_cancels_pending_reply(vs_computer):
    vs_computer.click(0, now=0.0)
    vs_computer.reset()

    assert not vs_computer.computer_turn.pending
    assert vs_computer.tick(now=5.0) is None
    assert vs_computer.game.board == [None] * 9
    assert vs_computer.game.current_player == X


def test_mode_switch_cancels_pending_reply(vs_computer):
    vs_computer.click(0, now=0.0)
    vs_computer.select_mode(cfg.HUMAN_VS_HUMAN)

    assert vs_computer.tick(now=5.0) is None
    assert vs_computer.game.board == [None] * 9


def test_stale_reply_does_not_move_for_human(vs_computer):
    # A reply that fires when it is no longer the computer's turn is dropped.
    vs_computer.computer_turn.schedule(0.0, 0.0)
    assert vs_computer.tick(now=1.0) is None
    assert vs_computer.game.board == [None] * 9


def test_no_reply_after_human_wins(vs_computer):
    game = vs_computer.game
    game.board = [X, X, None,
                  O, O, None,
                  None, None, None]
    assert vs_computer.click(2, now=0.0)

    assert vs_computer.phase == WON
    assert not vs_computer.computer_turn.pending


def test_full_game_against_computer_terminates(vs_computer):
    now = 0.0
    for _i in range(9):
        if vs_computer.phase != IN_PROGRESS:
            break
        empties = [i for i, v in enumerate(vs_computer.game.board) if v is None]
        assert vs_computer.click(empties[0], now)
        now += DELAY
        vs_computer.tick(now)

    assert vs_computer.phase in (WON, DRAW)


def test_select_unknown_mode_raises(session):
    with pytest.raises(ValueError):
        session.select_mode("NETWORK")


def test_rejected_click_is_not_logged(session, caplog):
    session.click(0, now=0.0)
    with caplog.at_level(logging.DEBUG, logger="game_session"):
        caplog.clear()
        assert session.click(0, now=0.0) is False
    assert caplog.records == []


def test_game_over_is_logged(session, caplog):
    with caplog.at_level(logging.INFO, logger="game_session"):
        for index in (0, 4, 1, 7, 2):
            session.click(index, now=0.0)
    assert any("X wins" in r.getMessage() for r in caplog.records)
