import logging

import config as cfg
from computer_turn import ComputerTurn
from ttt_game import TicTacToeGame, choose_move, other, WON, DRAW

logger = logging.getLogger(__name__)

IDLE = "IDLE"
IN_PROGRESS = "IN_PROGRESS"
# WON and DRAW are shared with the outcome kinds.


class GameSession:
    """
    Owns one game and the computer's pending reply, and decides which input
    is allowed to reach the game.
    """

    def __init__(self, delay=cfg.COMPUTER_MOVE_DELAY_SECONDS, rng=None):
        self.delay = delay
        self.rng = rng
        self.game = TicTacToeGame()
        self.computer_turn = ComputerTurn()
        self.started = False

    @property
    def phase(self):
        if not self.started:
            return IDLE
        if self.game.active:
            return IN_PROGRESS
        return self.game.outcome.kind

    @property
    def mode(self):
        return self.game.mode

    def select_mode(self, mode):
        self.computer_turn.cancel()
        self.game.set_mode(mode)
        self.started = True
        logger.info("Mode set to %s, new game", mode)

    def reset(self):
        self.computer_turn.cancel()
        self.game.reset()
        self.started = True
        logger.info("Game reset (%s)", self.game.mode)

    def is_human_turn(self) -> bool:
        if not self.game.vs_computer:
            return True
        return self.game.current_player == cfg.HUMAN_SYMBOL

    def is_computer_turn(self) -> bool:
        return self.game.vs_computer and self.game.current_player == cfg.COMPUTER_SYMBOL

    def click(self, index, now: float) -> bool:
        # Gate on turn ownership too; `active` stays True while the reply is pending.
        if self.phase != IN_PROGRESS or not self.is_human_turn():
            return False

        player = self.game.current_player
        if not self.game.apply_move(index):
            return False
        logger.debug("%s played %d", player, index)

        self._log_if_over()
        if self.game.active and self.is_computer_turn():
            self.computer_turn.schedule(now, self.delay)
        return True

    def tick(self, now: float):
        """
        Plays the computer's reply once it is due. Returns the index played,
        or None.
        """
        if not self.computer_turn.poll(now):
            return None
        if not self.game.active or not self.is_computer_turn():
            return None

        me = cfg.COMPUTER_SYMBOL
        index = choose_move(self.game.board, me, other(me), self.rng)
        if index is None or not self.game.apply_move(index):
            return None
        logger.debug("Computer (%s) played %d", me, index)

        self._log_if_over()
        return index

    def _log_if_over(self):
        outcome = self.game.outcome
        if outcome.kind == WON:
            logger.info("%s wins on line %s", outcome.winner, outcome.line)
        elif outcome.kind == DRAW:
            logger.info("Game drawn")

    def highlighted_cells(self):
        if self.game.outcome.kind == WON:
            return self.game.outcome.line
        return ()

    def status_text(self) -> str:
        phase = self.phase
        if phase == IDLE:
            return "Choose a mode to start."
        if phase == WON:
            return f"{self.game.outcome.winner} wins!"
        if phase == DRAW:
            return "It's a draw!"
        return f"{self.game.current_player}'s turn"
