import random
from dataclasses import dataclass
from typing import Optional, Tuple

import config as cfg

X = "X"
O = "O"

# Declared order is the tie-break order for both win detection and the AI scan.
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)

CONTINUING = "CONTINUING"
WON = "WON"
DRAW = "DRAW"

MODES = (cfg.HUMAN_VS_HUMAN, cfg.HUMAN_VS_COMPUTER)


@dataclass(frozen=True)
class Outcome:
    kind: str
    winner: Optional[str] = None
    line: Optional[Tuple[int, int, int]] = None


def other(player):
    return O if player == X else X


def empty_cells(board):
    return [i for i, v in enumerate(board) if v is None]


def evaluate_outcome(board) -> Outcome:
    """
    First fully-occupied line in declared order wins; a full board with no
    line is a draw.
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome(WON, board[a], line)

    if all(v is not None for v in board):
        return Outcome(DRAW)

    return Outcome(CONTINUING)


def find_strategic_move(board, player):
    """
    Returns the empty index that completes a line already holding two of
    `player`, or None.
    """
    for line in WINNING_LINES:
        vals = [board[i] for i in line]
        if vals.count(player) == 2 and vals.count(None) == 1:
            return line[vals.index(None)]
    return None


def choose_move(board, computer, opponent, rng=None):
    # Win, then block, then any empty cell.
    mv = find_strategic_move(board, computer)
    if mv is not None:
        return mv

    mv = find_strategic_move(board, opponent)
    if mv is not None:
        return mv

    empties = empty_cells(board)
    if not empties:
        return None
    return (rng or random).choice(empties)


class TicTacToeGame:
    def __init__(self, mode=cfg.DEFAULT_MODE):
        self.mode = mode
        self.reset()

    def reset(self):
        self.board = [None] * 9
        self.current_player = X
        self.active = True
        self.outcome = Outcome(CONTINUING)

    def set_mode(self, mode):
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode!r}")
        self.mode = mode
        self.reset()

    @property
    def vs_computer(self) -> bool:
        return self.mode == cfg.HUMAN_VS_COMPUTER

    def switch_player(self):
        self.current_player = other(self.current_player)

    def apply_move(self, index) -> bool:
        # Invalid moves are ignored; the return value is the only signal.
        if not self.active:
            return False
        if not isinstance(index, int) or not 0 <= index <= 8:
            return False
        if self.board[index] is not None:
            return False

        self.board[index] = self.current_player
        self.outcome = evaluate_outcome(self.board)

        if self.outcome.kind == CONTINUING:
            self.switch_player()
        else:
            self.active = False
        return True

    @property
    def win_line(self):
        return self.outcome.line
