import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

log = logging.getLogger(__name__)

BOARD_SIZE = 3                        # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diagonals; scanned in this order
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class InvalidCellError(ValueError):
    """
    cell index or coords outside the board
    """


class Mark(Enum):
    X = "X"
    O = "O"

    def opposite(self):
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self):
        return self.value


class OutcomeKind(Enum):
    IN_PROGRESS = "in-progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    derived game result; winner and line only set on a win
    """
    kind: OutcomeKind
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self):
        return self.kind is not OutcomeKind.IN_PROGRESS


IN_PROGRESS = Outcome(OutcomeKind.IN_PROGRESS)
DRAW = Outcome(OutcomeKind.DRAW)


@dataclass(frozen=True)
class Status:
    outcome: Outcome
    summary: str                      # 'next-player', 'winner' or 'draw'
    next_player: Optional[Mark] = None

    @property
    def line(self):
        return self.outcome.line


@dataclass(frozen=True)
class ScoreBoard:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    @property
    def total(self):
        return self.x_wins + self.o_wins + self.draws


@dataclass(frozen=True)
class HistoryEntry:
    winner: Optional[Mark]            # None for a draw
    timestamp: datetime
    move_count: int

    @property
    def is_draw(self):
        return self.winner is None


def evaluate(board) -> Outcome:
    """
    scan the fixed win lines, first full line wins;
    otherwise draw on a full board, else still in progress
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome(OutcomeKind.WIN, board[a], line)
    if all(cell is not None for cell in board):
        return DRAW
    return IN_PROGRESS


def _check_index(index):
    # bool is an int subclass but never a cell
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidCellError(f"cell index must be an int, got {index!r}")
    if not 0 <= index < CELL_COUNT:
        raise InvalidCellError(f"cell index {index} outside 0..{CELL_COUNT - 1}")
    return index


def cell_index(row, col):
    """
    grid coords -> row-major cell index
    """
    for name, value in (("row", row), ("col", col)):
        if isinstance(value, bool) or not isinstance(value, int) \
           or not 0 <= value < BOARD_SIZE:
            raise InvalidCellError(f"{name} {value!r} outside 0..{BOARD_SIZE - 1}")
    return row * BOARD_SIZE + col


class GameEngine:
    """
    tic-tac-toe rules, turn, scores and history for one session
    """
    def __init__(self, clock=datetime.now):
        """
        init board, turn and counters
        """
        self._clock = clock               # stamps completed games
        self._board = [None] * CELL_COUNT
        self._turn = Mark.X
        self._x_wins = 0
        self._o_wins = 0
        self._draws = 0
        self._history = []

    @property
    def board(self):
        return tuple(self._board)

    @property
    def turn(self):
        return self._turn

    @property
    def move_count(self):
        return sum(1 for cell in self._board if cell is not None)

    def cell(self, index):
        return self._board[_check_index(index)]

    def outcome(self):
        return evaluate(self._board)

    def play(self, index):
        """
        place the current mark at index
        returns False (no change) if the cell is taken or the game is over
        """
        _check_index(index)
        if self._board[index] is not None or self.outcome().is_terminal:
            log.debug("ignoring play on cell %d", index)
            return False

        mark = self._turn
        self._board[index] = mark
        self._turn = mark.opposite()
        log.debug("%s played cell %d", mark, index)

        # this placement is the only way into a terminal outcome,
        # so scoring below runs once per game
        outcome = self.outcome()
        if outcome.is_terminal:
            self._record(outcome)
        return True

    def _record(self, outcome):
        # score + history for a game that just finished
        if outcome.kind is OutcomeKind.DRAW:
            self._draws += 1
        elif outcome.winner is Mark.X:
            self._x_wins += 1
        else:
            self._o_wins += 1
        entry = HistoryEntry(outcome.winner, self._clock(), self.move_count)
        self._history.append(entry)
        if entry.is_draw:
            log.info("game drawn after %d moves", entry.move_count)
        else:
            log.info("player %s won after %d moves", entry.winner, entry.move_count)

    def new_game(self):
        """
        clear board, X to move; scores and history kept
        """
        self._board = [None] * CELL_COUNT
        self._turn = Mark.X
        log.info("new game")

    def reset_scores(self):
        """
        zero the counters and drop history; board untouched
        """
        self._x_wins = self._o_wins = self._draws = 0
        self._history = []
        log.info("scores reset")

    def status(self):
        outcome = self.outcome()
        if outcome.kind is OutcomeKind.WIN:
            return Status(outcome, "winner")
        if outcome.kind is OutcomeKind.DRAW:
            return Status(outcome, "draw")
        return Status(outcome, "next-player", self._turn)

    def scores(self):
        return ScoreBoard(self._x_wins, self._o_wins, self._draws)

    def history(self, limit=None, newest_first=False):
        """
        completed games, oldest first unless newest_first;
        limit keeps only the most recent entries
        """
        entries = list(self._history)
        if limit is not None:
            if limit < 0:
                raise ValueError(f"history limit must be >= 0, got {limit}")
            entries = entries[-limit:] if limit else []
        if newest_first:
            entries.reverse()
        return entries
