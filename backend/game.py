# backend/game.py

import logging
from dataclasses import dataclass, asdict
from typing import Callable, Iterable, Optional, Tuple

from evaluation.leaderboard import Leaderboard
from .board import MinesweeperBoard
from .config import GameConfig

logger = logging.getLogger(__name__)

ZERO_CELL_POINTS = 10
NUMBER_CELL_POINTS = 5

WIN = "win"
LOSS = "loss"


@dataclass(frozen=True)
class GameResult:
    outcome: str
    player_name: str
    score: int
    elapsed_seconds: int

    def to_dict(self) -> dict:
        return asdict(self)


class GameSession:
    """
    A wrapper around MinesweeperBoard that keeps score, time and the
    remaining-mine counter, and reports wins and losses.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        num_mines: int = 10,
        seed: int = None,
        mine_positions: Optional[Iterable[Tuple[int, int]]] = None,
        leaderboard: Optional[Leaderboard] = None,
        on_game_over: Optional[Callable[[GameResult], None]] = None,
        default_player_name: str = "Unknown Player",
    ):
        self.rows = rows
        self.cols = cols
        self.num_mines = num_mines
        self.seed = seed
        self.mine_positions = list(mine_positions) if mine_positions is not None else None
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard()
        self.on_game_over = on_game_over
        self.default_player_name = default_player_name

        self.board = None
        self.reset()

    @classmethod
    def from_config(cls, config: GameConfig, **kwargs) -> "GameSession":
        return cls(
            rows=config.rows,
            cols=config.cols,
            num_mines=config.num_mines,
            seed=config.seed,
            default_player_name=config.default_player_name,
            **kwargs,
        )

    def reset(self):
        """
        Start a fresh game with the same parameters. The leaderboard is kept;
        the player name is cleared.
        """
        if self.board is None:
            self.board = MinesweeperBoard(
                self.rows, self.cols, self.num_mines, seed=self.seed, mine_positions=self.mine_positions
            )
        else:
            self.board.initialize()
        self.score = 0
        self.elapsed_seconds = 0
        self.mines_remaining = self.num_mines
        self.game_over = False
        self.won = False
        self.last_result = None
        self.player_name = ""
        logger.info("New %dx%d game with %d mines", self.rows, self.cols, self.num_mines)

    restart = reset

    def set_player_name(self, name: str):
        self.player_name = (name or "").strip()

    def resolved_player_name(self) -> str:
        return self.player_name or self.default_player_name

    def reveal(self, row: int, col: int) -> Optional[GameResult]:
        if self.game_over:
            return None

        opened = self.board.reveal(row, col)
        if not opened:
            return None

        r, c = opened[0]
        if self.board.is_mine(r, c):
            return self._finish(LOSS)

        for r, c in opened:
            if self.board.neighbor_count(r, c) == 0:
                self.score += ZERO_CELL_POINTS
            else:
                self.score += NUMBER_CELL_POINTS

        if self.check_win():
            return self._finish(WIN)
        return None

    def flag(self, row: int, col: int) -> Optional[GameResult]:
        if self.game_over:
            return None
        if not self.board.flag(row, col):
            return None

        self.mines_remaining -= 1
        if self.mines_remaining == 0 and self.check_win():
            return self._finish(WIN)
        return None

    def check_win(self) -> bool:
        return self.board.is_complete()

    def tick(self):
        if not self.game_over:
            self.elapsed_seconds += 1

    def step(self, action: str, row: int, col: int) -> dict:
        """
        Apply an action ("reveal" or "flag") at position (row, col).
        Returns a dict describing the game state after the action.
        """
        if action == "reveal":
            self.reveal(row, col)
        elif action == "flag":
            self.flag(row, col)
        else:
            raise ValueError(f"Unknown action: {action!r}")
        return self.get_state()

    def _finish(self, outcome: str) -> GameResult:
        self.game_over = True
        self.won = outcome == WIN
        result = GameResult(outcome, self.resolved_player_name(), self.score, self.elapsed_seconds)
        self.last_result = result
        self.leaderboard.record(result.player_name, result.score, result.elapsed_seconds)

        if self.won:
            logger.info("%s won with score %d in %ds", result.player_name, result.score, result.elapsed_seconds)
        else:
            logger.info("%s hit a mine, score %d in %ds", result.player_name, result.score, result.elapsed_seconds)

        if self.on_game_over is not None:
            self.on_game_over(result)
        return result

    def get_state(self) -> dict:
        return {
            "board": self.board.get_visible_state(game_over_flag=self.game_over, game_won_flag=self.won),
            "score": self.score,
            "elapsed_seconds": self.elapsed_seconds,
            "mines_remaining": self.mines_remaining,
            "game_over": self.game_over,
            "won": self.won,
            "dimensions": (self.rows, self.cols),
            "num_mines": self.num_mines,
            "player_name": self.player_name,
            "result": self.last_result.to_dict() if self.last_result else None,
        }

    def is_game_over(self) -> bool:
        return self.game_over

    def is_win(self) -> bool:
        return self.won
