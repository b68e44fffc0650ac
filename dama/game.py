"""
Core Dama game session.
Keeps the board, turn, undo history and final result for one game.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from .board import Board, Move, Position
from .config import GameConfig, GameMode
from .constants import DisplayNames, ScoreConstants
from .exceptions import GameOverError, IllegalMoveError, NotAITurnError
from .moves import apply_move, find_capture_moves, get_all_moves
from .piece import Rank, Side
from .rules import check_winner
from .strategy import get_ai_move
from .suggestions import get_suggested_moves


@dataclass(frozen=True)
class Snapshot:
    """One entry of the undo history."""

    board: Board
    side_to_move: Side
    chain_from: Optional[Position] = None


@dataclass(frozen=True)
class MoveOutcome:
    """What happened when a move was played."""

    move: Move
    promoted: bool
    continues_chain: bool
    winner: Optional[Side] = None

    @property
    def captured_count(self) -> int:
        return self.move.capture_count


@dataclass(frozen=True)
class GameResult:
    """Summary of a finished game."""

    winner: Side
    winner_name: str
    score: int
    moves: int
    mode: GameMode


def calculate_score(board: Board, winner: Side, moves: int) -> int:
    """Final score: remaining material of the winner minus a per-move penalty."""
    sc = ScoreConstants
    pieces = board.count(winner)
    kings = board.count(winner, Rank.KING)
    base = pieces * sc.PIECE_POINTS + kings * sc.KING_POINTS
    return max(0, base - moves * sc.MOVE_PENALTY + sc.WIN_BONUS)


class DamaGame:
    """
    A single game between two humans or a human and the AI.

    FIRST always moves first. After a capture, if the moving piece can keep
    capturing from where it landed (a man promoted mid-chain), the same side
    moves again with that piece only.
    """

    def __init__(self, config: Optional[GameConfig] = None, board: Optional[Board] = None):
        self.config = config if config is not None else GameConfig()
        self.rng = random.Random(self.config.seed)
        self._start_board = board if board is not None else Board.initial()
        self.restart()

    # --- State ---
    def restart(self) -> None:
        """Reset to the starting position."""
        self.board = self._start_board
        self.current_side = Side.FIRST
        self.chain_from: Optional[Position] = None
        self.winner: Optional[Side] = None
        self.result: Optional[GameResult] = None
        self.history: List[Snapshot] = [Snapshot(self.board, self.current_side)]
        logger.debug("Game restarted")
        self._check_game_over()

    @property
    def move_count(self) -> int:
        return (len(self.history) - 1) // 2

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def is_ai_turn(self) -> bool:
        return self.config.mode is GameMode.SINGLE and self.current_side is self.config.ai_side

    def is_human_turn(self) -> bool:
        return not self.is_ai_turn()

    # --- Queries ---
    def legal_moves(self) -> List[Move]:
        """Moves the side to move may play right now."""
        if self.is_over:
            return []
        if self.chain_from is not None:
            return [
                m
                for m in find_capture_moves(self.board, self.current_side)
                if m.from_pos == self.chain_from
            ]
        return get_all_moves(self.board, self.current_side)

    def moves_from(self, pos: Position) -> List[Move]:
        return [m for m in self.legal_moves() if m.from_pos == pos]

    def mandatory_captures(self) -> List[Move]:
        return [m for m in self.legal_moves() if m.is_capture]

    def suggestions(self) -> List[Move]:
        """Hint moves, when hints are enabled and a human is to move."""
        if not self.config.enable_suggestions or self.is_over or not self.is_human_turn():
            return []
        legal = self.legal_moves()
        return [m for m in get_suggested_moves(self.board, self.current_side) if m in legal]

    def player_paths(self) -> List[Move]:
        """Every legal move, when path display is enabled and a human is to move."""
        if not self.config.show_paths or self.is_over or not self.is_human_turn():
            return []
        return self.legal_moves()

    # --- Actions ---
    def play_move(self, move: Move) -> MoveOutcome:
        """
        Play ``move`` for the side to move.

        Raises:
            GameOverError: The game already has a winner.
            IllegalMoveError: ``move`` is not currently legal.
        """
        if self.is_over:
            raise GameOverError(f"Game already won by {self.winner.display_name}")
        if move not in self.legal_moves():
            raise IllegalMoveError(f"Illegal move {move} for {self.current_side.display_name}")

        side = self.current_side
        applied = apply_move(self.board, move)
        self.board = applied.board
        if applied.promoted:
            logger.debug(f"{side.display_name} promoted a man on {move.to_pos}")

        continuing = False
        if move.is_capture:
            continuing = any(
                m.from_pos == move.to_pos for m in find_capture_moves(self.board, side)
            )
        if continuing:
            self.chain_from = move.to_pos
            logger.debug(f"{side.display_name} continues capturing from {move.to_pos}")
        else:
            self.chain_from = None
            self.current_side = side.opponent

        self.history.append(Snapshot(self.board, self.current_side, self.chain_from))
        logger.debug(f"{side.display_name} played {move}")
        self._check_game_over()
        return MoveOutcome(move, applied.promoted, continuing, self.winner)

    def play_ai_turn(self) -> Optional[MoveOutcome]:
        """
        Let the AI play the current turn.

        Returns ``None`` when the AI has no move, which ends the game.

        Raises:
            GameOverError: The game already has a winner.
            NotAITurnError: A human is to move.
        """
        if self.is_over:
            raise GameOverError(f"Game already won by {self.winner.display_name}")
        if not self.is_ai_turn():
            raise NotAITurnError(f"{self.current_side.display_name} is played by a human")

        move = get_ai_move(
            self.board,
            self.current_side,
            self.config.difficulty,
            self.rng,
            moves=self.legal_moves(),
        )
        if move is None:
            self._finish(self.current_side.opponent)
            return None
        return self.play_move(move)

    def undo(self) -> bool:
        """
        Step back through the history.

        In single mode the AI's reply is undone too, so the human is to move
        again. Not available once the game is won or before any move.
        """
        if self.is_over or len(self.history) <= 1:
            return False
        self.history.pop()
        if self.config.mode is GameMode.SINGLE:
            while len(self.history) > 1 and self.history[-1].side_to_move is self.config.ai_side:
                self.history.pop()

        snapshot = self.history[-1]
        self.board = snapshot.board
        self.current_side = snapshot.side_to_move
        self.chain_from = snapshot.chain_from
        logger.debug(f"Undo to history entry {len(self.history) - 1}")
        return True

    # --- Internal ---
    def _check_game_over(self) -> None:
        winner = check_winner(self.board, self.current_side)
        if winner is not None:
            self._finish(winner)

    def _finish(self, winner: Side) -> None:
        self.winner = winner
        moves = self.move_count
        self.result = GameResult(
            winner=winner,
            winner_name=self._winner_name(winner),
            score=calculate_score(self.board, winner, moves),
            moves=moves,
            mode=self.config.mode,
        )
        logger.debug(f"{self.result.winner_name} wins after {moves} moves")

    def _winner_name(self, winner: Side) -> str:
        if self.config.mode is GameMode.SINGLE:
            return DisplayNames.CPU if winner is self.config.ai_side else DisplayNames.HUMAN
        return winner.display_name
