"""
Move generation and application for the Dama game.

Captures are mandatory. Every piece's capture chains are explored
recursively on copied boards; only chains that cannot be extended are
reported, a piece keeps only its longest chains, and a side may only play
the chains reaching the longest capture count found anywhere on the board.
When no capture exists, every single diagonal step onto an empty square is
legal.
"""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from .board import Board, Move, Position
from .piece import Piece, Side


@dataclass(frozen=True)
class ApplyMoveResult:
    """Outcome of :func:`apply_move`."""

    board: Board
    promoted: bool = False


def _longest(moves: List[Move]) -> List[Move]:
    """Keep only the moves with the highest capture count, preserving order."""
    if not moves:
        return []
    best = max(move.capture_count for move in moves)
    return [move for move in moves if move.capture_count == best]


def _capture_chains(
    board: Board,
    origin: Position,
    current: Position,
    piece: Piece,
    captured: FrozenSet[Position],
    path: tuple,
) -> List[Move]:
    chains: List[Move] = []
    for d_row, d_col in piece.directions():
        mid = current.offset(d_row, d_col)
        land = current.offset(d_row, d_col, steps=2)
        if not board.is_empty(land):
            continue
        victim = board.piece_at(mid)
        if victim is None or victim.owner is piece.owner or mid in captured:
            continue

        # Relocate the piece and lift the victim on a fresh board for this branch
        next_board = board.with_pieces({current: None, mid: None, land: piece})
        continuations = _capture_chains(
            next_board, origin, land, piece, captured | {mid}, path + (mid,)
        )
        if continuations:
            chains.extend(continuations)
        else:
            chains.append(Move(origin, land, path + (mid,)))
    return chains


def find_piece_capture_moves(board: Board, pos: Position) -> List[Move]:
    """
    Longest capture chains available to the piece on ``pos``.

    Args:
        board: Position to search.
        pos: Square of the capturing piece.

    Returns:
        List[Move]: Chains of maximal length for that piece, or ``[]`` when the
        square is empty, off the board, or the piece has no capture.
    """
    piece = board.piece_at(pos)
    if piece is None:
        return []
    return _longest(_capture_chains(board, pos, pos, piece, frozenset(), ()))


def find_capture_moves(board: Board, side: Side) -> List[Move]:
    """Mandatory captures for ``side``: chains reaching the global maximum count."""
    chains: List[Move] = []
    for pos, _ in board.pieces(side):
        chains.extend(find_piece_capture_moves(board, pos))
    return _longest(chains)


def find_step_moves(board: Board, pos: Position) -> List[Move]:
    """Non-capturing single diagonal steps for the piece on ``pos``."""
    piece = board.piece_at(pos)
    if piece is None:
        return []
    steps = []
    for d_row, d_col in piece.directions():
        target = pos.offset(d_row, d_col)
        if board.is_empty(target):
            steps.append(Move(pos, target))
    return steps


def get_all_moves(board: Board, side: Side) -> List[Move]:
    """Complete legal move set for ``side``."""
    captures = find_capture_moves(board, side)
    if captures:
        return captures
    steps: List[Move] = []
    for pos, _ in board.pieces(side):
        steps.extend(find_step_moves(board, pos))
    return steps


def get_valid_moves(board: Board, pos: Position) -> List[Move]:
    """
    Legal moves of the piece on ``pos`` for its owner.

    Empty or off-board squares yield ``[]``. When a capture is mandatory
    elsewhere, pieces that cannot take part in it also yield ``[]``.
    """
    piece = board.piece_at(pos)
    if piece is None:
        return []
    return [move for move in get_all_moves(board, piece.owner) if move.from_pos == pos]


def apply_move(board: Board, move: Optional[Move]) -> ApplyMoveResult:
    """
    Play ``move`` on ``board`` and return the resulting board.

    The moved piece lands on ``to_pos``, ``from_pos`` and every captured square
    are cleared, and a man reaching its promotion row becomes a king. A move
    without endpoints, with off-board endpoints, or starting from an empty
    square leaves the board unchanged. The input board is never modified.
    """
    if move is None or move.from_pos is None or move.to_pos is None:
        return ApplyMoveResult(board, False)
    if not (move.from_pos.is_on_board() and move.to_pos.is_on_board()):
        return ApplyMoveResult(board, False)
    piece = board.piece_at(move.from_pos)
    if piece is None:
        return ApplyMoveResult(board, False)

    promoted = piece.is_man() and move.to_pos.row == piece.owner.promotion_row
    changes = {pos: None for pos in move.captured}
    changes[move.from_pos] = None
    changes[move.to_pos] = piece.promoted() if promoted else piece
    return ApplyMoveResult(board.with_pieces(changes), promoted)
