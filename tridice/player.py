from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from .config import check_piece_count, config
from .errors import PieceLost
from .piece import Piece


@dataclass(slots=True)
class Player:
    """Owns a fixed set of pieces split into off board, on board and lost."""

    player_id: int
    piece_count: int = config.PIECES_PER_PLAYER
    pieces: List[Piece] = field(init=False)
    on_board: Dict[int, Piece] = field(default_factory=dict, init=False)
    lost: Dict[int, Piece] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        check_piece_count(self.piece_count)
        self.pieces = [
            Piece(piece_id=self.player_id * 10 + i, owner_id=self.player_id)
            for i in range(self.piece_count)
        ]

    def get_piece(self, index: int) -> Piece:
        return self.pieces[index]

    def owns(self, piece: Piece) -> bool:
        return piece.owner_id == self.player_id

    @property
    def off_board(self) -> List[Piece]:
        return [
            p for p in self.pieces if p.piece_id not in self.on_board and p.piece_id not in self.lost
        ]

    def place_piece(self, piece: Piece) -> None:
        if not self.owns(piece):
            raise ValueError(f"Player {self.player_id} doesn't own dice {piece.piece_id}")
        if piece.piece_id in self.lost:
            raise PieceLost(
                f"Dice [{piece.piece_id}] was captured and can't return to the board.",
                piece_id=piece.piece_id,
                player_id=self.player_id,
            )
        self.on_board[piece.piece_id] = piece

    def lose_piece(self, piece: Piece) -> None:
        self.on_board.pop(piece.piece_id, None)
        self.lost[piece.piece_id] = piece

    def is_lost(self, piece: Piece) -> bool:
        return piece.piece_id in self.lost

    @property
    def has_lost(self) -> bool:
        return len(self.lost) == self.piece_count

    def partition_sizes(self) -> Dict[str, int]:
        return {
            "off_board": len(self.off_board),
            "on_board": len(self.on_board),
            "lost": len(self.lost),
        }

    def __str__(self) -> str:
        return f"Player({self.player_id}, dice: {[str(p) for p in self.pieces]})"
