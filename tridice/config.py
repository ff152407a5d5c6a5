import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# two-digit cell IDs: the widest row (2h - 1 slots) must fit in one digit
MAX_BOARD_HEIGHT = 5
# piece IDs are owner * 10 + index
MAX_PIECES_PER_PLAYER = 10


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def check_board_height(height: int) -> None:
    if not 1 <= height <= MAX_BOARD_HEIGHT:
        raise ValueError(f"Board height must be between 1 and {MAX_BOARD_HEIGHT}, got {height}")


def check_piece_count(count: int) -> None:
    if not 1 <= count <= MAX_PIECES_PER_PLAYER:
        raise ValueError(f"Pieces per player must be between 1 and {MAX_PIECES_PER_PLAYER}, got {count}")


@dataclass(slots=True)
class Config:
    # --- Board ---
    BOARD_HEIGHT: int = int(os.getenv("BOARD_HEIGHT", 4))  # rows; row r has 2r-1 cells
    NUM_PLAYERS: int = 2
    PIECES_PER_PLAYER: int = int(os.getenv("PIECES_PER_PLAYER", 4))

    # --- Orientation ---
    NULL_FACE: int = 0
    DEFAULT_FACES: tuple[int, int, int, int, int] = (1, 2, 3, 4, 0)  # left, top, right, up, down
    SIMULATED_ROLL_STEPS: int = int(os.getenv("SIMULATED_ROLL_STEPS", 30))

    # --- Simulation ---
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 500))
    SEED: int | None = _optional_int("SEED")

    def __post_init__(self):
        check_board_height(self.BOARD_HEIGHT)
        check_piece_count(self.PIECES_PER_PLAYER)
        if self.NUM_PLAYERS != 2:
            raise ValueError("NUM_PLAYERS must be 2")


config = Config()
