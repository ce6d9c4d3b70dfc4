from __future__ import annotations

import logging
import os
import struct
import tempfile

from .board import DIM, Board
from .state import GameState

logger = logging.getLogger(__name__)

# One fixed-size little-endian record:
# magic(4s), version(u8), dim(u8), pad(2), tiles(DIM*DIM x u32, row-major), score(u64)
SAVE_MAGIC = b'N48S'
SAVE_VERSION = 1
RECORD = struct.Struct(f"<4sBB2x{DIM * DIM}IQ")
# mkstemp creates 0600 files; saves get the mode a plain open() would give
SAVE_FILE_MODE = 0o666


class SaveFileError(OSError):
    """A save file could not be written, read or understood."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.args[0]}: {self.path}"


def _ensure_parent_dir(path: str) -> None:
    """Ensures the directory for the save file exists before writing."""
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def _current_umask() -> int:
    # os.umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask


def pack_state(state: GameState) -> bytes:
    if not state.board.is_valid():
        raise ValueError('Board holds a tile that is not a power of two')
    if state.score < 0:
        raise ValueError('Score must be non-negative')
    return RECORD.pack(SAVE_MAGIC, SAVE_VERSION, DIM, *state.board.grid, state.score)


def unpack_state(data: bytes) -> GameState:
    """Decodes one record into a fresh GameState, validating every field."""
    if len(data) != RECORD.size:
        raise ValueError(f"Expected {RECORD.size} bytes, got {len(data)}")
    magic, version, dim, *rest = RECORD.unpack(data)
    if magic != SAVE_MAGIC:
        raise ValueError('Not an nc2048 save file')
    if version != SAVE_VERSION:
        raise ValueError(f"Unsupported save version {version}")
    if dim != DIM:
        raise ValueError(f"Save is for a {dim}x{dim} board")
    tiles, score = rest[:-1], rest[-1]
    board = Board(grid=list(tiles))
    if not board.is_valid():
        raise ValueError('Save holds a tile that is not a power of two')
    return GameState(board=board, score=int(score))


def save_game(state: GameState, path: str) -> None:
    """
    Writes the board and score to path. The record goes to a temporary file in
    the same directory which then replaces path, so a failed save never leaves a
    half-written file behind. Raises SaveFileError on failure.
    """
    try:
        data = pack_state(state)
    except (ValueError, struct.error) as e:
        raise SaveFileError(f"Cannot encode game state ({e})", path) from e

    tmp_path = None
    try:
        _ensure_parent_dir(path)
        fd, tmp_path = tempfile.mkstemp(prefix='.nc2048-', suffix='.tmp', dir=os.path.dirname(path) or '.')
        with os.fdopen(fd, 'wb') as f:
            os.chmod(tmp_path, SAVE_FILE_MODE & ~_current_umask())
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as e:
        raise SaveFileError(f"Cannot write save file ({e.strerror or e})", path) from e
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
    logger.debug("saved score=%d to %s", state.score, path)


def load_game(path: str) -> GameState:
    """Reads and validates a save file, returning a new GameState. Raises SaveFileError on failure."""
    try:
        with open(path, 'rb') as f:
            data = f.read(RECORD.size + 1)
    except OSError as e:
        raise SaveFileError(f"Cannot read save file ({e.strerror or e})", path) from e
    try:
        state = unpack_state(data)
    except (ValueError, struct.error) as e:
        raise SaveFileError(f"Corrupt save file ({e})", path) from e
    logger.debug("loaded score=%d from %s", state.score, path)
    return state
