#!/usr/bin/env python3
"""
Quick inspector for nc2048 save files.
Prints the raw record header, the board and the score, and whether the record
passes the same validation the game applies on load.

Usage: python tools/peek_save.py [path]
"""
from __future__ import annotations

import os
import struct
import sys
from typing import List, Optional

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from game import DEFAULT_SAVE_FILE, RECORD, unpack_state  # noqa: E402


def describe(path: str) -> List[str]:
    out: List[str] = []
    size = os.path.getsize(path)
    out.append(f"File: {path} size={size} (record is {RECORD.size} bytes)")
    with open(path, "rb") as f:
        data = f.read(RECORD.size + 1)
    if len(data) >= 8:
        magic, version, dim = struct.unpack_from("<4sBB", data, 0)
        out.append(f"magic={magic!r} version={version} dim={dim}")
    try:
        state = unpack_state(data)
    except (ValueError, struct.error) as e:
        out.append(f"INVALID: {e}")
        return out
    out.append(state.board.pretty())
    out.append(f"score={state.score} max_tile={state.board.max_tile()}")
    return out


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_SAVE_FILE
    if not os.path.isfile(path):
        print(f"error: no such file: {path}")
        return 1
    lines = describe(path)
    print("\n".join(lines))
    return 0 if not lines[-1].startswith("INVALID") else 2


if __name__ == "__main__":
    sys.exit(main())
