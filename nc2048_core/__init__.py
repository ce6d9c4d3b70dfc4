"""
nc2048 core Python package.

This package holds the pure game logic of the 4x4 sliding-tile puzzle so the
terminal CLI and the Flask app stay thin.
Modules:
- board.py: Board, Coord, DIM
- state.py: GameState
- moves.py: Direction, push engine, move_available
- spawn.py: new_tile
- undo.py: UndoStack
- savefile.py: save_game, load_game
- session.py: Game (ties the above together, produces status messages)
- config.py: Settings from NC2048_* environment variables
- cli.py: line-oriented terminal front-end
"""
