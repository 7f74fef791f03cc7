"""Interactive solver for Norwegian crosswords.

This package exposes the public API surface via:

- ``kryss.engine.board.Board``: slots, letters and the crossing index.
- ``kryss.engine.solver.solve``: places every word with a single candidate.
- ``kryss.engine.session.Session``: one solving session driven by the shell.
- ``kryss.data.dictionary.WordDictionary``: candidate words per hint.
"""

from .data.dictionary import WordDictionary
from .engine.board import Board
from .engine.session import Session, SessionConfig
from .engine.solver import SolveReport, solve

__all__ = [
    "Board",
    "Session",
    "SessionConfig",
    "SolveReport",
    "WordDictionary",
    "solve",
]

__version__ = "0.1.0"
