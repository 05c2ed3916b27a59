"""Source position tracking for tokens and AST nodes.

Records the line and column where a lexeme starts, enabling
position-tagged error messages and tree rendering.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Position(BaseModel):
    """Source position where a token or node starts.

    Attributes:
        line: 0-indexed line number
        column: 0-indexed column number
    """

    line: int = 0
    column: int = 0

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
