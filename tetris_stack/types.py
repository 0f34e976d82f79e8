from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class PieceType(str, Enum):
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    T = "T"
    L = "L"
    J = "J"
    S = "S"
    Z = "Z"

    @classmethod
    def parse(cls, value: "PieceType | str") -> "PieceType":
        """Coerce a symbol into a PieceType.

        Raises:
            ValueError: If the symbol is not one of the seven piece types.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            available = [member.value for member in cls]
            raise ValueError(
                f"Unknown piece type '{value}'. Available: {available}"
            ) from None


PIECE_TYPES: tuple[PieceType, ...] = tuple(PieceType)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable queue token: a sequential id and a piece type."""

    id: int
    type: PieceType

    def to_dict(self) -> Dict[str, object]:
        return {"id": self.id, "type": self.type.value}

    def __str__(self) -> str:
        return f"{self.type.value} (ID:{self.id})"


@dataclass(frozen=True, slots=True)
class TurnResult:
    played: Piece
    added: Piece
