"""
Text rendering for the terminal driver.
All functions return strings; printing is left to the caller.
"""

from typing import Sequence

from .types import Piece, TurnResult

RULE = "-" * 50

MENU = "\n".join(
    [
        "",
        "--- Tetris Stack ---",
        "1 - Play the front piece (dequeue + automatic enqueue)",
        "2 - View queue",
        "0 - Exit",
        RULE,
    ]
)
PROMPT = "Choose an option: "


def render_queue(pieces: Sequence[Piece], capacity: int) -> str:
    """
    Render the queue front to back.

    Args:
        pieces: Occupied pieces in front-to-back order
        capacity: Queue capacity, shown next to the current size

    Returns:
        str: Multi-line listing, ``[EMPTY]`` when there are no pieces
    """
    lines = [f"\n--- Upcoming pieces (size: {len(pieces)}/{capacity}) ---"]
    if not pieces:
        lines.append("[EMPTY]")
    else:
        body = "".join(f"| {piece} " for piece in pieces)
        lines.append(f"Front -> {body} <- Back")
    lines.append(RULE)
    return "\n".join(lines)


def render_turn(result: TurnResult) -> str:
    return (
        f"Played piece: {result.played}. "
        f"New piece {result.added} added to the back of the queue."
    )
