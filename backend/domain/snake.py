"""
Snake entity as reported in a move request.
"""

from typing import Iterator, Optional, Sequence, Tuple

Position = Tuple[int, int]


class Snake:
    """
    Represents a snake on the board for a single turn.

    Attributes:
        snake_id: engine-assigned identifier
        body: tuple of (x, y) from head at index 0 to tail at the end
        length: reported length; authoritative for loop bounds
        health: 0-100
    """

    def __init__(self, snake_id: str, body: Sequence[Position], length: int, health: int = 100):
        self.snake_id = snake_id
        self.body: Tuple[Position, ...] = tuple(tuple(p) for p in body)
        self.length = length
        self.health = health

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def neck(self) -> Optional[Position]:
        """Segment directly behind the head, if the body reports one."""
        return self.body[1] if len(self.body) > 1 else None

    def solid_segments(self) -> Iterator[Position]:
        """
        Yield every segment except the tail, which vacates its cell when
        the turn resolves. The reported length bounds the walk; a body list
        shorter than the length is never indexed past its end.
        """
        stop = min(self.length - 1, len(self.body))
        for i in range(stop):
            yield self.body[i]

    def __repr__(self):
        return f"<Snake id={self.snake_id} head={self.head if self.body else None} length={self.length}>"
