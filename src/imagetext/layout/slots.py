"""Line slots: declared lines with a character budget."""

from dataclasses import dataclass, field

from imagetext.errors import ConfigurationError


@dataclass
class LineSlot:
    """
    A declared line awaiting word assignment.

    Attributes:
        max_chars: Maximum number of characters allowed on this line.
        used_chars: Characters consumed so far. Only word lengths are counted,
            the joining spaces are never charged against the budget.
        words: Words assigned to this line, in input order.
        full: Set once a word was rejected. A full slot is never reconsidered.
    """

    max_chars: int
    used_chars: int = 0
    words: list[str] = field(default_factory=list)
    full: bool = False

    def __post_init__(self):
        if self.max_chars < 0:
            raise ConfigurationError(f"max_chars must be non-negative, got {self.max_chars}")

    @property
    def text(self) -> str:
        """Words joined with single spaces."""
        return " ".join(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words

    def reset(self) -> None:
        """Clear assigned words so the slot can take part in a new pass."""
        self.used_chars = 0
        self.words = []
        self.full = False

    def empty(self) -> "LineSlot":
        """Return a fresh slot with the same budget."""
        return LineSlot(max_chars=self.max_chars)


def make_slots(*max_chars: int) -> list[LineSlot]:
    """
    Build fresh slots, one per budget.

    Example:
        >>> [s.max_chars for s in make_slots(25, 30, 23)]
        [25, 30, 23]
    """
    return [LineSlot(max_chars=n) for n in max_chars]


def uniform_slots(count: int, width: int) -> list[LineSlot]:
    """Build `count` fresh slots that all allow `width` characters."""
    return make_slots(*([width] * count))
