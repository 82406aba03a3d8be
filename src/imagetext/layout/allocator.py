"""Greedy distribution of words into a fixed set of line slots."""

import logging
from typing import Sequence

from imagetext.errors import TextOverflowError
from imagetext.layout.slots import LineSlot

logger = logging.getLogger(__name__)


def split_words(text: str) -> list[str]:
    """
    Split text on single spaces.

    Consecutive spaces produce empty words, which are kept. Empty text has no words.
    """
    if text == "":
        return []
    return text.split(" ")


class LineAllocator:
    """
    Distributes words into line slots in declaration order.

    The number of lines is fixed up front. Words are never reordered or
    split, and a slot that rejects a word is marked full and skipped for
    every later word, so packing is monotonic rather than optimal.
    """

    def distribute(self, text: str, slots: Sequence[LineSlot]) -> Sequence[LineSlot]:
        """
        Assign the words of `text` to `slots`.

        Slots are mutated in place and carry state between calls. Pass fresh
        slots (or call LineSlot.reset()) for every pass.

        Args:
            text: Text to distribute.
            slots: Declared lines, top to bottom.

        Returns:
            The same slots, filled.

        Raises:
            TextOverflowError: If a word cannot be placed in any slot.
        """
        for word in split_words(text):
            if not self._place(word, slots):
                # Every slot is full now, so no later word could be placed either
                logger.debug(f"No line can take {word!r}; {len(slots)} line(s) full")
                raise TextOverflowError(
                    f"Text is too long for available lines ({len(slots)} line(s))", word=word
                )

        logger.debug(f"Distributed text into {sum(1 for s in slots if s.words)}/{len(slots)} line(s)")
        return slots

    @staticmethod
    def _place(word: str, slots: Sequence[LineSlot]) -> bool:
        for slot in slots:
            if slot.full:
                continue

            candidate = len(word) + slot.used_chars
            if candidate <= slot.max_chars:
                slot.words.append(word)
                slot.used_chars = candidate
                return True

            slot.full = True

        return False


def distribute(text: str, slots: Sequence[LineSlot]) -> Sequence[LineSlot]:
    """Shortcut for LineAllocator().distribute()."""
    return LineAllocator().distribute(text, slots)
