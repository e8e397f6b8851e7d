"""
Stream position classification.

A position tells a formatter whether an item opens, continues or closes
the output structure. The pager classifies whole pages; the driver then
remaps each page position into one position per item.
"""

from enum import Enum
from typing import List


class Position(Enum):
    """Place of a page or item in the overall stream"""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    FIRST_AND_LAST = "first_and_last"

    @property
    def opens(self) -> bool:
        return self in (Position.FIRST, Position.FIRST_AND_LAST)

    @property
    def closes(self) -> bool:
        return self in (Position.LAST, Position.FIRST_AND_LAST)

    @classmethod
    def classify(cls, first: bool, last: bool) -> "Position":
        """Build a position from its two flags"""
        if first and last:
            return cls.FIRST_AND_LAST
        if first:
            return cls.FIRST
        if last:
            return cls.LAST
        return cls.MIDDLE


def item_positions(page_position: Position, count: int) -> List[Position]:
    """
    Remap a page position to the positions of its items.

    Only the first item of an opening page opens the stream, and only the
    last item of a closing page closes it. Everything else is MIDDLE.

    Args:
        page_position: Position of the page in the stream
        count: Number of items in the page

    Returns:
        One position per item, in page order
    """
    if count <= 0:
        return []

    positions = [Position.MIDDLE] * count
    if page_position.opens:
        positions[0] = Position.FIRST
    if page_position.closes:
        if count == 1 and page_position.opens:
            positions[0] = Position.FIRST_AND_LAST
        else:
            positions[-1] = Position.LAST
    return positions
