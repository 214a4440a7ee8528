"""
Ordered store of color pairs for Color Swapper.

Pairs are kept in an id-keyed mapping plus an ordered list of ids, so
insertion order is preserved for display and processing while lookups by
id stay direct. Ids increase monotonically and are never reused within a
store's lifetime.

Classes:
    ColorPairStore: Add/remove/update pairs and query the complete ones
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from CS_Libs.ColorPairLib.color_models import Color, ColorPair

logger = logging.getLogger(__name__)


class ColorPairStore:
    """
    Container for the user's (source, target) color pairs.

    All operations are total: ids that are not present are ignored rather
    than treated as errors.

    Example:
        >>> store = ColorPairStore()
        >>> pair = store.add()
        >>> _ = store.set_source(pair.id, Color(255, 0, 0))
        >>> _ = store.set_target(pair.id, Color(0, 255, 0))
        >>> [p.id for p in store.complete_pairs()]
        [1]
    """

    def __init__(self, first_id: int = 1):
        self._pairs: Dict[int, ColorPair] = {}
        self._order: List[int] = []
        self._next_id = int(first_id)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[ColorPair]:
        for pair_id in self._order:
            yield self._pairs[pair_id]

    def __contains__(self, pair_id: object) -> bool:
        return pair_id in self._pairs

    def add(self) -> ColorPair:
        """
        Create an empty pair with the next unused id and append it.

        Returns:
            The newly created ColorPair
        """
        pair = ColorPair(id=self._next_id)
        self._next_id += 1
        self._pairs[pair.id] = pair
        self._order.append(pair.id)
        logger.debug(f"Added color pair {pair.id} ({len(self)} total)")
        return pair

    def remove(self, pair_id: int) -> bool:
        """
        Remove the pair with the given id.

        Args:
            pair_id: Id of the pair to remove

        Returns:
            True if a pair was removed, False if the id was not present
        """
        pair = self._pairs.pop(pair_id, None)
        if pair is None:
            return False

        self._order.remove(pair_id)
        logger.debug(f"Removed color pair {pair_id} ({len(self)} remaining)")
        return True

    def get(self, pair_id: int) -> Optional[ColorPair]:
        return self._pairs.get(pair_id)

    def set_source(self, pair_id: int, color: Color) -> Optional[ColorPair]:
        """Overwrite the source color of a pair; returns the pair or None if absent."""
        return self._set_field(pair_id, "source", color)

    def set_target(self, pair_id: int, color: Color) -> Optional[ColorPair]:
        """Overwrite the target color of a pair; returns the pair or None if absent."""
        return self._set_field(pair_id, "target", color)

    def _set_field(self, pair_id: int, field_name: str, color: Color) -> Optional[ColorPair]:
        pair = self._pairs.get(pair_id)
        if pair is None:
            return None

        if not isinstance(color, Color):
            raise TypeError(f"Expected Color, got {type(color)}")

        setattr(pair, field_name, color)
        logger.debug(f"Set {field_name} of pair {pair_id} to {color.describe()}")
        return pair

    def complete_pairs(self) -> Iterator[ColorPair]:
        """Yield pairs with both colors set, in insertion order."""
        return (pair for pair in self if pair.is_complete)

    def complete_colors(self) -> Tuple[List[Color], List[Color]]:
        """
        Split the complete pairs into parallel source and target lists.

        Returns:
            Tuple of (source_colors, target_colors), equal length
        """
        complete = list(self.complete_pairs())
        return [pair.source for pair in complete], [pair.target for pair in complete]

    def has_any_color(self) -> bool:
        return any(pair.source is not None or pair.target is not None for pair in self)

    def clear(self) -> None:
        """Remove every pair. Ids already handed out are not reused."""
        self._pairs.clear()
        self._order.clear()
        logger.debug("Color pair store cleared")
