"""Connected component detection over element pairs using UnionFind."""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
import logging

import pandas as pd

from unionfind.analysis.union_find import UnionFind
from unionfind.error import EdgeListError

logger = logging.getLogger(__name__)


@dataclass
class Component:
    """A connected group of elements."""

    component_id: Hashable  # Root element
    members: list[Hashable]

    @property
    def size(self) -> int:
        """Number of members in the component."""
        return len(self.members)

    @property
    def is_singleton(self) -> bool:
        """True if the component has a single member."""
        return self.size == 1


def _sorted_if_possible(members: list[Hashable]) -> list[Hashable]:
    try:
        return sorted(members)
    except TypeError:
        # Mixed, unorderable element types keep registration order
        return list(members)


class ComponentDetector:
    """Detects connected components from a table of element pairs."""

    def __init__(
        self,
        first_col: str = "element_1",
        second_col: str = "element_2",
        weight_col: str | None = None,
        min_weight: float | None = None,
    ) -> None:
        """
        Initialize with the pair table layout and an optional weight filter.

        Args:
            first_col: Column holding the first element of a pair
            second_col: Column holding the second element of a pair
            weight_col: Column holding a pair weight, used with min_weight
            min_weight: Pairs weighing less than this, or with no weight, are
                not linked; their elements still appear as components
        """
        self.first_col = first_col
        self.second_col = second_col
        self.weight_col = weight_col
        self.min_weight = min_weight

    def detect(
        self, pairs: pd.DataFrame, elements: Iterable[Hashable] | None = None
    ) -> dict[Hashable, Component]:
        """
        Detect connected components.

        Args:
            pairs: DataFrame of linked pairs. Missing named columns fall back to the
                first remaining columns, never picking one column twice.
            elements: Extra elements to include even if they appear in no pair

        Returns:
            Dictionary mapping component_id -> Component

        Raises:
            EdgeListError: If pairs has fewer than two columns
        """
        uf: UnionFind[Hashable] = UnionFind()
        if elements is not None:
            uf.make_set(*elements)

        first_col, second_col = self._resolve_columns(pairs)
        use_weight = (
            self.min_weight is not None
            and self.weight_col is not None
            and self.weight_col in pairs.columns
        )

        weights = pairs[self.weight_col].tolist() if use_weight else [None] * len(pairs)

        skipped = 0
        for first, second, weight in zip(
            pairs[first_col].tolist(), pairs[second_col].tolist(), weights
        ):
            if pd.isna(first) or pd.isna(second):
                skipped += 1
                continue

            if use_weight and (pd.isna(weight) or weight < self.min_weight):
                uf.make_set(first, second)
                continue

            uf.union(first, second)

        if skipped:
            logger.debug(f"Skipped {skipped} pairs with missing elements")

        result: dict[Hashable, Component] = {}
        for root, members in uf.get_groups().items():
            result[root] = Component(component_id=root, members=_sorted_if_possible(members))

        logger.debug(f"Detected {uf.count()} components over {uf.size()} elements")
        return result

    def _resolve_columns(self, pairs: pd.DataFrame) -> tuple[Hashable, Hashable]:
        """Pick two distinct pair columns, preferring the configured names."""
        columns = list(pairs.columns)
        if len(columns) < 2:
            raise EdgeListError(f"Pair list needs two element columns, got {len(columns)}")

        if self.first_col in columns:
            first_col = self.first_col
        else:
            first_col = next(col for col in columns if col != self.second_col)

        if self.second_col in columns and self.second_col != first_col:
            second_col = self.second_col
        else:
            second_col = next(col for col in columns if col != first_col)

        return first_col, second_col


def components_to_frame(components: dict[Hashable, Component]) -> pd.DataFrame:
    """Flatten components into one row per element.

    Returns:
        DataFrame with columns element, component_id, component_size
    """
    rows = [
        {
            "element": member,
            "component_id": component.component_id,
            "component_size": component.size,
        }
        for component in components.values()
        for member in component.members
    ]
    return pd.DataFrame(rows, columns=["element", "component_id", "component_size"])
