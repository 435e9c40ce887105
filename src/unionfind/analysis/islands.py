"""Island counting on a text chart using UnionFind.

A chart is a block of text where the land marker (``.`` by default) is land
and every other character is sea. Land cells touching horizontally or
vertically belong to the same island.
"""

from unionfind.analysis.union_find import UnionFind

Cell = tuple[int, int]


def _scan(chart: str, land: str) -> UnionFind[Cell]:
    if len(land) != 1:
        raise ValueError(f"Land marker must be a single character, got {land!r}")

    lines = chart.split("\n")
    uf: UnionFind[Cell] = UnionFind()

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != land:
                continue

            uf.make_set((x, y))

            # Land to the left
            if x > 0 and line[x - 1] == land:
                uf.union((x, y), (x - 1, y))

            # Land above (rows may be ragged)
            if y > 0 and len(lines[y - 1]) > x and lines[y - 1][x] == land:
                uf.union((x, y), (x, y - 1))

    return uf


def count_islands(chart: str, land: str = ".") -> int:
    """Count the islands on a chart.

    Args:
        chart: Chart text, one row per line.
        land: Single character marking land.

    Returns:
        Number of disconnected land regions.

    Raises:
        ValueError: If land is not a single character.
    """
    return _scan(chart, land).count()


def find_islands(chart: str, land: str = ".") -> list[set[Cell]]:
    """Get the (x, y) cells of every island on a chart, largest first."""
    groups = _scan(chart, land).get_groups()
    return sorted((set(cells) for cells in groups.values()), key=len, reverse=True)
