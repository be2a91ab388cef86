from __future__ import annotations

from typing import List, Sequence


def cartesian_product(cells: Sequence[Sequence[str]]) -> List[List[str]]:
    """
    All combinations picking one value from each cell, in order.

    Earlier cells vary slowest:
        [["a"], ["x", "y"]] -> [["a", "x"], ["a", "y"]]
    """
    result: List[List[str]] = [[]]
    for values in cells:
        result = [combo + [value] for combo in result for value in values]
    return result
