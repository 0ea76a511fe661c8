"""Graph colouring queries."""

from __future__ import annotations

from collections.abc import Sequence


def is_bipartite(adjacency: Sequence[Sequence[int]]) -> bool:
    """Tell whether an undirected graph can be two-coloured.

    ``adjacency[i]`` lists the neighbours of node ``i``; every neighbour must
    be a valid node index.
    """
    n = len(adjacency)
    for node, neighbours in enumerate(adjacency):
        for other in neighbours:
            if not 0 <= other < n:
                raise ValueError(f"node {node} has unknown neighbour {other}")

    colour: dict[int, bool] = {}
    for start in range(n):
        if start in colour:
            continue
        colour[start] = True
        pending = [start]
        while pending:
            node = pending.pop()
            for other in adjacency[node]:
                if other not in colour:
                    colour[other] = not colour[node]
                    pending.append(other)
                elif colour[other] == colour[node]:
                    return False
    return True