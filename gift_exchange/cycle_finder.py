import logging
import random
from typing import List, Mapping, Optional, Set


class CycleSearchLimitExceeded(RuntimeError):
    pass


def find_cycle(
    edge_map: Mapping[int, Set[int]],
    rng: Optional[random.Random] = None,
    max_steps: Optional[int] = None,
) -> Optional[List[int]]:
    """
    Find a cycle through every node of a directed graph, if one exists.
    This is a randomized depth-first search with an explicit stack.
    Returns None only once every ordering has been ruled out.

    :param edge_map: Map from each node to the nodes it points to
    :param rng: Source of randomness, defaults to the `random` module
    :param max_steps: Give up with CycleSearchLimitExceeded after this many iterations
    """
    if rng is None:
        rng = random  # type: ignore
    num_nodes = len(edge_map)
    if num_nodes == 0:
        return None

    start = rng.choice(sorted(edge_map))
    path = [start]
    # tried[k] holds the successors already explored from path[k]
    tried = [set()]  # type: List[Set[int]]
    on_path = {start}
    steps = 0

    while True:
        steps += 1
        if max_steps is not None and steps > max_steps:
            raise CycleSearchLimitExceeded(
                f"no result after {max_steps} steps over {num_nodes} nodes"
            )
        last = path[-1]
        if len(path) == num_nodes and start in edge_map[last]:
            logging.debug("Found cycle after %d steps", steps)
            return path
        options = [
            x for x in sorted(edge_map[last]) if x not in tried[-1] and x not in on_path
        ]
        if not options:
            if len(path) == 1:
                logging.debug("Exhausted search after %d steps", steps)
                return None
            on_path.discard(path.pop())
            tried.pop()
        else:
            nxt = rng.choice(options)
            tried[-1].add(nxt)
            path.append(nxt)
            tried.append(set())
            on_path.add(nxt)
