from typing import Dict, Iterable, Mapping, Optional, Set


def get_edge_map(
    num_nodes: int,
    excludes: Mapping[int, Iterable[int]],
    requires: Mapping[int, Iterable[int]],
    previous: Optional[Mapping[int, Iterable[int]]] = None,
) -> Dict[int, Set[int]]:
    """
    Map each node to the nodes it may give to.
    A non-empty `requires` entry replaces the default (everyone but yourself) and ignores `excludes`.
    :param previous: Recipients each node already has from earlier rounds. These are never allowed again
    """
    if previous is None:
        previous = {}
    edge_map = {}  # type: Dict[int, Set[int]]
    for i in range(num_nodes):
        required = set(requires.get(i, []))
        if required:
            options = required
        else:
            options = set(range(num_nodes)) - set(excludes.get(i, []))
        options.discard(i)
        options -= set(previous.get(i, []))
        edge_map[i] = options
    return edge_map
