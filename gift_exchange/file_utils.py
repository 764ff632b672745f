import json
import logging
import os
import sys
from typing import Dict, List

from .gift_exchange import Participant


def read_participants_json(fname: str) -> List[Participant]:
    """Read participants and their constraints from the given JSON file.

    The file holds `names`, either a list of names or a mapping from name to
    `{"excludes": [...], "requires": [...]}`, and optionally `constraints` with
    `always` and `never` lists of `[giver, receiver]` pairs.
    `always` adds to requires, `never` adds to excludes.
    :returns: Participants in file order, with constraints resolved to indices
    """
    assert fname.endswith(".json"), "Must read from JSON"
    try:
        with open(fname) as fp:
            contents = json.load(fp)
    except FileNotFoundError:
        logging.critical("Failed to read people from file %s", fname)
        sys.exit(1)

    assert isinstance(contents, dict)
    names = contents["names"]
    if isinstance(names, list):
        assert len(set(names)) == len(names), "Participant names must be unique"
        names = {name: {} for name in names}
    assert isinstance(names, dict)

    index = {}  # type: Dict[str, int]
    for name in names:
        assert isinstance(name, str)
        assert name not in index, f"Participant names must be unique: {name}"
        index[name] = len(index)

    def resolve(name: str) -> int:
        assert name in index, f"Unknown participant in constraint: {name}"
        return index[name]

    people = []  # type: List[Participant]
    for name, p_obj in names.items():
        assert isinstance(p_obj, dict)
        people.append(
            Participant(
                name=name,
                excludes=[resolve(n) for n in p_obj.get("excludes", [])],
                requires=[resolve(n) for n in p_obj.get("requires", [])],
            )
        )

    constraints = contents.get("constraints", {})
    assert isinstance(constraints, dict)
    for t, field in [("always", "requires"), ("never", "excludes")]:
        for pair in constraints.get(t, []):
            assert (
                len(pair) == 2
            ), f"{t} constraint must be expressed as a list of lists with each element having 2 items"
            giver_name, receiver_name = pair
            logging.debug("Adding a %s constraint from %s -> %s", t, giver_name, receiver_name)
            getattr(people[resolve(giver_name)], field).append(resolve(receiver_name))

    logging.debug("Read %d participants from %s", len(people), fname)
    return people


def save_encoded_assignments(people: List[Participant], output_dir: str) -> str:
    """Save each giver's token (without the receiver names).
    :returns: The path written to
    """
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
    d = {}
    for person in people:
        assert person.encoded_assignment is not None, f"{person.name} has no token"
        d[person.name] = person.encoded_assignment
    fname = os.path.join(output_dir, "encoded_assignments.json")
    with open(fname, "w") as fp:
        json.dump(d, fp, sort_keys=True, indent=4)
    logging.debug("Saved encoded assignments in file %s", fname)
    return fname


def save_unencoded_assignments(pairings: Dict[str, List[str]], output_dir: str) -> str:
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)
    fname = os.path.join(output_dir, "unencoded_assignments.json")
    with open(fname, "w") as fp:
        json.dump(pairings, fp, sort_keys=True, indent=4)
    logging.debug("Saved unencoded assignments to disk")
    return fname
