import dataclasses
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .cycle_finder import find_cycle
from .graph import get_edge_map
from .tokens import ASSIGNMENT_SEPARATOR, get_encoded_assignment


@dataclass
class Participant:
    """
    Constraints refer to other participants by their index in the same list.
    `assignment` holds recipient indices, one per round.
    """

    name: str
    excludes: List[int] = field(default_factory=list)
    requires: List[int] = field(default_factory=list)
    assignment: Optional[List[int]] = None
    encoded_assignment: Optional[str] = None


def _unassigned_copy(person: Participant) -> Participant:
    return dataclasses.replace(
        person,
        excludes=list(person.excludes),
        requires=list(person.requires),
        assignment=None,
        encoded_assignment=None,
    )


def _check_references(people: List[Participant]) -> None:
    for person in people:
        for i in person.excludes + person.requires:
            if not 0 <= i < len(people):
                raise ValueError(
                    f"{person.name} refers to participant {i}, which does not exist"
                )


def get_padded_length(people: List[Participant], assignment_cycles: int) -> int:
    """Every token pads to this length, so no token reveals how long its names are."""
    max_length_name = max(len(person.name) for person in people)
    return max_length_name * assignment_cycles + len(ASSIGNMENT_SEPARATOR) * (
        assignment_cycles - 1
    )


def assign_people(
    people: List[Participant],
    assignment_cycles: int = 1,
    random_seed: Optional[int] = None,
    token_style: str = "link",
    encode: bool = True,
    max_search_steps: Optional[int] = None,
) -> List[Participant]:
    """
    Assign people to each other, if possible.
    Each round is one cycle through everybody. Later rounds never repeat a pairing from an earlier round.
    `people` is not modified. The returned copies carry the assignments and tokens.
    If any round has no solution, every returned assignment and token is None.

    :param assignment_cycles: Number of rounds, i.e. how many people each person gives to
    :param random_seed: Random seed value for reproducibility. Otherwise completely random.
    :param encode: Whether to create the encoded tokens
    """
    if assignment_cycles < 1:
        raise ValueError("assignment_cycles must be at least 1")
    _check_references(people)
    rng = random.Random(random_seed)
    logging.debug("Assigning %d people over %d rounds", len(people), assignment_cycles)

    assigned_people = [_unassigned_copy(person) for person in people]
    excludes = {i: person.excludes for i, person in enumerate(people)}
    requires = {i: person.requires for i, person in enumerate(people)}
    previous = {i: set() for i in range(len(people))}  # type: Dict[int, Set[int]]

    for round_num in range(assignment_cycles):
        edge_map = get_edge_map(len(people), excludes, requires, previous)
        cycle = find_cycle(edge_map, rng=rng, max_steps=max_search_steps)
        if cycle is None:
            logging.warning(
                "No valid assignment exists for round %d of %d",
                round_num + 1,
                assignment_cycles,
            )
            return [_unassigned_copy(person) for person in people]

        for k, giver in enumerate(cycle):
            receiver = cycle[(k + 1) % len(cycle)]
            person = assigned_people[giver]
            if person.assignment is None:
                person.assignment = []
            person.assignment.append(receiver)
            previous[giver].add(receiver)
        logging.debug("Round %d assigned", round_num + 1)

    if encode:
        padded_length = get_padded_length(people, assignment_cycles)
        for person in assigned_people:
            assert person.assignment is not None
            combined_name = ASSIGNMENT_SEPARATOR.join(
                people[r].name for r in person.assignment
            )
            person.encoded_assignment = get_encoded_assignment(
                person.name, combined_name, padded_length, rng=rng, style=token_style
            )
    return assigned_people


def get_pairings(people: List[Participant]) -> Dict[str, List[str]]:
    """Map each giver's name to their recipients' names"""
    d = {}
    for person in people:
        assert person.assignment is not None, f"{person.name} has no assignment"
        d[person.name] = [people[r].name for r in person.assignment]
    return d


def sanity_check_assignments(people: List[Participant], assignment_cycles: int) -> None:
    """
    Throws assertion error on failure
    """
    n = len(people)
    for round_num in range(assignment_cycles):
        receivers = []
        for i, person in enumerate(people):
            assert person.assignment is not None, f"{person.name} has no assignment"
            assert (
                len(person.assignment) == assignment_cycles
            ), f"{person.name} should have {assignment_cycles} assignments"
            receiver = person.assignment[round_num]
            assert receiver != i, "Giver and receiver cannot be the same"
            if person.requires:
                assert receiver in person.requires, f"{person.name} broke a requirement"
            else:
                assert receiver not in person.excludes, f"{person.name} broke an exclusion"
            receivers.append(receiver)
        assert sorted(receivers) == list(range(n)), "Everyone should receive exactly once per round"
    for person in people:
        assert person.assignment is not None
        assert len(set(person.assignment)) == len(
            person.assignment
        ), f"{person.name} has a repeated recipient"
    logging.info("Sanity check complete! Assignments looking good!")
