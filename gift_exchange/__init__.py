from .codec import CodecError, decode, encode
from .cycle_finder import CycleSearchLimitExceeded, find_cycle
from .gift_exchange import Participant, assign_people, sanity_check_assignments
from .graph import get_edge_map
from .tokens import decode_token, get_decoded_assignment, get_encoded_assignment


__all__ = [
    "CodecError",
    "CycleSearchLimitExceeded",
    "Participant",
    "assign_people",
    "decode",
    "decode_token",
    "encode",
    "find_cycle",
    "get_decoded_assignment",
    "get_edge_map",
    "get_encoded_assignment",
    "sanity_check_assignments",
]
