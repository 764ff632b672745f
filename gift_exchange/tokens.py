"""
Turn assignments into tokens that can be shared with each giver.
A token carries the giver's name and a 3-character seed in the clear. The recipients are obfuscated.
"""

import logging
import random
import string
import urllib.parse
from typing import Optional, Tuple

from .codec import CodecError, decode, encode

INPUT_ALPHABET = string.ascii_lowercase + "_"
OUTPUT_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
SEED_LENGTH = 3
ASSIGNMENT_SEPARATOR = "___"
TOKEN_STYLES = ("link", "short")


def get_random_seed(rng: Optional[random.Random] = None) -> str:
    if rng is None:
        rng = random  # type: ignore
    return "".join(rng.choice(INPUT_ALPHABET) for _ in range(SEED_LENGTH))


def _underscore(name: str) -> str:
    return name.replace(" ", "_")


def format_token(name: str, seed: str, payload: str, style: str = "link") -> str:
    if style == "link":
        return f"?n={urllib.parse.quote_plus(name)}&a={seed}{payload}"
    elif style == "short":
        return f"{urllib.parse.quote(name, safe='')}/{seed}{payload}"
    else:
        raise ValueError(f"unknown token style {style}")


def get_encoded_assignment(
    name: str,
    assignment: str,
    padded_length: int,
    rng: Optional[random.Random] = None,
    style: str = "link",
) -> str:
    """
    :param name: Giver's name
    :param assignment: Recipient name, or several names joined with ASSIGNMENT_SEPARATOR
    :param padded_length: Length to pad the recipient string to, so that tokens do not leak name lengths
    """
    seed = get_random_seed(rng)
    name = _underscore(name)
    assignment = _underscore(assignment).lower()
    payload = encode(assignment, name + seed, padded_length, INPUT_ALPHABET, OUTPUT_ALPHABET)
    return format_token(name, seed, payload, style)


def get_decoded_assignment(name: str, assignment: str) -> str:
    """
    :param name: Giver's name, with spaces or underscores
    :param assignment: The seed followed by the encoded payload
    :returns: Recipient name(s) in plain text, joined with ' and '
    """
    if len(assignment) < SEED_LENGTH:
        raise CodecError("assignment is too short to contain a seed")
    seed = assignment[:SEED_LENGTH]
    payload = assignment[SEED_LENGTH:]
    name = _underscore(name)
    decoded = decode(payload, name + seed, INPUT_ALPHABET, OUTPUT_ALPHABET)
    return decoded.replace(ASSIGNMENT_SEPARATOR, " and ").replace("_", " ")


def parse_token(token: str) -> Tuple[str, str]:
    """Split a token (or a link containing one) into the giver's name and the encoded assignment.
    Accepts both `?n=<name>&a=<assignment>` and `.../<name>/<assignment>`.
    """
    query = urllib.parse.parse_qs(urllib.parse.urlparse(token).query)
    if "n" in query:
        if "a" not in query:
            raise ValueError(f"link is missing a name or assignment: {token}")
        return query["n"][0], query["a"][0]
    # the short style may be the tail of a URL path
    parts = token.split("/")
    if len(parts) < 2 or not parts[-2]:
        raise ValueError(f"not a recognised token: {token}")
    return urllib.parse.unquote(parts[-2]), parts[-1]


def decode_token(token: str) -> Tuple[str, str]:
    """
    :returns: The giver's name (with spaces) and the decoded recipient(s)
    """
    name, assignment = parse_token(token)
    logging.debug("Decoding assignment for %s", name)
    return name.replace("_", " "), get_decoded_assignment(name, assignment)


def create_decryption_url(token: str, site_url: str) -> str:
    if token.startswith("?"):
        return site_url + token
    # short tokens already quote the name
    return "{site_url}/{token}".format(site_url=site_url.rstrip("/"), token=token)
