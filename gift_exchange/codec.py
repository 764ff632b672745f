"""
Reversible obfuscation of short strings.

The plaintext is written as the digits of a large integer in base len(input_alphabet) + 1,
followed by a terminator digit and some padding. That integer is then rewritten
in base len(output_alphabet) using a seed-shuffled output alphabet.
This is obfuscation, not encryption.
"""

from typing import List

from .alphabet import get_shuffled_alphabet


class CodecError(ValueError):
    pass


def _check_seed(seed: str) -> None:
    if not seed:
        raise CodecError("seed must not be empty")


def _check_alphabets(input_alphabet: str, output_alphabet: str) -> None:
    if not input_alphabet:
        raise CodecError("input alphabet must not be empty")
    if len(output_alphabet) < 2:
        raise CodecError("output alphabet needs at least 2 symbols")
    for name, alphabet in [("input", input_alphabet), ("output", output_alphabet)]:
        if len(set(alphabet)) != len(alphabet):
            raise CodecError(f"{name} alphabet has repeated symbols")


def get_padding(
    plaintext_length: int, target_length: int, shuffled_length: int, input_alphabet: str
) -> str:
    padding = ""
    while len(padding) + plaintext_length + 1 < target_length:
        padding += input_alphabet[shuffled_length * len(padding) % len(input_alphabet)]
    return padding


def encode(
    plaintext: str,
    seed: str,
    target_length: int,
    input_alphabet: str,
    output_alphabet: str,
) -> str:
    """
    :param target_length: Number of digits to pad up to, terminator included.
        Must be at least len(plaintext)
    :raises CodecError: if the input cannot be encoded without loss
    """
    _check_seed(seed)
    _check_alphabets(input_alphabet, output_alphabet)
    for c in plaintext:
        if c not in input_alphabet:
            raise CodecError(f"character {c!r} is not in the input alphabet")
    if target_length < len(plaintext):
        raise CodecError(
            f"target length {target_length} is shorter than the plaintext ({len(plaintext)})"
        )

    shuffled = get_shuffled_alphabet(seed, input_alphabet, output_alphabet)
    padding = get_padding(len(plaintext), target_length, len(shuffled), input_alphabet)

    base = len(input_alphabet) + 1
    terminator = len(input_alphabet)
    digits = [input_alphabet.index(c) for c in plaintext]
    digits.append(terminator)
    digits.extend(input_alphabet.index(c) for c in padding)

    # least significant digit first
    n = 0
    for d in reversed(digits):
        n = n * base + d

    output = []  # type: List[str]
    while n > 0:
        n, r = divmod(n, len(shuffled))
        output.append(shuffled[r])
    return "".join(output)


def decode(token: str, seed: str, input_alphabet: str, output_alphabet: str) -> str:
    """Inverse of `encode`. Padding after the terminator is discarded.
    :raises CodecError: if the token is not a valid encoding for this seed
    """
    _check_seed(seed)
    _check_alphabets(input_alphabet, output_alphabet)
    shuffled = get_shuffled_alphabet(seed, input_alphabet, output_alphabet)
    positions = {c: i for i, c in enumerate(shuffled)}

    n = 0
    for c in reversed(token):
        if c not in positions:
            raise CodecError(f"character {c!r} is not in the output alphabet")
        n = n * len(shuffled) + positions[c]

    base = len(input_alphabet) + 1
    terminator = len(input_alphabet)
    output = []  # type: List[str]
    while n > 0:
        n, d = divmod(n, base)
        if d == terminator:
            return "".join(output)
        output.append(input_alphabet[d])
    raise CodecError("token has no terminator")
