from typing import List


def get_step_pattern(seed: str, input_alphabet: str, output_alphabet: str) -> List[int]:
    """Derive the step pattern used to walk the output alphabet.
    One step per seed character. Characters missing from `output_alphabet` count as index -1.
    """
    input_alphabet_length = len(input_alphabet)
    pattern = [0]
    for i, c in enumerate(seed):
        pattern.append(
            (input_alphabet_length + output_alphabet.find(c) - pattern[i] + i)
            % input_alphabet_length
        )
    pattern.reverse()
    # drop the initial zero, now last
    pattern.pop()
    return pattern


def get_shuffled_alphabet(
    seed: str, input_alphabet: str, output_alphabet: str
) -> List[str]:
    """Return a permutation of `output_alphabet` determined entirely by `seed`.
    The same seed and alphabets always give the same permutation.
    """
    assert len(seed) > 0, "seed must not be empty"
    assert len(input_alphabet) > 0
    alphabet = list(output_alphabet)
    assert len(set(alphabet)) == len(alphabet), "output alphabet has repeated symbols"
    pattern = get_step_pattern(seed, input_alphabet, output_alphabet)

    shuffled = []  # type: List[str]
    used = set()
    pattern_index = 0
    alphabet_index = 0
    while len(shuffled) < len(alphabet):
        c = alphabet[alphabet_index]
        if c in used:
            alphabet_index = (alphabet_index + 1) % len(alphabet)
        else:
            shuffled.append(c)
            used.add(c)
            alphabet_index = (alphabet_index + pattern[pattern_index]) % len(alphabet)
            pattern_index = (pattern_index + 1) % len(pattern)
    return shuffled
