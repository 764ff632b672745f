import pytest

from gift_exchange.alphabet import get_shuffled_alphabet, get_step_pattern
from gift_exchange.codec import CodecError, decode, encode, get_padding
from gift_exchange.tokens import INPUT_ALPHABET, OUTPUT_ALPHABET


def test_step_pattern():
    # steps for 'a', 'b', 'c' are 0, 2, 2 and come out reversed
    assert get_step_pattern("abc", INPUT_ALPHABET, OUTPUT_ALPHABET) == [2, 2, 0]


def test_shuffled_alphabet_is_permutation():
    for seed in ["abc", "xab", "Light_Yagami_q_z", "___"]:
        shuffled = get_shuffled_alphabet(seed, INPUT_ALPHABET, OUTPUT_ALPHABET)
        assert len(shuffled) == len(OUTPUT_ALPHABET)
        assert sorted(shuffled) == sorted(OUTPUT_ALPHABET)


def test_shuffled_alphabet_known_prefix():
    shuffled = get_shuffled_alphabet("abc", INPUT_ALPHABET, OUTPUT_ALPHABET)
    assert "".join(shuffled[:16]) == "acefhjkmoprtuwyz"


def test_shuffled_alphabet_deterministic():
    a1 = get_shuffled_alphabet("Misa_Amanexyz", INPUT_ALPHABET, OUTPUT_ALPHABET)
    a2 = get_shuffled_alphabet("Misa_Amanexyz", INPUT_ALPHABET, OUTPUT_ALPHABET)
    assert a1 == a2


def test_shuffled_alphabet_depends_on_seed():
    a1 = get_shuffled_alphabet("abc", INPUT_ALPHABET, OUTPUT_ALPHABET)
    a2 = get_shuffled_alphabet("abd", INPUT_ALPHABET, OUTPUT_ALPHABET)
    assert a1 != a2


def test_padding():
    # 62 * k mod 27 picks 'a', 'i', 'q'
    assert get_padding(0, 4, len(OUTPUT_ALPHABET), INPUT_ALPHABET) == "aiq"
    assert get_padding(5, 6, len(OUTPUT_ALPHABET), INPUT_ALPHABET) == ""
    assert get_padding(5, 5, len(OUTPUT_ALPHABET), INPUT_ALPHABET) == ""


def test_encode_known_value():
    # 'a' then the terminator: 0 + 27 * 28 = 756 = 12 + 12 * 62
    assert encode("a", "abc", 1, INPUT_ALPHABET, OUTPUT_ALPHABET) == "uu"
    assert decode("uu", "abc", INPUT_ALPHABET, OUTPUT_ALPHABET) == "a"


def test_encode_decode_alice():
    token = encode("alice", "xab", 10, INPUT_ALPHABET, OUTPUT_ALPHABET)
    assert token != "alice"
    assert all(c in OUTPUT_ALPHABET for c in token)
    assert decode(token, "xab", INPUT_ALPHABET, OUTPUT_ALPHABET) == "alice"


def test_decode_ignores_padding():
    short = encode("eru_roraito", "Lightqqq", 11, INPUT_ALPHABET, OUTPUT_ALPHABET)
    long = encode("eru_roraito", "Lightqqq", 40, INPUT_ALPHABET, OUTPUT_ALPHABET)
    assert len(long) > len(short)
    assert decode(short, "Lightqqq", INPUT_ALPHABET, OUTPUT_ALPHABET) == "eru_roraito"
    assert decode(long, "Lightqqq", INPUT_ALPHABET, OUTPUT_ALPHABET) == "eru_roraito"


def test_round_trip_long_payload():
    # far beyond what fits in 64 bits
    plaintext = "misa_amane___light_yagami___eru_roraito___ryuk"
    token = encode(plaintext, "Rem_abc", 120, INPUT_ALPHABET, OUTPUT_ALPHABET)
    assert decode(token, "Rem_abc", INPUT_ALPHABET, OUTPUT_ALPHABET) == plaintext


def test_round_trip_empty():
    token = encode("", "abc", 5, INPUT_ALPHABET, OUTPUT_ALPHABET)
    assert decode(token, "abc", INPUT_ALPHABET, OUTPUT_ALPHABET) == ""


def test_different_seeds_give_different_tokens():
    plaintext = "light_yagami"
    tokens = set()
    for seed in ["abc", "abd", "xyz", "q_q", "zzz", "mno"]:
        token = encode(plaintext, seed, 20, INPUT_ALPHABET, OUTPUT_ALPHABET)
        assert decode(token, seed, INPUT_ALPHABET, OUTPUT_ALPHABET) == plaintext
        tokens.add(token)
    assert len(tokens) > 1


def test_encode_rejects_unknown_characters():
    with pytest.raises(CodecError):
        encode("Alice", "abc", 10, INPUT_ALPHABET, OUTPUT_ALPHABET)
    with pytest.raises(CodecError):
        encode("r2d2", "abc", 10, INPUT_ALPHABET, OUTPUT_ALPHABET)


def test_encode_rejects_short_target():
    with pytest.raises(CodecError):
        encode("alice", "abc", 4, INPUT_ALPHABET, OUTPUT_ALPHABET)


def test_empty_seed():
    with pytest.raises(CodecError):
        encode("alice", "", 10, INPUT_ALPHABET, OUTPUT_ALPHABET)
    with pytest.raises(CodecError):
        decode("uu", "", INPUT_ALPHABET, OUTPUT_ALPHABET)


def test_decode_rejects_bad_tokens():
    with pytest.raises(CodecError):
        decode("uu!", "abc", INPUT_ALPHABET, OUTPUT_ALPHABET)
    with pytest.raises(CodecError):
        decode("", "abc", INPUT_ALPHABET, OUTPUT_ALPHABET)


def test_rejects_malformed_alphabets():
    for input_alphabet, output_alphabet in [
        ("ab", "x"),
        ("ab", ""),
        ("", OUTPUT_ALPHABET),
        ("aba", OUTPUT_ALPHABET),
        (INPUT_ALPHABET, "xyzx"),
    ]:
        with pytest.raises(CodecError):
            encode("ab", "abc", 3, input_alphabet, output_alphabet)
        with pytest.raises(CodecError):
            decode("xy", "abc", input_alphabet, output_alphabet)


def test_two_symbol_output_alphabet():
    token = encode("ab", "abc", 3, "ab", "xy")
    assert set(token) <= {"x", "y"}
    assert decode(token, "abc", "ab", "xy") == "ab"
