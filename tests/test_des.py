import pytest

from cipherkit.des import (
    DEFAULT_KEY,
    DEFAULT_PLAINTEXT,
    bin_to_hex,
    decrypt_block,
    encrypt_block,
    generate_round_keys,
    hex_to_bin,
    main,
    permute,
    shift_left,
    xor_bits,
)


def test_hex_to_bin_digits():
    assert hex_to_bin("A") == "1010"
    assert hex_to_bin("0F") == "00001111"


def test_hex_to_bin_accepts_lowercase():
    assert hex_to_bin("abcdef") == hex_to_bin("ABCDEF")


def test_hex_to_bin_rejects_invalid():
    with pytest.raises(ValueError):
        hex_to_bin("G1")


@pytest.mark.parametrize("text", ["0123456789ABCDEF", "AABB09182736CCDD", "F"])
def test_hex_bin_round_trip(text):
    assert bin_to_hex(hex_to_bin(text)) == text


def test_bin_to_hex_rejects_bad_length():
    with pytest.raises(ValueError):
        bin_to_hex("101")


def test_permute_reverses_with_reverse_table():
    assert permute("abcd", (4, 3, 2, 1)) == "abcd"[::-1]


def test_permute_identity():
    bits = "1100101"
    assert permute(bits, range(1, len(bits) + 1)) == bits


def test_shift_left_full_rotation_is_identity():
    bits = "1011000111"
    assert shift_left(bits, len(bits)) == bits


def test_shift_left_composes():
    bits = "1000110010101"
    assert shift_left(shift_left(bits, 1), 1) == shift_left(bits, 2)


def test_xor_with_itself_is_zero():
    a = "101100"
    assert xor_bits(a, a) == "0" * len(a)


def test_xor_is_involution():
    a, b = "110010", "011011"
    assert xor_bits(xor_bits(a, b), b) == a


def test_xor_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        xor_bits("10", "101")


def test_round_keys_shape():
    keys = generate_round_keys(DEFAULT_KEY)
    assert len(keys) == 16
    assert all(len(k) == 48 and set(k) <= {"0", "1"} for k in keys)


def test_first_round_key_of_classic_key():
    keys = generate_round_keys("133457799BBCDFF1")
    assert bin_to_hex(keys[0]) == "1B02EFFC7072"


def test_round_keys_reject_short_key():
    with pytest.raises(ValueError):
        generate_round_keys("ABCD")


def test_encrypt_default_example():
    keys = generate_round_keys(DEFAULT_KEY)
    assert encrypt_block(DEFAULT_PLAINTEXT, keys) == "C0B7A8D05F3A829C"


def test_encrypt_classic_vector():
    keys = generate_round_keys("133457799BBCDFF1")
    assert encrypt_block("0123456789ABCDEF", keys) == "85E813540F0AB405"


@pytest.mark.parametrize(
    "block", [DEFAULT_PLAINTEXT, "0000000000000000", "FFFFFFFFFFFFFFFF"]
)
def test_decrypt_inverts_encrypt(block):
    keys = generate_round_keys(DEFAULT_KEY)
    assert decrypt_block(encrypt_block(block, keys), keys) == block


def test_encrypt_rejects_bad_block():
    keys = generate_round_keys(DEFAULT_KEY)
    with pytest.raises(ValueError):
        encrypt_block("1234", keys)


def test_encrypt_rejects_bad_round_keys():
    with pytest.raises(ValueError):
        encrypt_block(DEFAULT_PLAINTEXT, ["0" * 48] * 3)


def test_main_prints_cipher_and_plain(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Cipher Text: C0B7A8D05F3A829C" in out
    assert f"Plain Text: {DEFAULT_PLAINTEXT}" in out
    assert out.count("Round 16 ") == 2


def test_main_round_keys_mode(capsys):
    assert main(["--round-keys"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 16
    assert lines[0] == f"Round : 1 {generate_round_keys(DEFAULT_KEY)[0]}"


def test_main_reports_bad_key(capsys):
    assert main(["-k", "XYZ"]) == 1
    assert "error" in capsys.readouterr().err