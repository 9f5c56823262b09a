import pytest

from cipherkit.aes_key import (
    DEFAULT_KEY,
    SBOX,
    expand_key,
    hex_to_binary,
    main,
    rot_word,
    sub_word,
)

FIPS_KEY = bytes(
    [0x2B, 0x7E, 0x15, 0x16, 0x28, 0xAE, 0xD2, 0xA6,
     0xAB, 0xF7, 0x15, 0x88, 0x09, 0xCF, 0x4F, 0x3C]
)


def test_rot_word_moves_first_byte_last():
    assert rot_word(0x01020304) == 0x02030401


def test_rot_word_four_times_is_identity():
    word = 0x9A7B3C11
    result = word
    for _ in range(4):
        result = rot_word(result)
    assert result == word


def test_rot_word_rejects_out_of_range():
    with pytest.raises(ValueError):
        rot_word(1 << 32)


def test_sub_word_of_zero():
    assert sub_word(0) == 0x63636363


def test_sub_word_uses_sbox_per_byte():
    assert sub_word(0x000000FF) & 0xFF == SBOX[0xFF]


def test_sub_word_rejects_negative():
    with pytest.raises(ValueError):
        sub_word(-1)


def test_sub_word_is_byte_permutation():
    substituted = [sub_word(value) & 0xFF for value in range(256)]
    assert sorted(substituted) == list(range(256))


@pytest.mark.parametrize("size, count", [(16, 44), (24, 52), (32, 60)])
def test_expand_key_length(size, count):
    assert len(expand_key(bytes(range(size)))) == count


@pytest.mark.parametrize("size", [16, 24, 32])
def test_expand_key_starts_with_key_words(size):
    key = bytes(range(100, 100 + size))
    words = expand_key(key)
    nk = size // 4
    assert words[:nk] == [int.from_bytes(key[i:i + 4], "big") for i in range(0, size, 4)]


def test_expand_key_fips_vector():
    words = expand_key(FIPS_KEY)
    assert words[4] == 0xA0FAFE17
    assert words[43] == 0xB6630CA6


def test_expand_key_words_fit_in_32_bits():
    assert all(0 <= w < 1 << 32 for w in expand_key(bytes(32)))


def test_expand_key_rejects_bad_length():
    with pytest.raises(ValueError):
        expand_key(bytes(10))


def test_hex_to_binary_digits():
    assert hex_to_binary("A") == "1010"
    assert hex_to_binary("2b") == "00101011"


def test_hex_to_binary_case_insensitive():
    assert hex_to_binary("cafe") == hex_to_binary("CAFE")


def test_hex_to_binary_rejects_invalid():
    with pytest.raises(ValueError):
        hex_to_binary("12z")


def test_main_prints_schedule(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "KEY IS: 24 75 a2 b3 34 75 56 88 31 e2 12 0 13 aa 54 87"
    assert lines[1] == "w[0] = 2475a2b3"
    assert lines[-1] == f"w[43] = {expand_key(DEFAULT_KEY)[43]:x}"


def test_main_binary_option(capsys):
    assert main(["-k", FIPS_KEY.hex(), "--binary"]) == 0
    out = capsys.readouterr().out
    assert f"Equivalent Binary Value: {hex_to_binary(FIPS_KEY.hex())}" in out


def test_main_rejects_bad_key(capsys):
    assert main(["-k", "abcd"]) == 1
    assert "error" in capsys.readouterr().err