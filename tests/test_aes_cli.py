import io

import pytest

from cipherkit.aes import AES
from cipherkit.aes_cli import encrypt_stream, main

FIPS_KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
FIPS_PLAIN = bytes.fromhex("00112233445566778899aabbccddeeff")
FIPS_CIPHER = bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a")
TEXT_KEY = "abcdefghijklmnop"


def test_known_vector_single_block():
    pairs = list(encrypt_stream(io.BytesIO(FIPS_PLAIN), FIPS_KEY))
    assert pairs == [(FIPS_PLAIN, FIPS_CIPHER)]


def test_empty_stream_gives_one_zero_block():
    pairs = list(encrypt_stream(io.BytesIO(b""), FIPS_KEY))
    assert len(pairs) == 1
    assert pairs[0][0] == bytes(16)
    assert pairs[0][1] == AES(FIPS_KEY).encrypt_block(bytes(16))


@pytest.mark.parametrize("length, blocks", [(1, 1), (15, 1), (16, 1), (17, 2), (32, 2), (33, 3)])
def test_block_count(length, blocks):
    pairs = list(encrypt_stream(io.BytesIO(b"a" * length), TEXT_KEY))
    assert len(pairs) == blocks


def test_last_block_is_zero_padded():
    data = b"hello world, aes!!"
    pairs = list(encrypt_stream(io.BytesIO(data), TEXT_KEY))
    assert b"".join(p for p, _ in pairs) == data + bytes(32 - len(data))


@pytest.mark.parametrize("key", [TEXT_KEY, "k" * 24, "z" * 32])
def test_round_trip_all_key_sizes(key):
    data = b"The quick brown fox jumps over the lazy dog"
    cipher = AES(key.encode())
    for plain, encrypted in encrypt_stream(io.BytesIO(data), key):
        assert cipher.decrypt_block(encrypted) == plain


def test_bad_key_length_raises_immediately():
    with pytest.raises(ValueError):
        encrypt_stream(io.BytesIO(b"data"), b"short")


def test_main_writes_ciphertext_file(tmp_path, capsys):
    source = tmp_path / "plain.txt"
    target = tmp_path / "cipher.bin"
    data = b"abcdefghijklmnopqrstuvwxyz"
    source.write_bytes(data)
    code = main(["-s", "128", "-k", TEXT_KEY, "-i", str(source), "-o", str(target)])
    assert code == 0
    expected = b"".join(c for _, c in encrypt_stream(io.BytesIO(data), TEXT_KEY))
    assert target.read_bytes() == expected
    out = capsys.readouterr().out
    assert "Block 0(128 bits) - plaintext.txt(Int format) : 97 98 99" in out
    assert "Block 1(128 bits) - Cipher(Int format) : " in out
    assert "Encryption process complete !!" in out


def test_main_rejects_short_key(tmp_path):
    source = tmp_path / "plain.txt"
    source.write_bytes(b"x")
    code = main(["-s", "256", "-k", TEXT_KEY, "-i", str(source), "-o", str(tmp_path / "o")])
    assert code == 1


def test_main_missing_input_file(tmp_path, capsys):
    code = main(
        ["-s", "128", "-k", TEXT_KEY, "-i", str(tmp_path / "none"), "-o", str(tmp_path / "o")]
    )
    assert code == 1
    assert "Open file Error..." in capsys.readouterr().out


def test_main_show_key_starts_with_key_bytes(tmp_path, capsys):
    source = tmp_path / "plain.txt"
    source.write_bytes(b"x")
    code = main(
        ["-s", "128", "-k", TEXT_KEY, "-i", str(source), "-o", str(tmp_path / "o"), "--show-key"]
    )
    assert code == 0
    line = next(l for l in capsys.readouterr().out.splitlines() if l.startswith("RoundKey : "))
    values = [int(v) for v in line[len("RoundKey : "):].split()]
    assert len(values) == 176
    assert bytes(values[:16]) == TEXT_KEY.encode()


def test_main_prompts_for_missing_values(tmp_path, monkeypatch):
    source = tmp_path / "plain.txt"
    target = tmp_path / "cipher.bin"
    source.write_bytes(FIPS_PLAIN)
    answers = iter(["100", "128", TEXT_KEY, str(source), str(target)])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert target.read_bytes() == AES(TEXT_KEY.encode()).encrypt_block(FIPS_PLAIN)