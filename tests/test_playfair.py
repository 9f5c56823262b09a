from string import ascii_lowercase

import pytest

from cipherkit.playfair import (
    KeySquare,
    decrypt,
    encrypt,
    main,
    prepare_digraphs,
    remove_fillers,
)

KEY = "playfair example"
MESSAGE = "hide the gold in the tree stump"


def test_key_square_worked_example():
    square = KeySquare.from_key(KEY)
    assert square.rows == ("playf", "irexm", "bcdgh", "knoqs", "tuvwz")


@pytest.mark.parametrize("key", ["", "monarchy", "ZEBRAS and more", "jjjj"])
def test_key_square_holds_each_letter_once(key):
    square = KeySquare.from_key(key)
    flat = "".join(square.rows)
    assert len(flat) == 25
    assert set(flat) == set(ascii_lowercase) - {"j"}


def test_key_square_starts_with_key_letters():
    square = KeySquare.from_key("monarchy")
    assert "".join(square.rows).startswith("monarchy")


def test_key_square_custom_omit():
    square = KeySquare.from_key("quick", omit="q")
    flat = "".join(square.rows)
    assert "q" not in flat
    assert "j" in flat
    with pytest.raises(ValueError):
        square.locate("q")


def test_from_key_rejects_bad_omit():
    with pytest.raises(ValueError):
        KeySquare.from_key("key", omit="jj")


def test_invalid_square_rejected():
    with pytest.raises(ValueError):
        KeySquare(rows=("abcde",) * 5)


def test_locate_j_maps_to_i():
    square = KeySquare.from_key(KEY)
    assert square.locate("j") == square.locate("i")
    assert square.locate("p") == (0, 0)
    assert square.locate("Z") == (4, 4)


def test_locate_rejects_non_letter():
    with pytest.raises(ValueError):
        KeySquare.from_key(KEY).locate("1")


@pytest.mark.parametrize("pair", [("p", "y"), ("a", "c"), ("h", "i"), ("e", "e")])
def test_pair_round_trip(pair):
    square = KeySquare.from_key(KEY)
    assert square.decrypt_pair(*square.encrypt_pair(*pair)) == pair


def test_encrypt_pair_rules():
    square = KeySquare.from_key(KEY)
    # same row shifts right, wrapping round
    assert square.encrypt_pair("y", "f") == ("f", "p")
    # same column shifts down, wrapping round
    assert square.encrypt_pair("p", "t") == ("i", "p")
    # rectangle swaps columns
    assert square.encrypt_pair("h", "i") == ("b", "m")


def test_encrypt_worked_example():
    assert encrypt(MESSAGE, KEY) == "bmodzbxdnabekudmuixmmouvif"


def test_encrypt_ignores_case_and_spaces():
    assert encrypt(MESSAGE.upper(), KEY.upper()) == encrypt(MESSAGE.replace(" ", ""), KEY)


@pytest.mark.parametrize("text", ["hidethegold", "balloon", "attack at dawn", "xxoxx"])
def test_decrypt_recovers_prepared_text(text):
    prepared = "".join(a + b for a, b in prepare_digraphs(text))
    ciphertext = encrypt(text, KEY)
    assert len(ciphertext) == len(prepared)
    assert decrypt(ciphertext, KEY) == prepared


def test_decrypt_rejects_odd_length():
    with pytest.raises(ValueError):
        decrypt("abc", KEY)


@pytest.mark.parametrize("text", ["balloon", "hello", "xx", "committee", "a", "abcde"])
def test_digraph_invariants(text):
    pairs = prepare_digraphs(text)
    assert all(a != b for a, b in pairs)
    letters = [a for a, _ in pairs] + [b for _, b in pairs]
    assert all(len(ch) == 1 for ch in letters)
    # Every original letter appears, in order, among the pair letters.
    flat = iter("".join(a + b for a, b in pairs))
    assert all(ch in flat for ch in text)


def test_digraph_after_x_uses_z():
    pairs = prepare_digraphs("xx")
    assert all(b == "z" for _, b in pairs)


def test_digraphs_drop_spaces():
    assert prepare_digraphs("a b") == prepare_digraphs("ab")


def test_remove_fillers_keeps_short_text():
    assert remove_fillers("ab") == "ab"
    assert remove_fillers("") == ""


def test_main_encrypts(capsys):
    assert main([KEY, MESSAGE]) == 0
    assert capsys.readouterr().out.strip() == encrypt(MESSAGE, KEY)


def test_main_decrypts_and_strips(capsys):
    ciphertext = encrypt("balloon", KEY)
    assert main([KEY, ciphertext, "-d", "--strip-fillers"]) == 0
    assert capsys.readouterr().out.strip() == "balloon"


def test_main_reports_error(capsys):
    assert main([KEY, "abc", "-d"]) == 1
    assert "error" in capsys.readouterr().err