# cipherkit

A collection of classical and block ciphers for study and experimentation:
Caesar shifts, Vigenere and Vernam, Hill and Playfair, Diffie-Hellman key
agreement, textbook RSA, DES and AES (with the key schedule and a
round-by-round trace).

The code favours readability over speed and hardening. Do not use it to
protect real data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

Each cipher lives in its own module.

```python
from cipherkit.caesar import caesar_encrypt, caesar_decrypt
from cipherkit.vigenere import Vigenere, vernam_encrypt
from cipherkit.diffie_hellman import power_mod, exchange
from cipherkit.rsa import generate_keypair, encrypt, decrypt

hidden = caesar_encrypt("attackatdawn", 3)
assert caesar_decrypt(hidden, 3) == "attackatdawn"

cipher = Vigenere("secret")
assert cipher.decrypt(cipher.encrypt("Attack at dawn")) == "ATTACKATDAWN"

assert power_mod(7, 3, 11) == 2
alice_key, bob_key = exchange(7, 11, 3, 6)
assert alice_key == bob_key

pair = generate_keypair(3, 7)
assert decrypt(encrypt(12, pair), pair) == 12
```

Module overview:

- `cipherkit.caesar`: `caesar_encrypt` / `caesar_decrypt` shift lowercase
  letters `a`-`z` and keep every other character; `char_shift` shifts the
  code point of every character.
- `cipherkit.vigenere`: the `Vigenere` class (`encrypt`, `decrypt`) keeps
  only ASCII letters and returns upper case; `vernam_encrypt` adds a
  repeated upper-case key to an upper-case message modulo 26.
- `cipherkit.diffie_hellman`: `power_mod`, `public_key`, `shared_secret`
  and `exchange`.
- `cipherkit.rsa`: `gcd`, `public_exponent`, `generate_keypair` (returns a
  `KeyPair` with `n`, `e`, `d`), `encrypt` and `decrypt` on integers in
  `[0, n)`.
- `cipherkit.hill`: `encrypt` and `decrypt` with a nine-letter key
  (`parse_key`, `inverse_matrix_mod26`), and `encrypt_columns` for an
  integer 3x3 matrix with padding of a short last block.
- `cipherkit.playfair`: `encrypt` and `decrypt` with a keyword; `KeySquare`
  exposes the 5x5 table (`from_key`, `locate`, `encrypt_pair`,
  `decrypt_pair`); `prepare_digraphs` splits text into pairs and
  `remove_fillers` drops `x` fillers between doubled letters.
- `cipherkit.des`: `generate_round_keys`, `encrypt_block` and
  `decrypt_block` on 16-digit hexadecimal blocks and keys, plus the helpers
  `hex_to_bin`, `bin_to_hex`, `permute`, `shift_left` and `xor_bits`.
- `cipherkit.aes_key`: `expand_key` for 16-, 24- and 32-byte keys, with
  `rot_word`, `sub_word` and `hex_to_binary`.
- `cipherkit.aes`: the `AES` class with `encrypt_block` and
  `decrypt_block`, `encrypt_string` for zero-padded text, and the field
  helpers `xtime` and `gf_mul`.
- `cipherkit.aes_trace`: `trace_encrypt` and `trace_decrypt` return every
  intermediate state of an AES-128 run as `TraceStep` records.
  `trace_decrypt` takes the final (tenth) round key, not the original key.
- `cipherkit.aes_cli`: `encrypt_stream` encrypts a binary stream and yields
  `(plaintext_block, ciphertext_block)` pairs.

## Command-line tools

Each tool takes its input from its arguments or from standard input; run
any of them with `--help` for details.

| Command                | What it does                                                        |
|------------------------|---------------------------------------------------------------------|
| `cipherkit-caesar`     | Caesar shift of a message (`-k` key, default 3), encrypt and decrypt |
| `cipherkit-dh`         | Diffie-Hellman exchange (`-g`, `-n`, `-x`, `-y`), prints both keys  |
| `cipherkit-rsa`        | Textbook RSA on one number (`-p`, `-q`, `-m`)                       |
| `cipherkit-hill`       | Hill cipher; reads the text, then the key, from stdin (`-d` decrypts) |
| `cipherkit-playfair`   | Playfair with a keyword (`-d`, `--strip-fillers`, `--show-square`)  |
| `cipherkit-des`        | DES encryption and decryption of one block with a round trace       |
| `cipherkit-aes-key`    | AES key schedule for a hexadecimal key (`-k`, `--binary`)           |
| `cipherkit-aes`        | AES encryption of one line from stdin; argument 1, 2 or 3 picks the key size |
| `cipherkit-aes-trace`  | AES-128 round-by-round trace; mode 1 encrypts, 0 decrypts           |
| `cipherkit-aes-file`   | AES encryption of a file into a ciphertext file                     |

For example:

```
echo "attackatdawn" | cipherkit-caesar
cipherkit-playfair secret "hide the gold"
cipherkit-dh
cipherkit-des
cipherkit-aes-trace 1
```

`cipherkit-des --round-keys` prints only the sixteen round keys in binary.
`cipherkit-aes-file` asks for the key size, key and file names when the
options `-s`, `-k`, `-i` and `-o` are not given.

## What it does not do

- There is no command for the Vigenere and Vernam ciphers; use the library
  functions.
- AES and DES work on single blocks. `encrypt_string` and
  `cipherkit-aes-file` encrypt each block independently with zero padding;
  there are no chaining modes, no padding removal, and no command to
  decrypt a file written by `cipherkit-aes-file`.
- The Hill cipher supports 3x3 keys only.