# endecrypt

A small console program and library for three classical ciphers. All three
work on raw bytes, and every value is taken modulo 256:

- **Gronsfeld** (`endecrypt.gronsfeld`): the key is a string of digits. Each
  digit is the shift for one byte, and the key repeats over the data.
- **Vigenère** (`endecrypt.vigenere`): the key is a string of ASCII letters.
  Each letter is the shift for one byte, and the key repeats over the data.
  Letters are case-insensitive, so `A`/`a` = 0, `B`/`b` = 1, and so on.
- **Hill** (`endecrypt.hill`): the key holds 25 whitespace-separated integers.
  The first 25 integers form a 5×5 matrix, row by row. The data is padded with
  zero bytes to a multiple of 5, and each 5-byte block is multiplied by the
  matrix. Decryption uses the inverse of the matrix modulo 256, so that inverse
  must exist. The padding bytes stay in the decrypted output.

## Installation

```
pip install .
```

## Interactive use

```
endecrypt
```

The program prints a banner, then a main menu where you pick a cipher:
`1` Gronsfeld, `2` Vigenère, `3` Hill, or `0` to quit. Each cipher's menu
offers:

1. Encrypt a file. You enter a source path, a target path and a key.
2. Decrypt a file, with the same prompts.
3. Encrypt text. The result is printed as UTF-8 text, with undecodable bytes
   replaced, and also as a lowercase hex string.
4. Decrypt text. You choose whether to enter the ciphertext as plain text or
   as a hex string.

Entering `0` in a cipher menu returns to the main menu. If a menu entry is not
a number in range, the program asks again. A bad key or an unreadable file
causes an error message, and then the program returns to the main menu. The
program exits when input ends. All prompts are in Russian.

## Library use

Each cipher module provides the same three functions:

- `process_data(data, key, encrypt)` returns the transformed bytes.
- `encrypt_file(input_path, output_path, key)` reads one file and writes the
  encrypted bytes to another.
- `decrypt_file(input_path, output_path, key)` does the same in reverse.

An invalid key raises `ValueError`. The file functions also let `OSError`
propagate.

```python
from endecrypt import gronsfeld, hill, vigenere

ciphertext = gronsfeld.process_data(b"hello", "314", True)
assert gronsfeld.process_data(ciphertext, "314", False) == b"hello"

vigenere.encrypt_file("plain.bin", "cipher.bin", "secret")
vigenere.decrypt_file("cipher.bin", "restored.bin", "secret")

identity = " ".join(["1 0 0 0 0", "0 1 0 0 0", "0 0 1 0 0", "0 0 0 1 0", "0 0 0 0 1"])
hill.encrypt_file("plain.bin", "cipher.bin", identity)
```

The `hill` module also provides its matrix helpers:

- `parse_key(key)` returns a 5×5 list of lists.
- `determinant(matrix)` returns the determinant modulo 256.
- `inverse_matrix(matrix)` inverts the matrix modulo 256 and raises
  `ValueError` if it cannot.
- `mod_inv(a, m)` returns the modular inverse.

The console helpers are in `endecrypt.console`:

- `print_shield(stdout)` prints the banner.
- `menu_choice(low, high, stdin, stdout)` prompts until it reads a number in
  range, and raises `EOFError` when input ends.

The interactive front end is in `endecrypt.cli`:

- `main()` runs the program.
- `cipher_menu(spec, stdin, stdout, stderr)` runs a single cipher menu. The
  `CipherSpec` objects it takes are `GRONSFELD`, `VIGENERE` and `HILL`.
- `parse_hex(text)` and `to_hex(data)` convert between bytes and hex strings.

## Running the tests

```
pip install .[test]
pytest
```