"""Interactive console front end for the byte ciphers."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

from endecrypt import gronsfeld, hill, vigenere
from endecrypt.console import menu_choice, print_shield

_HEX_PAIR = re.compile(r"\s*([+-]?)([0-9a-fA-F]+)")


@dataclass(frozen=True)
class CipherSpec:
    """One cipher as offered by the menu: its title, prompts and operations."""

    title: str
    key_prompt: str
    process_data: Callable[[bytes, str, bool], bytes]
    encrypt_file: Callable[[str, str, str], None]
    decrypt_file: Callable[[str, str, str], None]
    decrypt_key_prompt: str | None = None

    @property
    def text_decrypt_key_prompt(self) -> str:
        return self.decrypt_key_prompt if self.decrypt_key_prompt is not None else self.key_prompt


GRONSFELD = CipherSpec(
    title="шифр Гронсфельда",
    key_prompt="Введите числовой ключ: ",
    process_data=gronsfeld.process_data,
    encrypt_file=gronsfeld.encrypt_file,
    decrypt_file=gronsfeld.decrypt_file,
    decrypt_key_prompt="Введите ключ: ",
)

VIGENERE = CipherSpec(
    title="шифр Вижинера",
    key_prompt="Введите ключ (буквы): ",
    process_data=vigenere.process_data,
    encrypt_file=vigenere.encrypt_file,
    decrypt_file=vigenere.decrypt_file,
)

HILL = CipherSpec(
    title="шифр Хилла",
    key_prompt="Введите ключ (строка чисел): ",
    process_data=hill.process_data,
    encrypt_file=hill.encrypt_file,
    decrypt_file=hill.decrypt_file,
)

_CIPHERS = {1: GRONSFELD, 2: VIGENERE, 3: HILL}


def parse_hex(text: str) -> bytes:
    """Read text two characters at a time as hexadecimal bytes; a trailing odd character is ignored."""
    out = bytearray()
    for start in range(0, len(text) - 1, 2):
        pair = text[start:start + 2]
        match = _HEX_PAIR.match(pair)
        if match is None:
            raise ValueError(f"not a hexadecimal byte: {pair!r}")
        value = int(match.group(2), 16)
        if match.group(1) == "-":
            value = -value
        out.append(value & 0xFF)
    return bytes(out)


def to_hex(data: bytes) -> str:
    """Return data as lowercase two-digit hexadecimal."""
    return data.hex()


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    return stdin.readline().rstrip("\r\n")


def _show(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _file_operation(spec: CipherSpec, encrypt: bool, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    in_path = _ask("Введите путь к исходному файлу: ", stdin, stdout)
    out_path = _ask("Введите путь к целевому файлу: ", stdin, stdout)
    key = _ask(spec.key_prompt, stdin, stdout)
    operation = spec.encrypt_file if encrypt else spec.decrypt_file
    try:
        operation(in_path, out_path, key)
    except (OSError, ValueError) as exc:
        stderr.write(f"Ошибка при работе с файлом: {exc}\n")
        return
    stdout.write("Операция с файлом завершена.\n")


def _encrypt_text(spec: CipherSpec, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    text = _ask("Введите текст для обработки: ", stdin, stdout)
    key = _ask(spec.key_prompt, stdin, stdout)
    try:
        data = spec.process_data(text.encode("utf-8"), key, True)
    except ValueError as exc:
        stderr.write(f"Ошибка: {exc}\n")
        return
    stdout.write(f"Результат: {_show(data)}\n")
    stdout.write(f"HEX: {to_hex(data)}\n")


def _decrypt_text(spec: CipherSpec, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    stdout.write("Выберите способ ввода зашифрованного текста:\n")
    stdout.write("1. Обычный текст\n")
    stdout.write("2. HEX-строка\n")
    input_type = menu_choice(1, 2, stdin, stdout)
    if input_type == 1:
        data = _ask("Введите зашифрованный текст для обработки: ", stdin, stdout).encode("utf-8")
    else:
        text = _ask("Введите зашифрованный текст в HEX-формате: ", stdin, stdout)
        try:
            data = parse_hex(text)
        except ValueError as exc:
            stderr.write(f"Ошибка: {exc}\n")
            return
    key = _ask(spec.text_decrypt_key_prompt, stdin, stdout)
    try:
        data = spec.process_data(data, key, False)
    except ValueError as exc:
        stderr.write(f"Ошибка: {exc}\n")
        return
    stdout.write(f"Результат: {_show(data)}\n")


def cipher_menu(
    spec: CipherSpec,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Show one cipher's menu and carry out the chosen operation."""
    inp = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    out.write(f"\n>>>>{spec.title}<<<<\n")
    out.write("1. Шифрование файла\n")
    out.write("2. Дешифрование файла\n")
    out.write("3. Шифрование текста\n")
    out.write("4. Дешифрование текста\n")
    out.write("0. Назад в главное меню\n")

    choice = menu_choice(0, 4, inp, out)
    if choice == 1:
        _file_operation(spec, True, inp, out, err)
    elif choice == 2:
        _file_operation(spec, False, inp, out, err)
    elif choice == 3:
        _encrypt_text(spec, inp, out, err)
    elif choice == 4:
        _decrypt_text(spec, inp, out, err)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive encryption program; return the exit status."""
    stdin, stdout, stderr = sys.stdin, sys.stdout, sys.stderr
    print_shield(stdout)
    stdout.write("Добро пожаловать в программу шифрования и дешифрования!\n")
    try:
        while True:
            stdout.write("=====EN-DEcrypt=====\n")
            stdout.write("Способ шифрования:\n")
            stdout.write("1. Гронсфельд\n")
            stdout.write("2. Вижинер\n")
            stdout.write("3. Хилл\n")
            stdout.write("0. Выход\n")
            choice = menu_choice(0, 3, stdin, stdout)
            if choice == 0:
                stdout.write("Выход из программы.\n")
                return 0
            cipher_menu(_CIPHERS[choice], stdin, stdout, stderr)
    except EOFError:
        stdout.write("\n")
        return 0


if __name__ == "__main__":
    sys.exit(main())