import io

import pytest

from endecrypt import gronsfeld, hill, vigenere
from endecrypt.cli import GRONSFELD, HILL, VIGENERE, CipherSpec, cipher_menu, main, parse_hex, to_hex

IDENTITY_KEY = " ".join("1" if i % 6 == 0 else "0" for i in range(25))


def run_menu(spec: CipherSpec, text: str):
    out, err = io.StringIO(), io.StringIO()
    cipher_menu(spec, io.StringIO(text), out, err)
    return out.getvalue(), err.getvalue()


def test_to_hex_is_lowercase_two_digit():
    assert to_hex(b"\x00\x0a\xff") == "000aff"


def test_parse_hex_reads_pairs():
    assert parse_hex("48656c6c6f") == b"Hello"


def test_parse_hex_ignores_trailing_odd_character():
    assert parse_hex("414") == b"A"


def test_parse_hex_rejects_garbage():
    with pytest.raises(ValueError):
        parse_hex("zz")


@pytest.mark.parametrize("data", [b"", b"\x00", bytes(range(256))])
def test_hex_round_trip(data):
    assert parse_hex(to_hex(data)) == data


def test_menu_back_does_nothing():
    out, err = run_menu(GRONSFELD, "0\n")
    assert "шифр Гронсфельда" in out
    assert "Результат" not in out
    assert err == ""


def test_text_encrypt_shows_result_and_hex():
    out, err = run_menu(GRONSFELD, "3\nabc\n123\n")
    expected = gronsfeld.process_data(b"abc", "123", True)
    assert f"HEX: {expected.hex()}" in out
    assert f"Результат: {expected.decode()}" in out
    assert err == ""


def test_text_decrypt_from_hex_round_trip():
    encrypted = vigenere.process_data("привет".encode(), "Key", True)
    out, _ = run_menu(VIGENERE, f"4\n2\n{encrypted.hex()}\nKey\n")
    assert "Результат: привет" in out


def test_text_decrypt_plain_text():
    encrypted = gronsfeld.process_data(b"hello", "42", True)
    out, _ = run_menu(GRONSFELD, f"4\n1\n{encrypted.decode()}\n42\n")
    assert "Результат: hello" in out


def test_hill_text_decrypt_round_trip():
    encrypted = hill.process_data(b"abcde", IDENTITY_KEY, True)
    out, _ = run_menu(HILL, f"4\n2\n{encrypted.hex()}\n{IDENTITY_KEY}\n")
    assert "Результат: abcde" in out


def test_invalid_key_reports_error():
    out, err = run_menu(GRONSFELD, "3\nabc\nxyz\n")
    assert "Ошибка" in err
    assert "HEX:" not in out


def test_file_round_trip(tmp_path):
    source = tmp_path / "plain.bin"
    encrypted = tmp_path / "enc.bin"
    restored = tmp_path / "dec.bin"
    source.write_bytes(b"secret data \x00\xff")

    out, err = run_menu(VIGENERE, f"1\n{source}\n{encrypted}\nabc\n")
    assert "Операция с файлом завершена." in out
    assert encrypted.read_bytes() == vigenere.process_data(source.read_bytes(), "abc", True)

    out, err = run_menu(VIGENERE, f"2\n{encrypted}\n{restored}\nabc\n")
    assert restored.read_bytes() == source.read_bytes()
    assert err == ""


def test_file_missing_input_reports_error(tmp_path):
    missing = tmp_path / "missing.bin"
    out, err = run_menu(GRONSFELD, f"1\n{missing}\n{tmp_path / 'out.bin'}\n1\n")
    assert "Ошибка при работе с файлом" in err
    assert "Операция с файлом завершена." not in out


def test_file_bad_hill_key_reports_error(tmp_path):
    source = tmp_path / "plain.bin"
    source.write_bytes(b"abc")
    _, err = run_menu(HILL, f"1\n{source}\n{tmp_path / 'out.bin'}\n1 2 3\n")
    assert "Ошибка при работе с файлом" in err


def test_main_exits_on_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "Выход из программы." in capsys.readouterr().out


def test_main_enters_cipher_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0\n0\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "шифр Хилла" in out
    assert out.count("=====EN-DEcrypt=====") == 2


def test_main_rejects_out_of_range(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n0\n"))
    assert main() == 0
    assert "введите число между 0 и 3" in capsys.readouterr().out