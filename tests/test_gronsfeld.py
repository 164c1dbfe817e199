import pytest

from endecrypt import gronsfeld


def test_key_zero_is_identity():
    data = b"hello world"
    assert gronsfeld.process_data(data, "0", True) == data


def test_digits_cycle_over_data():
    assert gronsfeld.process_data(b"\x00\x00\x00", "12", True) == b"\x01\x02\x01"


def test_wraps_around_modulo_256():
    assert gronsfeld.process_data(b"\xff", "1", True) == b"\x00"
    assert gronsfeld.process_data(b"\x00", "1", False) == b"\xff"


@pytest.mark.parametrize("key", ["1", "31415", "9876543210"])
def test_round_trip_all_bytes(key):
    data = bytes(range(256))
    encrypted = gronsfeld.process_data(data, key, True)
    assert len(encrypted) == len(data)
    assert gronsfeld.process_data(encrypted, key, False) == data


def test_empty_data():
    assert gronsfeld.process_data(b"", "5", True) == b""


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        gronsfeld.process_data(b"abc", "", True)


@pytest.mark.parametrize("key", ["12a", "abc", "1 2", "٣"])
def test_non_digit_key_rejected(key):
    with pytest.raises(ValueError):
        gronsfeld.process_data(b"abc", key, True)


def test_file_round_trip(tmp_path):
    source = tmp_path / "plain.bin"
    encrypted = tmp_path / "enc.bin"
    decrypted = tmp_path / "dec.bin"
    payload = bytes(range(200)) * 3
    source.write_bytes(payload)
    gronsfeld.encrypt_file(str(source), str(encrypted), "2718")
    assert encrypted.read_bytes() == gronsfeld.process_data(payload, "2718", True)
    gronsfeld.decrypt_file(encrypted, decrypted, "2718")
    assert decrypted.read_bytes() == payload


def test_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        gronsfeld.encrypt_file(tmp_path / "missing", tmp_path / "out", "1")


def test_bad_key_writes_nothing(tmp_path):
    source = tmp_path / "plain.bin"
    source.write_bytes(b"data")
    target = tmp_path / "out.bin"
    with pytest.raises(ValueError):
        gronsfeld.encrypt_file(source, target, "x")
    assert not target.exists()