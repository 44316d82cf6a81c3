import pytest

import tritcipher_cli
from tritcipher.encoders import encode_keyed_additive, encode_keyed_permutation, encode_static


def run(argv, capsys):
    code = tritcipher_cli.main(argv)
    return code, capsys.readouterr().out


def test_encrypt_static(capsys):
    code, out = run(["encrypt", "--text", "HI THERE"], capsys)
    assert code == 0
    assert out.strip() == encode_static("HI THERE")


def test_encrypt_keyed_modes(capsys):
    _, out = run(["encrypt", "--text", "hello", "--key", "bc"], capsys)
    assert out.strip() == encode_keyed_additive("hello", "bc")
    _, out = run(["encrypt", "--text", "hello", "--key", "key", "--mode", "permutation"], capsys)
    assert out.strip() == encode_keyed_permutation("hello", "key")


def test_encrypt_bad_key_reports_error(capsys):
    code, out = run(["encrypt", "--text", "hello", "--key", "aab", "--mode", "permutation"], capsys)
    assert code == 1
    assert out.startswith("Error:")


def test_encrypt_random_key(capsys):
    code, out = run(["encrypt", "--text", "abc", "--random-key", "5", "--mode", "permutation"], capsys)
    assert code == 0
    first, second = out.strip().split("\n")
    key = first.split(": ")[1]
    assert second == encode_keyed_permutation("abc", key)


def test_file_round_trip(tmp_path, capsys):
    src = tmp_path / "plain.txt"
    enc = tmp_path / "cipher.txt"
    dec = tmp_path / "back.txt"
    src.write_text("meet me at noon\n", encoding="utf-8")
    assert tritcipher_cli.main(["encrypt", "--in-file", str(src), "--out-file", str(enc)]) == 0
    assert tritcipher_cli.main(["decrypt", "--in-file", str(enc), "--out-file", str(dec)]) == 0
    assert dec.read_text(encoding="utf-8") == "MEET ME AT NOON\n"


def test_missing_input(capsys):
    code, out = run(["decrypt"], capsys)
    assert code == 1
    assert "--text" in out


def test_missing_file(tmp_path, capsys):
    code, out = run(["decrypt", "--in-file", str(tmp_path / "nope.txt")], capsys)
    assert code == 1


def test_decrypt_strict(capsys):
    code, out = run(["decrypt", "--text", "▲▲▲", "--strict"], capsys)
    assert code == 1
    code, out = run(["decrypt", "--text", "▲▲▲"], capsys)
    assert code == 0
    assert out.strip() == "▲▲▲"


def test_table(capsys):
    code, out = run(["table", "--key", "key"], capsys)
    assert code == 0
    assert "KEYABCDFGHIJLMNOPQRSTUVWXZ" in out
    code, out = run(["table", "--key", "kk"], capsys)
    assert code == 1


def test_freq(capsys):
    code, out = run(["freq", "--text", encode_static("aab")], capsys)
    assert code == 0
    lines = out.strip().split("\n")
    assert lines[1] == "▲▲▼: 2"
    assert lines[2] == "▲▲◆: 1"


@pytest.mark.parametrize("argv, expected", [
    (["validate", "aabb"], 0),
    (["validate", "aabb", "--mode", "permutation"], 1),
    (["validate", "a1b"], 1),
])
def test_validate(argv, expected, capsys):
    code, _ = run(argv, capsys)
    assert code == expected


def test_interactive_reprompts_until_valid(monkeypatch, capsys):
    answers = iter(["hi there", "a1", "aab", "0"])
    monkeypatch.setattr("builtins.input", lambda *a: next(answers))
    code, out = run(["interactive", "--mode", "permutation"], capsys)
    assert code == 0
    assert out.count("Key invalid. Try again.") == 2
    assert out.strip().endswith(encode_static("hi there"))


def test_interactive_keyed(monkeypatch, capsys):
    answers = iter(["aaaa", "bc"])
    monkeypatch.setattr("builtins.input", lambda *a: next(answers))
    _, out = run(["interactive"], capsys)
    assert out.strip().endswith("▲▲▲▲▼▼▲▲▲▲▼▼")


def test_random_key_zero_is_rejected(capsys):
    code, out = run(["encrypt", "--text", "abc", "--random-key", "0"], capsys)
    assert code == 1
    assert out.startswith("Error:")


def test_key_and_random_key_conflict(capsys):
    for n in ("0", "4"):
        code, out = run(["encrypt", "--text", "abc", "--key", "zz", "--random-key", n], capsys)
        assert code == 1
        assert "not both" in out


def test_interactive_input_ends_without_valid_key(monkeypatch, capsys):
    answers = iter(["hi", "a1"])

    def fake_input(*a):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    code, out = run(["interactive"], capsys)
    assert code == 1
    assert "Key invalid. Try again." in out
    assert "Error: Input ended" in out
