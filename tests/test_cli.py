import re

import pytest

import toyrsa_cli
from utils.plotting import HAS_MPL

FIELD = re.compile(r"^([\w()]+)\s+= (-?\d+)$")


def _fields(text):
    found = []
    for line in text.splitlines():
        match = FIELD.match(line)
        if match:
            found.append((match.group(1), int(match.group(2))))
    return found


def test_session_prints_fields_in_order(capsys):
    code = toyrsa_cli.main(["--p", "179", "--q", "233", "--seed", "1", "--message", "12345", "--plain"])
    out = capsys.readouterr().out
    assert code == toyrsa_cli.EXIT_OK
    fields = _fields(out)
    assert [label for label, _ in fields] == ["P", "Q", "N", "Phi(N)", "e", "d", "C", "M"]
    values = dict(fields)
    assert values["N"] == 41707 and values["Phi(N)"] == 41296
    assert (values["e"] * values["d"]) % 41296 == 1
    assert values["M"] == 12345


def test_session_prompts_for_message(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "42")
    code = toyrsa_cli.main(["--seed", "5", "--distinct-primes", "--plain"])
    assert code == toyrsa_cli.EXIT_OK
    values = dict(_fields(capsys.readouterr().out))
    assert values["M"] == 42 % values["N"]


def test_malformed_message_exits_with_input_error(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt: "not a number")
    code = toyrsa_cli.main(["--seed", "5", "--plain"])
    assert code == toyrsa_cli.EXIT_BAD_INPUT
    assert "Invalid message" in capsys.readouterr().err


def test_overflow_on_16_bit_width(capsys):
    code = toyrsa_cli.main(
        ["--width", "uint16", "--p", "251", "--q", "241", "--seed", "0", "--message", "12345", "--plain"]
    )
    assert code == toyrsa_cli.EXIT_ARITHMETIC
    assert "overflows uint16" in capsys.readouterr().err


def test_wrap_flag_reproduces_silent_wraparound(capsys):
    code = toyrsa_cli.main(
        ["--width", "uint16", "--wrap", "--p", "251", "--q", "241", "--seed", "0", "--message", "12345", "--plain"]
    )
    assert code == toyrsa_cli.EXIT_OK
    assert dict(_fields(capsys.readouterr().out))["N"] == 60491


def test_key_generation_overflow(capsys):
    code = toyrsa_cli.main(["--width", "int16", "--p", "251", "--q", "251", "--message", "1", "--plain"])
    assert code == toyrsa_cli.EXIT_ARITHMETIC
    assert "Key generation failed" in capsys.readouterr().err


def test_p_requires_q():
    with pytest.raises(SystemExit) as excinfo:
        toyrsa_cli.parse_args(["--p", "179"])
    assert excinfo.value.code == 2


def test_dashboard_run(tmp_path, capsys):
    code = toyrsa_cli.main(["--run", "dashboard", "--width", "uint16", "--out", str(tmp_path), "--plain"])
    assert code == toyrsa_cli.EXIT_OK
    out = capsys.readouterr().out
    assert "product" in out
    if HAS_MPL:
        assert (tmp_path / "overflow_uint16.png").exists()


@pytest.mark.parametrize(
    "p,q",
    [("0", "0"), ("-3", "5"), ("179", "4"), ("257", "179")],
)
def test_primes_outside_table_are_rejected(p, q, capsys):
    with pytest.raises(SystemExit) as excinfo:
        toyrsa_cli.main(["--width", "int32", "--p", p, "--q", q, "--message", "4", "--plain"])
    assert excinfo.value.code == toyrsa_cli.EXIT_BAD_INPUT
    assert "must be a prime from the table" in capsys.readouterr().err


def test_session_reports_multiplication_counts(capsys):
    code = toyrsa_cli.main(["--p", "179", "--q", "233", "--seed", "1", "--message", "7", "--plain"])
    assert code == toyrsa_cli.EXIT_OK
    assert "Modular multiplications:" in capsys.readouterr().out
