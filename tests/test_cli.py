"""Test: command-line front end."""

import json

import pytest

from cryptokit.cli import main
from cryptokit.common.codec import encode_base64


def test_md5(capsys):
    assert main(["md5", "abc"]) == 0

    assert capsys.readouterr().out.strip() == "900150983cd24fb0d6963f7d28e17f72"


def test_sha256(capsys):
    assert main(["sha256", ""]) == 0

    out = capsys.readouterr().out.strip()
    assert out == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_random_hex(capsys):
    assert main(["random-hex", "5"]) == 0

    out = capsys.readouterr().out.strip()
    assert len(out) == 10
    int(out, 16)


def test_encode(capsys):
    assert main(["encode", '{"a": 1}']) == 0

    assert capsys.readouterr().out.strip() == "eyJhIjoxfQ=="


def test_decode(capsys):
    payload = {"a": 1, "b": [True, None], "c": "[not markup]"}

    assert main(["decode", encode_base64(payload)]) == 0

    assert json.loads(capsys.readouterr().out) == payload


def test_json_record(capsys):
    assert main(["--json", "md5", ""]) == 0

    record = json.loads(capsys.readouterr().out)
    assert record == {"command": "md5", "output": "d41d8cd98f00b204e9800998ecf8427e"}


@pytest.mark.parametrize("argv", [
    ["decode", "not-valid-base64!!"],
    ["decode", "bm90IGpzb24="],
    ["encode", "{bad json"],
    ["random-hex", "-1"],
])
def test_failures_exit_nonzero(capsys, argv):
    assert main(argv) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error" in captured.err


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
