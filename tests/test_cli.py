import pytest

from hillcipher.cli import main, parse_key


def test_parse_key():
    assert parse_key("3 3 2 5") == [[3, 3], [2, 5]]
    assert parse_key("3,3, 2,-5") == [[3, 3], [2, -5]]


@pytest.mark.parametrize("bad", ["1 2 3", "a b c d", ""])
def test_parse_key_rejects(bad):
    with pytest.raises(ValueError):
        parse_key(bad)


def test_encrypt(capsys):
    assert main(["encrypt", "--key", "3 3 2 5", "--msg", "ba", "--no-overview"]) == 0
    assert capsys.readouterr().out.strip() == "ciphertext: ii"


def test_decrypt(capsys):
    assert main(["decrypt", "--key", "3 3 2 5", "--ct", "motfla", "--no-overview"]) == 0
    assert "plaintext : helloo" in capsys.readouterr().out


def test_overview_banner(capsys):
    main(["encrypt", "--key", "3 3 2 5", "--msg", "ba"])
    assert "Algorithm Overview" in capsys.readouterr().out


def test_inverse(capsys):
    assert main(["inverse", "--key", "3 3 2 5", "--no-overview"]) == 0
    out = capsys.readouterr().out
    assert "det = 9" in out
    assert " 15  17" in out
    assert " 20   9" in out


def test_invalid_key_reports_error(capsys):
    assert main(["encrypt", "--key", "1 2 2 4", "--msg", "ba", "--no-overview"]) == 2
    assert capsys.readouterr().err.startswith("error: invalid key")


def test_no_inverse_reports_error(capsys):
    assert main(["decrypt", "--key", "2 0 0 13", "--ct", "ab", "--no-overview"]) == 2
    assert "no inverse" in capsys.readouterr().err


def test_freq(capsys):
    assert main(["freq", "--text", "aabbb"]) == 0
    assert capsys.readouterr().out.splitlines()[0].startswith("b:")


def test_freq_plot_to_file(tmp_path):
    target = tmp_path / "chart.png"
    assert main(["freq", "--text", "motfla", "--out", str(target)]) == 0
    assert target.exists()


def test_selftest(capsys):
    assert main(["selftest", "--no-overview"]) == 0
    out = capsys.readouterr().out
    assert "recover ok: True" in out
    assert "[Selftest]" in out
