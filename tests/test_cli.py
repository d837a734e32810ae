import pytest

from bigpoly.cli import main


def test_div(capsys):
    main(["div", "1,2,0,3", "1,1"])
    assert capsys.readouterr().out == "Quotient: [3x^2 - 3x + 5]\nRemainder: [-4]\n"


def test_mul_with_modulus(capsys):
    main(["mul", "1,1", "4,1", "-m", "5"])
    assert capsys.readouterr().out == "[x^2 + 4]\n"


def test_add_sub_gcd(capsys):
    main(["add", "1,2", "0x10,0,1"])
    main(["sub", "1,2", "1,2"])
    main(["gcd", "2,3,1", "3,4,1"])
    assert capsys.readouterr().out.splitlines() == ["[x^2 + 2x + 17]", "[0]", "[x + 1]"]


def test_eval(capsys):
    main(["eval", "1,2,0,3", "2"])
    main(["eval", "1,2,0,3", "2", "--modulus", "5"])
    assert capsys.readouterr().out.splitlines() == ["29", "4"]


def test_shares(capsys):
    main(["shares", "5", "3", "-q", str(2**61 - 1), "-s", "1"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Generating 5 shares with threshold 3")
    assert lines[1].startswith("Polynomial: [")
    assert len([line for line in lines if line.startswith("Share: (")]) == 5


def test_inexact_division_exits(capsys):
    with pytest.raises(SystemExit) as e:
        main(["div", "1,0,2", "1,3"])
    assert e.value.code == 2
    assert "not divisible" in capsys.readouterr().err


def test_non_prime_exits(capsys):
    with pytest.raises(SystemExit) as e:
        main(["shares", "5", "3", "-q", "15"])
    assert e.value.code == 2
    assert "not a prime" in capsys.readouterr().err


def test_bad_polynomial_exits():
    with pytest.raises(SystemExit):
        main(["add", "1,x", "1"])


def test_non_positive_modulus_exits(capsys):
    for value in ["0", "-5"]:
        with pytest.raises(SystemExit) as e:
            main(["add", "1,2", "3", "-m", value])
        assert e.value.code == 2
        assert "modulus must be positive" in capsys.readouterr().err
    with pytest.raises(SystemExit):
        main(["eval", "1,2", "3", "-m", "0"])
