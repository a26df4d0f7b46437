import pytest

from numrepr import app


def test_values(capsys):
    app.main(['3.14159', '0.00002', '-p', '2'])
    out, err = capsys.readouterr()
    assert out == "3.1\n2.0*10^(-5)\n"

def test_flags(capsys):
    app.main(['1e-5', '5', '--latex', '--show-sign', '-q'])
    out, err = capsys.readouterr()
    assert out.splitlines() == ["+10^{-5}", "+5.00"]

def test_limits(capsys):
    app.main(['1234', '--lim-sup', '5'])
    out, err = capsys.readouterr()
    assert out == "1230\n"

def test_config_file(tmp_path, capsys):
    config = tmp_path / 'format.yml'
    config.write_text("precision: 5\n")
    app.main(['3.14159', '-c', str(config)])
    app.main(['3.14159', '-c', str(config), '-p', '2'])
    out, err = capsys.readouterr()
    assert out.splitlines() == ["3.1416", "3.1"]

def test_bad_config(tmp_path):
    config = tmp_path / 'format.yml'
    config.write_text("precison: 5\n")
    with pytest.raises(SystemExit) as e:
        app.main(['1', '-c', str(config)])
    assert e.value.code == 1
    with pytest.raises(SystemExit) as e:
        app.main(['1', '-c', str(tmp_path / 'missing.yml')])
    assert e.value.code == 1

def test_flags_override_config(tmp_path, capsys):
    config = tmp_path / 'format.yml'
    config.write_text("representation: latex\nshow_sign: true\n")
    app.main(['5', '-c', str(config)])
    app.main(['5', '-c', str(config), '--plain', '--no-show-sign'])
    app.main(['1e-5', '-c', str(config), '--plain'])
    out, err = capsys.readouterr()
    assert out.splitlines() == ["+5.00", "5.00", "+10^(-5)"]

def test_exclusive_representation():
    with pytest.raises(SystemExit):
        app.main(['1', '--latex', '--plain'])
