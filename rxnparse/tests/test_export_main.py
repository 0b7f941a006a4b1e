import os

import pytest

from rxnparse.export.__main__ import main, load_network
from rxnparse.export.urdme import OVERWRITE_MARKER
from rxnparse.io import OverwriteRefusedWarning

EXAMPLES = os.path.join(os.path.dirname(__file__), '..', 'examples')
BIRTH_DEATH = os.path.join(EXAMPLES, 'birth_death.py')


def test_usage(capsys):
    assert main(['rxnparse.export']) == 1
    assert 'Command-line usage' in capsys.readouterr().out


def test_export_urdme(capsys):
    assert main(['rxnparse.export', BIRTH_DEATH, 'urdme']) == 0
    out = capsys.readouterr().out
    assert out.startswith(OVERWRITE_MARKER)
    assert 'mu*xstate[X]' in out
    assert 'Linear birth-death process' in out


def test_default_format_and_timestamp(capsys):
    assert main(['rxnparse.export', BIRTH_DEATH, '-t', 'today']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == OVERWRITE_MARKER
    assert lines[1] == '/* Generated by rxnparse today */'


def test_export_latex(capsys):
    path = os.path.join(EXAMPLES, 'two_species.py')
    assert main(['rxnparse.export', path, 'latex']) == 0
    assert '\\xrightarrow{ kk*X*Y/vol }' in capsys.readouterr().out


def test_output_file(tmp_path, capsys):
    filename = str(tmp_path / 'birth_death.c')
    assert main(['rxnparse.export', BIRTH_DEATH, '-o', filename,
                 '--timestamp', 'today']) == 0
    assert capsys.readouterr().out == ''
    with open(filename) as f:
        assert f.readline().rstrip('\n') == OVERWRITE_MARKER
        assert f.readline() == '/* Generated by rxnparse today */\n'


def test_output_file_not_overwritten(tmp_path):
    path = tmp_path / 'birth_death.c'
    path.write_text('/* my own propensities */\n')
    with pytest.warns(OverwriteRefusedWarning):
        assert main(['rxnparse.export', BIRTH_DEATH, '-o', str(path)]) == 1
    assert path.read_text() == '/* my own propensities */\n'


def test_output_requires_urdme(tmp_path):
    with pytest.raises(SystemExit) as e:
        main(['rxnparse.export', BIRTH_DEATH, 'latex', '-o',
              str(tmp_path / 'out.tex')])
    assert e.value.code == 2


def test_bad_format(capsys):
    with pytest.raises(SystemExit) as e:
        main(['rxnparse.export', BIRTH_DEATH, 'sbml'])
    assert e.value.code == 2
    assert 'urdme' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(['rxnparse.export', str(tmp_path / 'nope.py'), 'urdme'])
    assert "doesn't exist" in capsys.readouterr().err


def test_not_a_network_file(tmp_path, capsys):
    path = tmp_path / 'not_a_network.py'
    path.write_text('value = 1\n')
    with pytest.raises(SystemExit):
        main(['rxnparse.export', str(path), 'urdme'])
    assert "isn't a network file" in capsys.readouterr().err


def test_invalid_network(tmp_path, capsys):
    path = tmp_path / 'broken_network.py'
    path.write_text("from rxnparse import ReactionNetwork\n"
                    "network = ReactionNetwork(['X > k*X > Y'], ['X'], "
                    "['k', 1])\n")
    assert main(['rxnparse.export', str(path)]) == 1
    assert "Unknown species 'Y' in reaction #1" in capsys.readouterr().err


def test_load_network():
    network, docstring = load_network(BIRTH_DEATH)
    assert network.name == 'birth_death'
    assert docstring.startswith('Linear birth-death process')
    with pytest.raises(ValueError):
        load_network(os.path.join(EXAMPLES, '__init__.pyc'))
