import os
import warnings

import pytest

from rxnparse import rparse
from rxnparse.io import write_generated, is_generated, \
    OverwriteRefusedWarning
from rxnparse.export.urdme import OVERWRITE_MARKER

BIRTH_DEATH = (['@ > k*vol > X', 'X > mu*X > @'], ['X'],
               ['k', 1, 'mu', 1e-3])


def test_write_new_file(tmp_path):
    filename = str(tmp_path / 'birth_death.c')
    result = rparse(*BIRTH_DEATH, filename=filename, timestamp='t')
    assert result.written
    with open(filename) as f:
        assert f.read() == result.code
    assert is_generated(filename)


def test_overwrite_generated_file(tmp_path):
    filename = str(tmp_path / 'birth_death.c')
    rparse(*BIRTH_DEATH, filename=filename, timestamp='first')
    result = rparse(*BIRTH_DEATH, filename=filename, timestamp='second')
    assert result.written
    with open(filename) as f:
        assert 'second' in f.read()


def test_refuse_to_overwrite_modified_file(tmp_path):
    filename = str(tmp_path / 'birth_death.c')
    with open(filename, 'w') as f:
        f.write('/* hand-written propensities */\n')
    with pytest.warns(OverwriteRefusedWarning):
        result = rparse(*BIRTH_DEATH, filename=filename, timestamp='t')
    # compilation output is still returned
    assert not result.written
    assert result.code.startswith(OVERWRITE_MARKER)
    assert result.N.shape == (1, 2)
    with open(filename) as f:
        assert f.read() == '/* hand-written propensities */\n'


def test_empty_existing_file_is_not_overwritten(tmp_path):
    filename = str(tmp_path / 'empty.c')
    open(filename, 'w').close()
    with pytest.warns(OverwriteRefusedWarning):
        assert not write_generated(filename, 'text')
    assert os.path.getsize(filename) == 0


def test_no_file_without_filename(tmp_path):
    result = rparse(*BIRTH_DEATH, timestamp='t')
    assert not result.written
    assert os.listdir(str(tmp_path)) == []


def test_no_warning_when_writing(tmp_path):
    filename = str(tmp_path / 'out.c')
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert write_generated(filename, OVERWRITE_MARKER + '\n')
        assert write_generated(filename, OVERWRITE_MARKER + '\nagain\n')
