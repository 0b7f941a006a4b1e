import pytest

from rxnparse.core import MalformedReactionError
from rxnparse.parse import split_reaction, split_terms, split_raw, \
    split_reactions


def test_split_reaction():
    spec = split_reaction('X + Y > kk*X*Y / vol > Z', 3)
    assert spec.reactants == ('X', 'Y')
    assert spec.propensity == 'kk*X*Y/vol'
    assert spec.products == ('Z',)
    assert spec.text == 'X + Y > kk*X*Y / vol > Z'
    assert spec.position == 3


def test_empty_set():
    spec = split_reaction('@ > k*vol > X')
    assert spec.reactants == ()
    assert spec.products == ('X',)
    spec = split_reaction('X > mu*X > @')
    assert spec.products == ()


def test_empty_sides_without_symbol():
    spec = split_reaction(' > k > ')
    assert spec.reactants == ()
    assert spec.products == ()
    assert spec.propensity == 'k'


def test_repeated_species_are_kept():
    assert split_reaction('B+B > k*B*(B-1) > C').reactants == ('B', 'B')


def test_first_and_last_separator():
    # everything between the first and the last '>' is the propensity
    spec = split_reaction('X > k*(X>2) > Y')
    assert spec.propensity == 'k*(X>2)'
    assert spec.reactants == ('X',)
    assert spec.products == ('Y',)


@pytest.mark.parametrize('text', ['X = k*X = Y', 'X > k*X', '', 'X >'])
def test_malformed(text):
    with pytest.raises(MalformedReactionError) as e:
        split_reaction(text, 7)
    assert e.value.position == 7
    assert '#7' in str(e.value)


def test_not_a_string():
    with pytest.raises(MalformedReactionError):
        split_reaction(None, 1)


def test_split_terms():
    assert split_terms('X+Y+X') == ('X', 'Y', 'X')
    assert split_terms('X') == ('X',)
    assert split_terms('') == ()


def test_split_raw_keeps_text():
    assert split_raw('@ > k*vol > X') == ('@ ', ' k*vol ', ' X')


def test_split_reactions_positions():
    specs = split_reactions(['@ > k > X', 'X > mu*X > @'])
    assert [s.position for s in specs] == [1, 2]
    with pytest.raises(MalformedReactionError) as e:
        split_reactions(['@ > k > X', 'X > mu*X'])
    assert e.value.position == 2


@pytest.mark.parametrize('text', ['@ > k*$[0] > X', '@ > k*$[9] > X',
                                  'X > $ > @'])
def test_marker_delimiter_in_propensity(text):
    with pytest.raises(MalformedReactionError) as e:
        split_reaction(text, 3)
    assert e.value.position == 3
    assert "must not contain '$'" in str(e.value)
