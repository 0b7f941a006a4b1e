"""
Splitting of reaction strings into reactants, propensity and products.
"""

import re

from rxnparse.core import ReactionSpec, MalformedReactionError, \
    SEPARATOR, EMPTY_SET, JOIN

_WHITESPACE = re.compile(r'\s+')
#: Delimiter of the markers used while rewriting propensities
RESERVED_CHAR = '$'


def split_raw(text, position=1):
    """Split a reaction at the first and last separator.

    Returns the three segments unmodified, i.e. with the user's spacing and
    empty-set symbols intact.

    Raises
    ------
    MalformedReactionError
        Unless the reaction contains two separators at distinct positions.
    """
    if not isinstance(text, str):
        raise MalformedReactionError(repr(text), position)
    first = text.find(SEPARATOR)
    last = text.rfind(SEPARATOR)
    if first == -1 or first == last:
        raise MalformedReactionError(text, position)
    return text[:first], text[first + 1:last], text[last + 1:]


def split_terms(segment):
    """Split a reactant or product segment into species tokens.

    The empty segment (the empty set) gives an empty tuple.

    >>> split_terms('X+Y+X')
    ('X', 'Y', 'X')
    >>> split_terms('')
    ()
    """
    if not segment:
        return ()
    return tuple(segment.split(JOIN))


def _strip_side(segment):
    segment = _WHITESPACE.sub('', segment)
    return segment.replace(EMPTY_SET, '')


def split_reaction(text, position=1):
    """Split a reaction string into a :class:`~rxnparse.core.ReactionSpec`.

    Whitespace and the empty-set symbol are removed from the reactant and
    product segments, whitespace from the propensity. The propensity may not
    contain :data:`RESERVED_CHAR`.

    Parameters
    ----------
    text : str
        Reaction of the form ``'X+Y > propensity > Z'``.
    position : int
        1-based position of the reaction, used in error messages.

    Examples
    --------

    >>> spec = split_reaction('X + Y > kk*X*Y/vol > @')
    >>> spec.reactants, spec.propensity, spec.products
    (('X', 'Y'), 'kk*X*Y/vol', ())
    """
    reactants, propensity, products = split_raw(text, position)
    propensity = _WHITESPACE.sub('', propensity)
    if RESERVED_CHAR in propensity:
        raise MalformedReactionError(
            text, position, "Propensities must not contain '%s'" %
            RESERVED_CHAR)
    return ReactionSpec(reactants=split_terms(_strip_side(reactants)),
                        propensity=propensity,
                        products=split_terms(_strip_side(products)),
                        text=text,
                        position=position)


def split_reactions(reactions):
    """Split every reaction, numbering them from 1."""
    return [split_reaction(r, i) for i, r in enumerate(reactions, 1)]
