"""
Core data types and input validation for reaction network compilation.

A reaction network is described by three ordered inputs:

* a list of reaction strings of the form ``'X+Y > mu*X*Y > Z'``, where the
  left (right) side lists the reactants (products) joined by ``+`` and the
  propensity is written between the two ``>`` signs. The symbol ``@``
  denotes the empty set, e.g. ``'@ > k*vol > X'``;
* a list of species names, e.g. ``['X', 'Y', 'Z']``;
* the rate constants as name/value pairs, given either as a mapping, a list
  of ``(name, value)`` tuples or a flat property/value list such as
  ``['k', 1, 'mu', 0.5e-7]``.

Names of species and rate constants must be unique, disjoint from each other
and from :data:`RESERVED_NAMES` (the arguments of the generated propensity
functions), and must be valid C identifiers.
"""

import collections
import collections.abc
import math
import numbers
import re

__all__ = ['ReactionNetwork', 'Species', 'RateConstant', 'ReactionSpec',
           'RESERVED_NAMES', 'EMPTY_SET', 'SEPARATOR', 'JOIN', 'validate',
           'RxnParseError', 'InvalidSpeciesError', 'InvalidRateError',
           'DuplicateNameError', 'NameClashError', 'ReservedNameError',
           'InvalidNameError', 'MalformedReactionError',
           'UnknownSpeciesError']

#: Arguments of every generated propensity function; not usable as names.
RESERVED_NAMES = ('xstate', 'time', 'vol', 'ldata', 'gdata', 'sd')
#: Symbol denoting the empty set of reactants or products.
EMPTY_SET = '@'
#: Separator between reactants, propensity and products.
SEPARATOR = '>'
#: Separator between the species of a reactant or product list.
JOIN = '+'

_VARIABLE_NAME_REGEX = re.compile(r'[_a-z][_a-z0-9]*\Z', re.IGNORECASE)


Species = collections.namedtuple('Species', 'name index')
Species.__doc__ = """A species, indexed (from zero) by its input position."""

RateConstant = collections.namedtuple('RateConstant', 'name value')
RateConstant.__doc__ = """A named rate constant with its numeric value."""

ReactionSpec = collections.namedtuple(
    'ReactionSpec', 'reactants propensity products text position')
ReactionSpec.__doc__ = """
A single reaction split into its three parts.

``reactants`` and ``products`` are tuples of species-name tokens (possibly
repeated, empty for the empty set), ``propensity`` is the propensity text
with whitespace removed, ``text`` the original reaction string and
``position`` the 1-based position of the reaction in the input.
"""


class RxnParseError(ValueError):
    """Base class for all reaction network compilation errors."""
    pass

class InvalidSpeciesError(RxnParseError):
    """Species are not given as a list of non-empty strings."""
    def __init__(self, species=None):
        RxnParseError.__init__(
            self, "Species must be specified in a list of non-empty "
                  "strings, got %r." % (species,))
        self.species = species

class InvalidRateError(RxnParseError):
    """Rate constants are not given as name/value pairs."""
    def __init__(self, detail=None):
        msg = "Rates must be specified as property/value-pairs."
        if detail:
            msg = "%s %s" % (msg, detail)
        RxnParseError.__init__(self, msg)

class DuplicateNameError(RxnParseError):
    """A species or rate name occurs more than once."""
    def __init__(self, name, kind):
        RxnParseError.__init__(
            self, "Species and rates must consist of unique names: %s '%s' "
                  "is repeated." % (kind, name))
        self.name = name
        self.kind = kind

class NameClashError(RxnParseError):
    """A name is used both for a species and for a rate."""
    def __init__(self, name):
        RxnParseError.__init__(
            self, "Species and rates must use different names: '%s'." % name)
        self.name = name

class ReservedNameError(RxnParseError):
    """A name clashes with an argument of the propensity functions."""
    def __init__(self, name, kind):
        RxnParseError.__init__(
            self, "%s should not clash with propensity input arguments: "
                  "'%s'." % (kind.capitalize(), name))
        self.name = name
        self.kind = kind

class InvalidNameError(RxnParseError):
    """A name is not a valid identifier."""
    def __init__(self, name):
        RxnParseError.__init__(
            self, "Not a valid species or rate name: '%s'" % name)
        self.name = name

class MalformedReactionError(RxnParseError):
    """A reaction cannot be split into reactants, propensity and products."""
    def __init__(self, text, position, reason=None):
        if reason is None:
            reason = "Each reaction must contain exactly 2 '%s'" % SEPARATOR
        RxnParseError.__init__(
            self, "%s (reaction #%d: '%s')." % (reason, position, text))
        self.text = text
        self.position = position

class UnknownSpeciesError(RxnParseError):
    """A reactant or product is not among the declared species."""
    def __init__(self, token, position):
        RxnParseError.__init__(
            self, "Unknown species '%s' in reaction #%d." % (token, position))
        self.token = token
        self.position = position


def _first_duplicate(names):
    seen = set()
    for name in names:
        if name in seen:
            return name
        seen.add(name)
    return None


def validate(species, rate_names, rate_values):
    """Check species and rate constants before any reaction is processed.

    The checks run in a fixed order and the first violated one raises.

    Raises
    ------
    InvalidSpeciesError, InvalidRateError, DuplicateNameError,
    NameClashError, ReservedNameError, InvalidNameError
    """
    for s in species:
        if not isinstance(s, str) or not s:
            raise InvalidSpeciesError(s)

    if len(rate_names) != len(rate_values):
        raise InvalidRateError("Got %d names but %d values." %
                               (len(rate_names), len(rate_values)))
    for name in rate_names:
        if not isinstance(name, str) or not name:
            raise InvalidRateError("Rate name %r is not a string." % (name,))
    for name, value in zip(rate_names, rate_values):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidRateError("Value of rate '%s' is not numeric: %r." %
                                   (name, value))
        try:
            finite = math.isfinite(value)
        except OverflowError:
            # integers beyond the range of a double
            finite = False
        if not finite:
            raise InvalidRateError("Value of rate '%s' is not finite: %r." %
                                   (name, value))

    for names, kind in ((species, 'species'), (rate_names, 'rate')):
        dup = _first_duplicate(names)
        if dup is not None:
            raise DuplicateNameError(dup, kind)

    rate_set = set(rate_names)
    for s in species:
        if s in rate_set:
            raise NameClashError(s)

    for names, kind in ((species, 'species'), (rate_names, 'rates')):
        for name in names:
            if name in RESERVED_NAMES:
                raise ReservedNameError(name, kind)

    # Identifiers never contain the '$', '[', ']' or '-' characters of the
    # intermediate markers used by SymbolTable.rewrite
    for name in list(species) + list(rate_names):
        if not _VARIABLE_NAME_REGEX.match(name):
            raise InvalidNameError(name)


def _split_rates(rates):
    """Normalize the accepted rate formats to parallel name/value lists."""
    if rates is None:
        return [], []
    if isinstance(rates, collections.abc.Mapping):
        return list(rates.keys()), list(rates.values())
    rates = list(rates)
    if rates and all(isinstance(r, tuple) for r in rates):
        if any(len(r) != 2 for r in rates):
            raise InvalidRateError("Rate tuples must be (name, value) pairs.")
        return [r[0] for r in rates], [r[1] for r in rates]
    # flat property/value list
    return rates[0::2], rates[1::2]


class ReactionNetwork(object):
    """
    The input of a compilation: reactions, species and rate constants.

    Construction only normalizes the inputs; all validation happens when the
    network is compiled.

    Parameters
    ----------
    reactions : list of str
        Reactions of the form ``'X+Y > propensity > Z'``.
    species : list of str
        Species names. The order defines the rows of the stoichiometric
        matrix and the ``enum Species`` of the generated code.
    rates : mapping, list of (name, value) or flat list
        Rate constants and their values.
    name : str, optional
        Name used in log messages.

    Examples
    --------

    >>> from rxnparse import ReactionNetwork
    >>> net = ReactionNetwork(['@ > k*vol > X', 'X > mu*X > @'], ['X'],
    ...                       ['k', 1, 'mu', 1e-3], name='birth_death')
    >>> result = net.compile()
    >>> result.N.toarray()
    array([[ 1, -1]])
    """

    def __init__(self, reactions, species, rates=None, name=None):
        if isinstance(reactions, str):
            reactions = [reactions]
        if isinstance(species, str):
            species = [species]
        self.reactions = tuple(reactions)
        self.species = tuple(species)
        self.rate_names, self.rate_values = _split_rates(rates)
        self.rate_names = tuple(self.rate_names)
        self.rate_values = tuple(self.rate_values)
        self.name = name or 'network'

    def validate(self):
        """Validate species and rate names, see :func:`validate`."""
        validate(self.species, self.rate_names, self.rate_values)

    @property
    def rates(self):
        """Rate constants as a tuple of :class:`RateConstant`."""
        return tuple(RateConstant(n, float(v))
                     for n, v in zip(self.rate_names, self.rate_values))

    def species_list(self):
        """Species as a tuple of :class:`Species`."""
        return tuple(Species(n, i) for i, n in enumerate(self.species))

    def compile(self, filename=None, latex=False, timestamp=None):
        """Compile the network, see :func:`rxnparse.compiler.compile_network`."""
        from rxnparse.compiler import compile_network
        return compile_network(self, filename=filename, latex=latex,
                               timestamp=timestamp)

    def __repr__(self):
        return '%s(%r, %r, %r, name=%r)' % (
            self.__class__.__name__, list(self.reactions), list(self.species),
            list(zip(self.rate_names, self.rate_values)), self.name)
