"""
Compilation of a reaction network into matrices and C propensity functions.

This is the main entry point of the package::

    >>> from rxnparse import rparse
    >>> result = rparse(['@ > k*vol > X', 'X > mu*X > @'], ['X'],
    ...                 ['k', 1, 'mu', 1e-3])
    >>> result.N.toarray()
    array([[ 1, -1]])
    >>> print(result.propensities)
    ['k*vol', 'mu*xstate[X]']

The stoichiometric matrix ``N`` and dependency graph ``G`` are meant for the
fields ``umod.N`` and ``umod.G`` of a simulation, ``code`` is a C file ready
to be compiled and linked with the solvers.
"""

import collections

from rxnparse.core import ReactionNetwork
from rxnparse.export.latex import render_reactions
from rxnparse.export.urdme import generate_code
from rxnparse.io import write_generated
from rxnparse.logging import get_logger
from rxnparse.network import build
from rxnparse.parse import split_reactions
from rxnparse.symbols import SymbolTable

Compilation = collections.namedtuple(
    'Compilation', 'code N G latex network H propensities written')
Compilation.__doc__ = """
Result of compiling a reaction network.

Attributes
----------
code : str
    C source of the propensity functions.
N : scipy.sparse.csc_matrix
    Stoichiometric matrix, species x reactions.
G : scipy.sparse.csc_matrix
    Dependency graph, reactions x (species + reactions).
latex : str or None
    LaTeX listing of the reactions, if requested.
network : rxnparse.core.ReactionNetwork
    The compiled network.
H : scipy.sparse.csc_matrix
    Species read by each propensity, species x reactions.
propensities : list of str
    Rewritten propensity expressions.
written : bool
    True if ``code`` was written to the requested file.
"""


def compile_network(network, filename=None, latex=False, timestamp=None,
                    docstring=None):
    """Compile a :class:`~rxnparse.core.ReactionNetwork`.

    Species and rates are validated first, then all reactions are split,
    and only then are reactants and products resolved; any error aborts the
    compilation before output is produced.

    Parameters
    ----------
    network : rxnparse.core.ReactionNetwork
        The network to compile.
    filename : str, optional
        Also write the C code to this file, see
        :func:`rxnparse.io.write_generated`. A refused overwrite only warns.
    latex : bool, optional
        Also render the reactions as LaTeX.
    timestamp : datetime or str, optional
        Generation time written into the C header, defaults to now.
    docstring : str, optional
        Extra comment for the C header.

    Returns
    -------
    Compilation
    """
    log = get_logger(__name__, network=network)
    network.validate()

    specs = split_reactions(network.reactions)
    table = SymbolTable(network.species, network.rate_names)
    matrices = build(specs, table, network=network)
    log.debug('Compiled %d species, %d rates and %d reactions; G has %d '
              'nonzeros', len(network.species), len(network.rate_names),
              len(specs), matrices.G.nnz)

    code = generate_code(network.species,
                         [(r.name, r.value) for r in network.rates],
                         network.reactions, matrices.propensities,
                         timestamp=timestamp, docstring=docstring)

    written = False
    if filename is not None:
        written = write_generated(filename, code)

    latex_output = render_reactions(network.reactions) if latex else None

    return Compilation(code=code, N=matrices.N, G=matrices.G,
                       latex=latex_output, network=network, H=matrices.H,
                       propensities=matrices.propensities, written=written)


def rparse(reactions, species, rates=None, filename=None, latex=False,
           timestamp=None, name=None):
    """Compile reactions, species and rate constants.

    Parameters
    ----------
    reactions : list of str
        Reactions of the form ``'X+Y+... > F(...) > U+V+...'``. The left
        (right) side is the initial (final) state and the propensity is
        written in between the ``>`` signs. ``@`` denotes the empty set.
    species : list of str
        Names of the species, e.g. ``['X', 'Y', 'Z']``.
    rates : mapping, list of (name, value) or flat list
        Names and values of the rate constants, e.g. ``['k', 1, 'mu',
        0.5e-7]``.
    filename, latex, timestamp :
        See :func:`compile_network`.
    name : str, optional
        Network name, used in log messages.

    Returns
    -------
    Compilation

    Examples
    --------

    Two reacting species::

        >>> result = rparse(['@ > k*vol > X', '@ > k*vol > Y',
        ...                  'X > mu*X > @', 'Y > mu*Y > @',
        ...                  'X+Y > kk*X*Y/vol > @'],
        ...                 ['X', 'Y'], ['k', 1, 'mu', 1e-3, 'kk', 1e-4],
        ...                 latex=True)
        >>> result.N.toarray()
        array([[ 1,  0, -1,  0, -1],
               [ 0,  1,  0, -1, -1]])
    """
    network = ReactionNetwork(reactions, species, rates, name=name)
    return compile_network(network, filename=filename, latex=latex,
                           timestamp=timestamp)
