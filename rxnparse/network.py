"""
Assembly of the stoichiometric matrix and the dependency graph.

For a network with ``Mspecies`` species and ``Mreactions`` reactions:

* ``N`` (``Mspecies x Mreactions``) holds the net change in each species
  when a reaction fires;
* ``H`` (``Mspecies x Mreactions``) flags the species each propensity reads;
* ``G = [H' H'*abs(N)] != 0`` (``Mreactions x (Mspecies + Mreactions)``):
  the first block repeats ``H'``, the second flags, for reaction ``i`` and
  reaction ``j``, that firing ``j`` changes a species the propensity of
  ``i`` reads, so propensity ``i`` must be re-evaluated after ``j`` fires.

All matrices are returned in compressed sparse column format, which is the
layout consumed by the simulation solvers.
"""

import collections

import networkx as nx
import numpy as np
import scipy.sparse

from rxnparse.core import UnknownSpeciesError
from rxnparse.logging import get_logger, EXTENDED_DEBUG, NetworkLoggerAdapter

NetworkMatrices = collections.namedtuple('NetworkMatrices',
                                         'N H G propensities')


def _resolve(tokens, table, position):
    indices = []
    for token in tokens:
        i = table.species_index(token)
        if i is None:
            raise UnknownSpeciesError(token, position)
        indices.append(i)
    return indices


def dependency_graph(N, H):
    """Compute ``G = [H' H'*abs(N)] != 0`` as an integer CSC matrix."""
    N = scipy.sparse.csc_matrix(N)
    Ht = scipy.sparse.csc_matrix(H).transpose()
    G = scipy.sparse.hstack([Ht, Ht.dot(abs(N))], format='csc')
    G = (G != 0).astype(int)
    G.eliminate_zeros()
    return G


def build(specs, table, network=None):
    """Build the network matrices from split reactions.

    A warning is logged for every reaction consuming a species its
    propensity does not read, as such a reaction can fire when the species
    is exhausted.

    Parameters
    ----------
    specs : list of rxnparse.core.ReactionSpec
        The reactions, as returned by :func:`rxnparse.parse.split_reactions`.
    table : rxnparse.symbols.SymbolTable
        Symbol table for the species and rate constants.
    network : rxnparse.core.ReactionNetwork, optional
        Network the reactions belong to, named in log messages.

    Returns
    -------
    NetworkMatrices
        ``N``, ``H`` and ``G`` as CSC matrices, and ``propensities``, the
        list of rewritten propensity expressions in reaction order.

    Raises
    ------
    UnknownSpeciesError
        If a reactant or product is not a species.
    """
    log = NetworkLoggerAdapter(get_logger(__name__), {'network': network})
    shape = (len(table.species), len(specs))
    N = scipy.sparse.lil_matrix(shape, dtype='int')
    H = scipy.sparse.lil_matrix(shape, dtype='int')
    propensities = []
    for i, spec in enumerate(specs):
        reactants = _resolve(spec.reactants, table, spec.position)
        products = _resolve(spec.products, table, spec.position)

        for r in reactants:
            N[r, i] -= 1
        for p in products:
            N[p, i] += 1

        rewritten, deps = table.rewrite(spec.propensity)
        for d in deps:
            H[d, i] = 1
        propensities.append(rewritten)
        log.log(EXTENDED_DEBUG, '%s -> %s (reads %s)', spec.propensity,
                rewritten, [table.species[d] for d in deps],
                reaction=spec.position)

        unread = sorted(set(r for r in reactants
                            if reactants.count(r) > products.count(r))
                        .difference(deps))
        if unread:
            log.warning('Propensity %s does not read consumed species %s',
                        spec.propensity,
                        ', '.join(table.species[u] for u in unread),
                        reaction=spec.position)

    N = N.tocsc()
    H = H.tocsc()
    N.eliminate_zeros()
    return NetworkMatrices(N, H, dependency_graph(N, H), propensities)


def dependency_digraph(G, species):
    """Return the reaction dependency graph as a :class:`networkx.DiGraph`.

    Nodes are named ``R1, R2, ...`` and carry the attribute ``reads``, the
    list of species names the reaction's propensity depends on. An edge
    ``Rj -> Ri`` means the propensity of reaction ``i`` has to be
    re-evaluated after reaction ``j`` fires.

    Parameters
    ----------
    G : scipy.sparse matrix
        The dependency graph as returned by :func:`build`.
    species : sequence of str
        Species names, in the order of the first block of ``G``.
    """
    G = scipy.sparse.csr_matrix(G)
    n_species = len(species)
    n_reactions = G.shape[0]
    if G.shape[1] != n_species + n_reactions:
        raise ValueError('G must have %d columns for %d species and %d '
                         'reactions, got %d' % (n_species + n_reactions,
                                                n_species, n_reactions,
                                                G.shape[1]))
    dense = G.toarray()
    graph = nx.DiGraph()
    for i in range(n_reactions):
        reads = [species[s] for s in np.flatnonzero(dense[i, :n_species])]
        graph.add_node('R%d' % (i + 1), reads=reads)
    for i in range(n_reactions):
        for j in np.flatnonzero(dense[i, n_species:]):
            graph.add_edge('R%d' % (j + 1), 'R%d' % (i + 1))
    return graph
