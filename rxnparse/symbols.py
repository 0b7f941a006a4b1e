"""
Resolution of species and rate names inside propensity expressions.

A propensity is treated as opaque text in which only the names of species
and rate constants are recognized. Rewriting is done in two passes:

1. Every name, longest first, is replaced by a marker ``$[n]`` holding its
   signed index (species ``+1, +2, ...``, rates ``-1, -2, ...``). Handling
   longer names first keeps e.g. ``BA`` from being rewritten as ``$[1]A``
   when both ``B`` and ``BA`` are names. The arguments of the propensity
   functions (:data:`~rxnparse.core.RESERVED_NAMES`) take part in this pass
   with indices following the species, so that a species ``v`` is not
   found inside ``vol``.
2. The markers are expanded left to right: species become
   ``xstate[<name>]`` (the name being an ``enum Species`` constant in the
   generated code), rates go back to their plain name, which is declared
   as a constant, and reserved names are left as they were.

Names are validated identifiers and propensities may not contain ``$``, so
every marker in the text was put there by the first pass.
"""

import re

from rxnparse.core import RESERVED_NAMES

MARKER = '$[%d]'
_MARKER_REGEX = re.compile(r'\$\[(-?\d+)\]')
STATE = 'xstate'
_STATE_REGEX = re.compile(r'%s\[([_A-Za-z][_A-Za-z0-9]*)\]' % STATE)


class SymbolTable(object):
    """
    Signed-index lookup for species and rate constant names.

    Parameters
    ----------
    species : sequence of str
        Species names in order; species ``i`` (zero-based) has index
        ``i + 1``.
    rates : sequence of str
        Rate constant names in order; rate ``j`` has index ``-(j + 1)``.
    reserved : sequence of str
        Names kept verbatim in propensities, by default the arguments of
        the generated propensity functions.
    """

    def __init__(self, species, rates=(), reserved=RESERVED_NAMES):
        self.species = tuple(species)
        self.rates = tuple(rates)
        self._index = {}
        for i, name in enumerate(self.species):
            self._index[name] = i + 1
        for j, name in enumerate(self.rates):
            self._index[name] = -(j + 1)
        self.reserved = tuple(r for r in reserved if r not in self._index)
        markers = dict(self._index)
        for k, name in enumerate(self.reserved):
            markers[name] = len(self.species) + k + 1
        self._markers = markers
        # sorted() is stable: names of equal length keep their input order
        self._by_length = sorted(markers, key=len, reverse=True)

    def __len__(self):
        return len(self._index)

    def __contains__(self, name):
        return name in self._index

    def lookup(self, name):
        """Signed index of a name, or None if unknown."""
        return self._index.get(name)

    def species_index(self, name):
        """Zero-based index of a species, or None if not a species."""
        n = self._index.get(name)
        if n is None or n < 0:
            return None
        return n - 1

    def _expand(self, match):
        n = int(match.group(1))
        if n < 0:
            return self.rates[-n - 1]
        if n > len(self.species):
            return self.reserved[n - len(self.species) - 1]
        return '%s[%s]' % (STATE, self.species[n - 1])

    def rewrite(self, expr):
        """Rewrite a propensity expression into target code.

        Returns
        -------
        tuple
            The rewritten text and a sorted tuple of the zero-based indices
            of the species the expression depends on.

        Raises
        ------
        ValueError
            If the expression contains ``$``, the marker delimiter.

        Examples
        --------

        >>> table = SymbolTable(['B', 'BA'], ['k'])
        >>> table.rewrite('k*B*BA')
        ('k*xstate[B]*xstate[BA]', (0, 1))
        >>> SymbolTable(['v'], ['k']).rewrite('k*v*vol')
        ('k*xstate[v]*vol', (0,))
        """
        if '$' in expr:
            raise ValueError("Propensity '%s' contains '$'" % expr)
        deps = set()
        for name in self._by_length:
            if name in expr:
                n = self._markers[name]
                if 0 < n <= len(self.species):
                    deps.add(n - 1)
                expr = expr.replace(name, MARKER % n)
        return _MARKER_REGEX.sub(self._expand, expr), tuple(sorted(deps))

    def restore(self, rewritten):
        """Undo :meth:`rewrite`, giving back the original names.

        >>> SymbolTable(['X']).restore('mu*xstate[X]')
        'mu*X'
        """
        return _STATE_REGEX.sub(
            lambda m: m.group(1) if m.group(1) in self.species
            else m.group(0), rewritten)
