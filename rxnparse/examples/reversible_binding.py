"""Reversible bimolecular binding of X and Y into the complex XY.

The species names overlap: X and Y are substrings of XY.
"""

from rxnparse import ReactionNetwork

network = ReactionNetwork(['X+Y > kon*X*Y/vol > XY',
                           'XY > koff*XY > X+Y'],
                          ['X', 'Y', 'XY'],
                          {'kon': 1e-3, 'koff': 0.5},
                          name='reversible_binding')


if __name__ == '__main__':
    from rxnparse.export import export
    print(export(network, 'urdme', __doc__))
