"""Two species produced at constant rate, degraded individually and
annihilated pairwise by a bimolecular reaction.
"""

from rxnparse import ReactionNetwork

network = ReactionNetwork(['@ > k*vol > X',
                           '@ > k*vol > Y',
                           'X > mu*X > @',
                           'Y > mu*Y > @',
                           'X+Y > kk*X*Y/vol > @'],
                          ['X', 'Y'],
                          ['k', 1, 'mu', 1e-3, 'kk', 1e-4],
                          name='two_species')


if __name__ == '__main__':
    from rxnparse.export import export
    print(export(network, 'urdme', __doc__))
