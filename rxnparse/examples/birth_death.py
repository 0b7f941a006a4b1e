"""Linear birth-death process of a single species X.

X is produced at a constant rate proportional to the volume and each
molecule degrades independently.
"""

from rxnparse import ReactionNetwork

network = ReactionNetwork(['@ > k*vol > X',
                           'X > mu*X > @'],
                          ['X'],
                          ['k', 1, 'mu', 1e-3],
                          name='birth_death')


if __name__ == '__main__':
    from rxnparse.export import export
    print(export(network, 'urdme', __doc__))
