"""A simple three-species chemical kinetics system known as "Robertson's
example", as presented in:

H. H. Robertson, The solution of a set of reaction rate equations, in Numerical
Analysis: An Introduction, J. Walsh, ed., Academic Press, 1966, pp. 178-182.
"""

# The chemical model is as follows:
#
#      Reaction        Rate
#   ------------------------
#       A -> B         0.04
#      2B -> B + C     3.0e7
#   B + C -> A + C     1.0e4
#
# written with stochastic mass-action propensities, where a bimolecular
# reaction scales with the inverse of the subvolume volume and the
# dimerization counts distinct pairs of B.

from rxnparse import ReactionNetwork

network = ReactionNetwork(['A > k1*A > B',
                           'B+B > k2*B*(B-1)/vol > B+C',
                           'B+C > k3*B*C/vol > A+C'],
                          ['A', 'B', 'C'],
                          [('k1', 0.04), ('k2', 3.0e7), ('k3', 1.0e4)],
                          name='robertson')


if __name__ == '__main__':
    from rxnparse.export import export
    print(export(network, 'urdme', __doc__))
