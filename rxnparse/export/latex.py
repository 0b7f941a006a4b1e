"""
A module for rendering the reactions of a network as LaTeX.

For information on how to use the exporters, see the documentation
for :py:mod:`rxnparse.export`.

The reactions are written as an ``array`` inside an ``align`` environment
(``amsmath`` is needed for ``\\xrightarrow``), one reaction per row with the
propensity above the arrow. The empty set ``@`` is written as
``\\emptyset``. For the birth-death example network::

    \\begin{align}
      \\left. \\begin{array}{rcl}
        \\emptyset  & \\xrightarrow{ k*vol } &  X     \\\\
        X  & \\xrightarrow{ mu*X } &  \\emptyset   \\\\
      \\end{array} \\right\\}.
    \\end{align}

The reactant, propensity and product text is kept as written, spacing
included, except that the characters ``_ % & #`` are escaped.
"""

import re
from io import StringIO

from rxnparse.core import EMPTY_SET
from rxnparse.export import Exporter
from rxnparse.parse import split_raw

EMPTY_SET_LATEX = r'\emptyset'
_LATEX_SPECIAL = re.compile(r'([_%&#])')


def _escape(text):
    return _LATEX_SPECIAL.sub(r'\\\1', text)


def _side(segment):
    return _escape(segment).replace(EMPTY_SET, EMPTY_SET_LATEX)


def render_reactions(reactions):
    """Render reaction strings as a LaTeX ``align`` block.

    Parameters
    ----------
    reactions : sequence of str
        Reactions of the form ``'X+Y > propensity > Z'``.

    Returns
    -------
    string
        The LaTeX code.
    """
    output = StringIO()
    output.write('\\begin{align}\n')
    output.write('  \\left. \\begin{array}{rcl}\n')
    for position, r in enumerate(reactions, 1):
        reactants, prop, products = split_raw(r, position)
        output.write('    %s & \\xrightarrow{%s} & %s\t\\\\\n' %
                     (_side(reactants), _escape(prop), _side(products)))
    output.write('  \\end{array} \\right\\}.\n')
    output.write('\\end{align}')
    return output.getvalue()


class LatexExporter(Exporter):
    """A class for returning the LaTeX listing of a network's reactions.

    Inherits from :py:class:`rxnparse.export.Exporter`, which implements
    basic functionality for all exporters.
    """
    def export(self):
        """Render the reactions of the network as LaTeX.

        Returns
        -------
        string
            The LaTeX code, preceded by the docstring as a comment if given.
        """
        output = render_reactions(self.network.reactions)
        if self.docstring:
            comment = ''.join('%% %s\n' % line
                              for line in self.docstring.strip().splitlines())
            output = comment + output
        return output
