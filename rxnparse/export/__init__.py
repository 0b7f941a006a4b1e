"""
Tools for exporting compiled reaction networks to other formats.

Exporting can be performed at the command-line or programmatically/interactively
from within Python.

Command-line usage
==================

At the command-line, run as follows::

    python -m rxnparse.export network.py [<format>] [-o FILE] [-t TEXT]

where ``network.py`` is a file containing a reaction network definition (i.e.,
contains an instance of ``rxnparse.core.ReactionNetwork`` assigned to the
global variable ``network``). ``<format>`` should be the name of one of the
supported formats:

- ``urdme``
- ``latex``

The format defaults to ``urdme``. The exported code will be printed to
standard out, allowing it to be inspected or redirected to another file. For
the ``urdme`` format, ``-o FILE`` writes the C code to ``FILE`` instead,
unless ``FILE`` exists and was not generated by rxnparse (the exit status is
then 1), and ``-t TEXT`` replaces the generation time in the header by
``TEXT``.

Interactive usage
=================

Export functionality is implemented by this module's top-level function
``export``. For example, to export the birth-death example network as C
propensity functions, first import the network::

    from rxnparse.examples.birth_death import network

Then call ``export``, passing the network and the desired format::

    from rxnparse.export import export
    code = export(network, 'urdme')

The output (a string) can be inspected or written to a file. To protect
hand-edited files, use :func:`rxnparse.io.write_generated`, which only
overwrites files previously generated by this package.
"""

import importlib
import re
import textwrap


class Exporter(object):
    """Base class for all reaction network exporters.

    Export functionality is implemented by subclasses of this class. A
    network is passed to the exporter constructor and the ``export`` method
    on the instance is called.

    Parameters
    ----------
    network : rxnparse.core.ReactionNetwork
        The network to export.
    docstring : string (optional)
        The header comment to include at the top of the exported file.

    Examples
    --------

    >>> from rxnparse.examples.birth_death import network
    >>> from rxnparse.export.latex import LatexExporter
    >>> latex_output = LatexExporter(network).export()
    """

    def __init__(self, network, docstring=None):
        self.network = network
        """The network to export."""
        self.docstring = docstring
        """Header comment to include at the top of the exported file."""

    def export(self):
        """The export method, which must be implemented by any subclass.

        All implementations of this method are expected to return a single
        string containing the representation of the network in the desired
        format.
        """
        raise NotImplementedError()


# Define a dict listing supported formats and the names of the classes
# implementing their export procedures
formats = {
        'urdme': 'UrdmeExporter',
        'latex': 'LatexExporter',
        }


def export(network, format, docstring=None):
    """Top-level function for exporting a network to a given format.

    Parameters
    ----------
    network : rxnparse.core.ReactionNetwork
        The network to export.
    format : string
        A string indicating the desired export format.
    docstring : string (optional)
        The header comment to include at the top of the exported file.
    """
    if format not in formats:
        raise ValueError("The format must be one of the following: " +
                         ", ".join(formats.keys()) + ".")
    # Import the exporter module. This is done at export runtime to avoid
    # circular imports at module loading
    export_module = importlib.import_module('rxnparse.export.' + format)
    export_class = getattr(export_module, formats[format])
    e = export_class(network, docstring)
    return e.export()


def pad(text, depth=0):
    "Dedent multi-line string and pad with spaces."
    text = textwrap.dedent(text)
    text = re.sub(r'(?m)^', ' ' * depth, text)
    text += '\n'
    return text
