"""
Generation of C propensity functions for the URDME solvers.

For information on how to use the exporters, see the documentation
for :py:mod:`rxnparse.export`.

Structure of the generated C code
=================================

The generated file implements the propensity plugin contract of the
simulation solvers::

    PropensityFun *ALLOC_propensities(size_t Mreactions);
    void FREE_propensities(PropensityFun *ptr);

where ``PropensityFun`` (declared in ``propensities.h``) is a pointer to a
function::

    double rFun(const int *xstate,double time,double vol,
                const double *ldata,const double *gdata,int sd);

returning the propensity of a reaction given the state ``xstate`` of a
subvolume, the time, the subvolume volume, local and global data and the
subdomain number.

The species are declared in an ``enum Species`` matching the rows of the
stoichiometric matrix, so that a species ``X`` is read as ``xstate[X]``.
Rate constants become ``const double`` declarations. ``ALLOC_propensities``
returns a static table of the functions and fails through ``PERROR`` if
more reactions are requested than were compiled; ``FREE_propensities``
does nothing.

Output for the birth-death example network
==========================================

For ``rxnparse.examples.birth_death``, i.e. the reactions
``'@ > k*vol > X'`` and ``'X > mu*X > @'``, the propensity definitions read::

    double rFun1(const int *xstate,double time,double vol,
                 const double *ldata,const double *gdata,int sd)
    {
      return k*vol;
    }

    double rFun2(const int *xstate,double time,double vol,
                 const double *ldata,const double *gdata,int sd)
    {
      return mu*xstate[X];
    }

The first line of the file is :data:`OVERWRITE_MARKER`. Removing or editing
it protects the file from being overwritten by :func:`rxnparse.io.write_generated`.
"""

import datetime
from io import StringIO

from rxnparse.export import Exporter, pad

OVERWRITE_MARKER = \
    '/* [Remove/modify this line not to overwrite this file] */'
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M'

_SIGNATURE = ('double rFun%d(const int *xstate,double time,double vol,\n'
              '             const double *ldata,const double *gdata,int sd)')


def format_value(value):
    """Format a rate constant as a C double literal without loss."""
    return repr(float(value))


def _comment_safe(text):
    return text.replace('*/', '* /')


def _format_timestamp(timestamp):
    if timestamp is None:
        timestamp = datetime.datetime.now()
    if isinstance(timestamp, (datetime.datetime, datetime.date)):
        return timestamp.strftime(TIMESTAMP_FORMAT)
    return str(timestamp)


def generate_code(species, rates, reactions, propensities, timestamp=None,
                  docstring=None):
    """Assemble the C source of the propensity functions.

    The output is fully determined by the arguments; only the line holding
    the generation ``timestamp`` changes between calls.

    Parameters
    ----------
    species : sequence of str
        Species names, in order.
    rates : sequence of (str, float)
        Rate constant names and values, in order.
    reactions : sequence of str
        The original reaction strings, echoed in the header comment.
    propensities : sequence of str
        Rewritten propensity expressions, one per reaction.
    timestamp : datetime or str, optional
        Generation time written into the header, defaults to now.
    docstring : str, optional
        Extra comment written below the header.

    Returns
    -------
    string
        The C source.
    """
    if len(reactions) != len(propensities):
        raise ValueError('Got %d reactions but %d propensities' %
                         (len(reactions), len(propensities)))
    output = StringIO()

    # heading
    output.write(OVERWRITE_MARKER + '\n')
    output.write('/* Generated by rxnparse %s */\n\n' %
                 _format_timestamp(timestamp))
    if docstring:
        output.write('/* %s */\n\n' % _comment_safe(docstring.strip()))
    output.write('/* Reactions:\n')
    for r in reactions:
        output.write('     %s\n' % _comment_safe(r))
    output.write('*/\n\n')

    output.write(pad("""\
        #include "propensities.h"
        #include "report.h"
        """))

    if species:
        output.write('enum Species {\n')
        output.write(',\n'.join('  %s' % s for s in species))
        output.write('\n};\n\n')

    output.write('const int NR = %d; /* number of reactions */\n\n' %
                 len(propensities))

    output.write('/* rate constants */\n')
    for name, value in rates:
        output.write('const double %s = %s;\n' % (name, format_value(value)))
    output.write('\n')

    output.write('/* forward declaration */\n')
    for i in range(1, len(propensities) + 1):
        output.write(_SIGNATURE % i + ';\n')
    output.write('\n')

    output.write('/* static propensity vector */\n')
    if propensities:
        output.write('static PropensityFun ptr[] = {%s};\n\n' % ','.join(
            'rFun%d' % i for i in range(1, len(propensities) + 1)))
    else:
        # C does not allow an empty initializer list
        output.write('static PropensityFun *ptr = NULL;\n\n')

    output.write('/* propensity definitions */\n')
    for i, prop in enumerate(propensities, 1):
        output.write(_SIGNATURE % i + '\n')
        output.write('{\n  return %s;\n}\n\n' % prop)

    output.write(pad("""\
        /* URDME solver interface */
        PropensityFun *ALLOC_propensities(size_t Mreactions)
        {
          if (Mreactions > NR) PERROR("Wrong number of reactions.");
          return ptr;
        }

        void FREE_propensities(PropensityFun *ptr)
        { /* do nothing since a static array was used */ }
        """))

    return output.getvalue()


class UrdmeExporter(Exporter):
    """A class for returning the C propensity functions of a network.

    Inherits from :py:class:`rxnparse.export.Exporter`, which implements
    basic functionality for all exporters.
    """
    def export(self, timestamp=None):
        """Generate the C propensity functions for the network.

        Parameters
        ----------
        timestamp : datetime or str, optional
            Generation time written into the header, defaults to now.

        Returns
        -------
        string
            The C source, ready to be compiled and linked with the solvers.
        """
        from rxnparse.compiler import compile_network
        return compile_network(self.network, timestamp=timestamp,
                               docstring=self.docstring).code
