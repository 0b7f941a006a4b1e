"""
Writing generated code to disk without clobbering hand-written files.
"""

import os
import warnings

from rxnparse.export.urdme import OVERWRITE_MARKER
from rxnparse.logging import get_logger


class OverwriteRefusedWarning(UserWarning):
    """An existing file was not generated by rxnparse and was left alone."""
    pass


def is_generated(filename):
    """Return True if the file's first line is the overwrite marker."""
    with open(filename, 'r') as f:
        first_line = f.readline()
    return first_line.startswith(OVERWRITE_MARKER)


def write_generated(filename, text):
    """Write generated code to a file.

    A file that does not exist is always written. An existing file is only
    overwritten if its first line is
    :data:`~rxnparse.export.urdme.OVERWRITE_MARKER`, i.e. if it was generated
    by rxnparse and not modified since; otherwise an
    :class:`OverwriteRefusedWarning` is issued and the file is left as is.

    Parameters
    ----------
    filename : str
        Destination path.
    text : str
        The generated code.

    Returns
    -------
    bool
        True if the file was written.
    """
    if os.path.exists(filename) and not is_generated(filename):
        msg = ("Will not overwrite existing file '%s' if not created by "
               "rxnparse" % filename)
        warnings.warn(msg, OverwriteRefusedWarning)
        return False
    with open(filename, 'w') as f:
        f.write(text)
    get_logger(__name__).debug('Wrote %d characters to %s', len(text),
                               filename)
    return True
