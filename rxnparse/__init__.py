__version__ = '0.1.0'

from rxnparse.core import *
from rxnparse.compiler import rparse, compile_network, Compilation

__all__ = ['ReactionNetwork', 'Species', 'RateConstant', 'ReactionSpec',
           'RESERVED_NAMES', 'RxnParseError', 'InvalidSpeciesError',
           'InvalidRateError', 'DuplicateNameError', 'NameClashError',
           'ReservedNameError', 'InvalidNameError', 'MalformedReactionError',
           'UnknownSpeciesError', 'rparse', 'compile_network', 'Compilation']
