"""
Command-line compilation of reaction networks, see :mod:`rxnparse.export`.
"""

import argparse
import importlib.util
import os
import sys

import rxnparse.export
from rxnparse.compiler import compile_network
from rxnparse.core import ReactionNetwork, RxnParseError
from rxnparse.logging import get_logger


def load_network(filename):
    """Import a network file and return its ``network`` and docstring.

    Raises
    ------
    ValueError
        If the file is not a ``.py`` file or defines no ``network``.
    """
    if not filename.endswith('.py'):
        raise ValueError("File '%s' is not a .py file" % filename)
    module_name = os.path.splitext(os.path.basename(filename))[0]
    spec = importlib.util.spec_from_file_location(module_name, filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    network = getattr(module, 'network', None)
    if not isinstance(network, ReactionNetwork):
        raise ValueError("File '%s' isn't a network file" % filename)
    return network, module.__doc__


def _parser():
    parser = argparse.ArgumentParser(
        prog='python -m rxnparse.export',
        description='Compile a reaction network defined in a Python file.')
    parser.add_argument('network_file',
                        help='Python file assigning a ReactionNetwork to '
                             'the variable "network"')
    parser.add_argument('format', nargs='?', default='urdme',
                        choices=sorted(rxnparse.export.formats),
                        help='output format (default: urdme)')
    parser.add_argument('-o', '--output', metavar='FILE',
                        help='write the C code to FILE instead of standard '
                             'output; files not generated by rxnparse are '
                             'never overwritten (urdme only)')
    parser.add_argument('-t', '--timestamp', metavar='TEXT',
                        help='generation time written into the C header, '
                             'for reproducible output (urdme only)')
    return parser


def main(argv):
    if len(argv) < 2:
        print(rxnparse.export.__doc__, end=' ')
        return 1

    parser = _parser()
    args = parser.parse_args(argv[1:])
    if args.format != 'urdme' and (args.output or args.timestamp):
        parser.error('--output and --timestamp require the urdme format')
    if not os.path.exists(args.network_file):
        parser.error("File '%s' doesn't exist" % args.network_file)
    try:
        network, docstring = load_network(args.network_file)
    except ValueError as e:
        parser.error(str(e))

    log = get_logger(__name__, network=network)
    try:
        if args.format == 'urdme':
            result = compile_network(network, filename=args.output,
                                     timestamp=args.timestamp,
                                     docstring=docstring)
            if args.output is None:
                print(result.code)
            elif not result.written:
                return 1
            else:
                log.info('Wrote %s', args.output)
        else:
            print(rxnparse.export.export(network, args.format, docstring))
    except RxnParseError as e:
        print('Error compiling %s: %s' % (args.network_file, e),
              file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
