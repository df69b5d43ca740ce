"""
Benchgen Command-Line Interface

Evaluate benchmark problems, print their optimum, write synthetic
auxiliary data and serve JSON queries.
"""

import sys
import argparse
import json
import logging
import re

import numpy as np

from .config import BenchgenConfig, MissingDataPolicy
from .data.generate import write_auxiliary_data
from .errors import BenchgenError
from .factory import create_problem
from .server import QueryHandler


def _add_problem_args(parser):
    parser.add_argument('family', help='Suite: cec2017, cec2021, cec2022 or pbo')
    parser.add_argument('function_id', type=int, help='Function id within the suite')
    parser.add_argument('--dim', '-d', type=int, default=10,
                        help='Dimension (default: 10)')
    parser.add_argument('--instance', '-i', type=int, default=1,
                        help='Instance (default: 1)')
    parser.add_argument('--data-root', type=str,
                        help='Directory holding cec<version>/ data folders')
    parser.add_argument('--missing-data', choices=[p.value for p in MissingDataPolicy],
                        default=MissingDataPolicy.FAIL.value,
                        help='Behavior when auxiliary data is missing (default: fail)')
    parser.add_argument('--no-bias', action='store_true',
                        help='Do not add the function bias')


def _build(args):
    config = BenchgenConfig(
        data_root=args.data_root,
        apply_bias=not args.no_bias,
        missing_data=args.missing_data,
    )
    return create_problem(args.family, args.function_id, args.instance, args.dim, config)


def cmd_evaluate(args):
    """Evaluate a problem at one point."""
    problem = _build(args)
    y = problem(np.array(args.x, dtype=np.float64))
    if args.json:
        print(json.dumps({'meta': problem.meta.to_canonical(), 'x': args.x, 'y': y}))
    else:
        print(f"{problem.meta.name} (F{problem.meta.function_id}, "
              f"instance {problem.meta.instance}, {problem.dimension}D)")
        print(f"f(x) = {y:.10e}")
    return 0


def cmd_optimum(args):
    """Print the known optimum of a problem."""
    problem = _build(args)
    x, y = problem.optimum
    if args.json:
        print(json.dumps({
            'meta': problem.meta.to_canonical(),
            'optimum': problem.optimum.to_canonical(),
            'fingerprint': problem.fingerprint,
        }))
        return 0

    print("=" * 60)
    print(f"{problem.meta.name}")
    print("=" * 60)
    print(f"Family: {problem.meta.family}")
    print(f"Function: F{problem.meta.function_id}")
    print(f"Instance: {problem.meta.instance}")
    print(f"Dimension: {problem.dimension}")
    print(f"Optimum x: {x[:min(5, len(x))]}{'...' if len(x) > 5 else ''}")
    print(f"Optimum y: {y:.10e}")
    print(f"Fingerprint: {problem.fingerprint}")
    return 0


def cmd_generate_data(args):
    """Write synthetic auxiliary data files."""
    m = re.match(r"^cec(\d{4})$", args.family.strip().lower())
    if m is None:
        print(f"Error: {args.family} uses no auxiliary data")
        return 1
    version = int(m.group(1))
    for fid in args.function_ids:
        for dim in args.dims:
            paths = write_auxiliary_data(args.root, version, fid, dim, seed=args.seed)
            for path in paths.values():
                print(path)
    return 0


def cmd_serve(args):
    """Answer JSON queries on stdin/stdout."""
    handler = QueryHandler(_build(args))
    handler.serve(sys.stdin, sys.stdout)
    return 0


def cmd_version(args):
    """Print version information."""
    from . import __version__
    print(f"benchgen {__version__}")
    print("CEC and pseudo-Boolean benchmark problem generator")
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='benchgen',
        description='Benchgen - Benchmark Problem Generator'
    )
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log data loading to stderr')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Evaluate command
    eval_parser = subparsers.add_parser('evaluate', help='Evaluate a problem at a point')
    _add_problem_args(eval_parser)
    eval_parser.add_argument('--x', type=float, nargs='+', required=True,
                             help='Point to evaluate')
    eval_parser.add_argument('--json', action='store_true', help='Print JSON')
    eval_parser.set_defaults(func=cmd_evaluate)

    # Optimum command
    opt_parser = subparsers.add_parser('optimum', help='Print the known optimum')
    _add_problem_args(opt_parser)
    opt_parser.add_argument('--json', action='store_true', help='Print JSON')
    opt_parser.set_defaults(func=cmd_optimum)

    # Generate-data command
    gen_parser = subparsers.add_parser('generate-data',
                                       help='Write synthetic auxiliary data')
    gen_parser.add_argument('family', help='Suite: cec2014 ... cec2022')
    gen_parser.add_argument('root', help='Data root directory')
    gen_parser.add_argument('--function-ids', '-f', type=int, nargs='+', required=True,
                            help='Function ids')
    gen_parser.add_argument('--dims', '-d', type=int, nargs='+', default=[10],
                            help='Dimensions (default: 10)')
    gen_parser.add_argument('--seed', type=int, default=0,
                            help='Random seed (default: 0)')
    gen_parser.set_defaults(func=cmd_generate_data)

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Answer JSON queries on stdin')
    _add_problem_args(serve_parser)
    serve_parser.set_defaults(func=cmd_serve)

    # Version command
    ver_parser = subparsers.add_parser('version', help='Print version')
    ver_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    try:
        return args.func(args)
    except BenchgenError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
