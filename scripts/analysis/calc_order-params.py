#!/bin/env python

"""Calculate per-frame order parameter of a central atom species."""

import argparse
import logging
import sys

from trajorderpy import files
from trajorderpy import order_process
from trajorderpy import utility


def main():
    parser = create_parser()
    args = parser.parse_args()
    logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.INFO,
            format='%(levelname)s: %(message)s',
            handlers=[logging.StreamHandler(sys.stderr)])
    try:
        config = create_config(args)
    except utility.ConfigurationError as e:
        parser.error(str(e))

    def report(result):
        print(order_process.format_frame_result(result, median=args.median,
                                                angle=args.verbose))

    analyzer = order_process.FrameOrderParamAnalyzer(config, report)
    with files.GroTrajInpFile(args.traj_filename) as traj_file:
        analyzer.process(traj_file, final_flush=not args.no_final_flush)


def create_config(args):
    if args.time_range is None:
        text = input('Enter the range for t (1 FRAME = {:g}): '.format(
            utility.FRAME_TIME_TOLERANCE))
    else:
        text = ' '.join(args.time_range)

    start, end = order_process.parse_time_range(text)
    central_atom = args.central_atom
    if central_atom is None:
        central_atom = input('Enter the central atom (e.g., CAL): ').strip()

    if not central_atom:
        raise utility.ConfigurationError('No central atom given')

    max_bond_dist = None
    if args.check_bond_dist:
        max_bond_dist = args.max_bond_dist

    return order_process.Configuration(start, end, central_atom,
                                       max_bond_dist, args.abort_on_long_bond)


def create_parser():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
            'traj_filename',
            type=str,
            help='GRO trajectory file')
    parser.add_argument(
            '--time-range',
            nargs=2,
            metavar=('START', 'END'),
            help='Time range of frames to analyze (prompted for if not given)')
    parser.add_argument(
            '--central-atom',
            type=str,
            help='Central atom name (prompted for if not given)')
    parser.add_argument(
            '--check-bond-dist',
            action='store_true',
            help='Exclude central atoms whose neighbours are too far apart')
    parser.add_argument(
            '--max-bond-dist',
            type=float,
            default=utility.MAX_BOND_DIST,
            help='Neighbour distance cutoff (nm)')
    parser.add_argument(
            '--abort-on-long-bond',
            action='store_true',
            help='Stop reading a frame at the first over long bond')
    parser.add_argument(
            '--median',
            action='store_true',
            help='Also report median order parameter')
    parser.add_argument(
            '--no-final-flush',
            action='store_true',
            help='Do not report the last frame of the file')
    parser.add_argument(
            '--verbose',
            action='store_true',
            help='Log skipped records and report mean angles')

    return parser


if __name__ == '__main__':
    main()
