# AoC - Reference Solution for Day 3 (Part 1 & Part 2)
# Created:      2026-10-18
# Modified:     2026-10-18
# Author:       Kagan Dikmen

import argparse
import logging

from .schematic import Schematic, part_1, part_2


def solve_parts(input_txt):
    schematic = Schematic.from_text(input_txt)
    return part_1(schematic), part_2(schematic)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='day03',
        description='Sum part numbers and gear ratios of an engine schematic',
    )
    parser.add_argument('input_file', type=str,
                        help='schematic text file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    with open(args.input_file, 'r') as f:
        input = f.read()

    p1, p2 = solve_parts(input)

    print(f'Part 1: {p1}')
    print(f'Part 2: {p2}')

    return 0


if __name__ == '__main__':
    main()
