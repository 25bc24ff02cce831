#!/usr/bin/env python3
"""Solve the bookshelf puzzle from the console."""

import argparse
import logging
import sys

from io_files import write_layout_view_html, write_solution
from progress import reset as progress_reset, set_done
from puzzle import initial_puzzle_state
from render import render_result
from solver.orchestrator import NO_SOLUTION_REASON, solve_orchestrator


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Bookshelf packing puzzle solver")
    parser.add_argument("--quiet", action="store_true", help="Only print the solution")
    parser.add_argument("--write", metavar="DIR", help="Also write solution.txt and layout_view.html into DIR")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log search progress to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    node = initial_puzzle_state()
    if not args.quiet:
        print(node.description)

    progress_reset()
    ok, grid, reason, meta = solve_orchestrator(node)
    set_done(ok, reason=reason)

    if grid is not None:
        print(grid.description)
    else:
        print(NO_SOLUTION_REASON)

    if args.write:
        write_solution(grid, args.write)
        if grid is not None:
            svg, legend = render_result(grid)
            write_layout_view_html(svg, legend, args.write)

    if not args.quiet:
        print(f"{meta['stats']['nodes']} nodes, {meta['elapsed_sec']:.2f}s")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
