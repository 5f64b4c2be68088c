"""
Command line entry point

Usage:
    rmqlca --mode rmq --array 10,8,9,2,4,5,1,16,4,7 --range 0 3 --range 3 8
    rmqlca --mode lca --tree tree.yaml --pair h i
    rmqlca --mode demo
"""

import argparse
import json
import logging
import os
import time
from typing import Dict, List, Optional

import yaml

from rmqlca.config import load_config, setup_logging
from rmqlca.euler_lca import EulerLCA
from rmqlca.rmq import TIE_BREAKS
from rmqlca.solvers import SOLVERS, build_rmq
from rmqlca.tree import Tree

logger = logging.getLogger(__name__)

DEMO_TREE = ("a", [
    ("b", ["c", "d", "e"]),
    ("f", [("g", ["h"]), "i"]),
])
DEMO_PAIRS = [("a", "a"), ("b", "f"), ("c", "e"), ("h", "i")]
DEMO_ARRAY = [10, 8, 9, 2, 4, 5, 1, 16, 4, 7]
DEMO_RANGES = [(0, 3), (0, 6), (3, 8), (0, 10)]


def parse_array(text: str) -> List[float]:
    """Parse a comma separated list of numbers, keeping ints as ints."""
    items = []
    for part in text.split(','):
        part = part.strip()
        if part:
            items.append(float(part) if any(c in part for c in '.eE') else int(part))
    return items


def load_tree(path: str) -> Tree:
    """Load a nested tree from a YAML or JSON file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Tree file not found: {path}")

    with open(path, 'r') as f:
        if path.endswith('.json'):
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    return Tree.from_nested(data)


def find_node(tree: Tree, name: str) -> int:
    """First node in pre-order whose value prints as name."""
    for node in tree.preorder():
        if str(tree.value(node)) == name:
            return node
    raise KeyError(name)


def solver_options(config: Dict, solver: str, tie_break: Optional[str]) -> Dict:
    options = {'tie_break': tie_break or config['rmq']['tie_break']}
    if solver == 'block':
        options['validate'] = config['rmq']['validate']
    return options


def run_rmq(array: List, ranges: List, solver: str, options: Dict):
    start_time = time.time()
    rmq = build_rmq(solver, array, **options)
    build_time = time.time() - start_time
    logger.info(f"Built {solver} solver over {len(array)} values in {build_time*1000:.2f}ms")

    for u, v in ranges:
        idx = rmq.query(u, v)
        print(f"RMQ[{u}, {v}) = index {idx} (value {array[idx]})")
    return rmq


def run_lca(tree: Tree, pairs: List):
    lca = EulerLCA(tree)
    logger.info(f"LCA structure: {lca.stats()}")

    for a, b in pairs:
        u = find_node(tree, a)
        v = find_node(tree, b)
        print(f"LCA({a}, {b}) = {lca.query_value(u, v)}")
    return lca


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Constant-time RMQ and LCA queries')
    parser.add_argument('--mode', choices=['rmq', 'lca', 'demo'], required=True,
                        help='Mode: range minimum queries, LCA queries, or run demo')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to YAML configuration')
    parser.add_argument('--array', type=str,
                        help='Comma separated values (for rmq mode)')
    parser.add_argument('--range', type=int, nargs=2, action='append', metavar=('U', 'V'),
                        help='Half-open query range, repeatable (for rmq mode)')
    parser.add_argument('--solver', type=str, choices=sorted(SOLVERS),
                        help='RMQ solver (default from config)')
    parser.add_argument('--tie-break', type=str, choices=TIE_BREAKS,
                        help='Which equal minimum wins (default from config)')
    parser.add_argument('--tree', type=str,
                        help='YAML/JSON nested tree file (for lca mode)')
    parser.add_argument('--pair', type=str, nargs=2, action='append', metavar=('A', 'B'),
                        help='Node values to query, repeatable (for lca mode)')

    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(config)
    solver = args.solver or config['rmq']['solver']

    if args.mode == 'rmq':
        if not args.array:
            parser.error("--array required for rmq mode")
        if not args.range:
            parser.error("--range required for rmq mode")

        try:
            array = parse_array(args.array)
        except ValueError as e:
            parser.error(f"--array: {e}")
        if not array:
            parser.error("--array must contain at least one value")
        for u, v in args.range:
            if not 0 <= u < v <= len(array):
                parser.error(f"range [{u}, {v}) is not within [0, {len(array)}]")

        run_rmq(array, args.range, solver, solver_options(config, solver, args.tie_break))

    elif args.mode == 'lca':
        if not args.tree:
            parser.error("--tree required for lca mode")
        if not args.pair:
            parser.error("--pair required for lca mode")

        tree = load_tree(args.tree)
        try:
            run_lca(tree, args.pair)
        except KeyError as e:
            parser.error(f"node {e.args[0]!r} not found in {args.tree}")

    elif args.mode == 'demo':
        print("Running Demo...")
        print("=" * 70)

        tree = Tree.from_nested(DEMO_TREE)
        tree.print_tree()
        run_lca(tree, DEMO_PAIRS)

        print("=" * 70)
        print(f"Array: {DEMO_ARRAY}")
        run_rmq(DEMO_ARRAY, DEMO_RANGES, solver, solver_options(config, solver, args.tie_break))


if __name__ == "__main__":
    main()
