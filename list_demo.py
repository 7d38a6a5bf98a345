#!/usr/bin/env python3
"""
Persistent List Demo

Builds sample lists, calls each operation and prints one line per call in
the form "<description> = <result>".

Usage:
    python list_demo.py [-s SECTION ...] [--list-sections] [--raw] [--stress N]

Examples:
    python list_demo.py                      # Run every section
    python list_demo.py -s drop -s init      # Run only the drop and init sections
    python list_demo.py --list-sections      # Show the available sections
    python list_demo.py --raw -s reverse     # Show lists in constructor form
    python list_demo.py --stress 100000      # Exercise the loop-based operations
"""

import sys
import argparse
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from persistent_list import (
    Empty, Node, EMPTY, PersistentList,
    list_of, of, cons,
    fold_left, fold_right, fold_left_via_right, map,
    sum_list, sum_left, product_left,
    length, length_left,
    tail, set_head, drop, drop_while, init, reverse,
    append, concat, stringify,
)


class DemoError(Exception):
    """Invalid demo request"""
    pass


@dataclass
class DemoLine:
    """One printed call: a description and a thunk producing the result."""
    description: str
    compute: Callable[[], Any]
    raw: bool = False  # Always render list results with repr()


# ============================================================================
# Pattern matching
# ============================================================================

def _heads(lst: PersistentList, count: int) -> Optional[List[Any]]:
    """First ``count`` heads, or None if the list is shorter than that."""
    heads = []
    cur = lst
    for _ in range(count):
        if not isinstance(cur, Node):
            return None
        heads.append(cur.head)
        cur = cur.tail
    return heads


def match_example(lst: PersistentList) -> int:
    """
    Evaluate guarded shape patterns top to bottom; the first match wins.

        Node(x, Node(2, Node(4, _)))            -> x
        Empty                                   -> 42
        Node(x, Node(y, Node(3, Node(4, _))))   -> x + y
        Node(h, t)                              -> h + sum_list(t)
        _                                       -> 101
    """
    three = _heads(lst, 3)
    if three is not None and three[1] == 2 and three[2] == 4:
        return three[0]

    if isinstance(lst, Empty):
        return 42

    four = _heads(lst, 4)
    if four is not None and four[2] == 3 and four[3] == 4:
        return four[0] + four[1]

    if isinstance(lst, Node):
        return lst.head + sum_list(lst.tail)

    return 101


# ============================================================================
# Sections
# ============================================================================

def build_sections() -> Dict[str, List[DemoLine]]:
    """Demo sections in display order."""
    abc = list_of("a", "b", "c")
    return {
        "match": [
            DemoLine("x", lambda: match_example(list_of(1, 2, 3, 4, 5))),
        ],
        "tail": [
            DemoLine("tail(list_of(1, 2, 3))", lambda: tail(list_of(1, 2, 3))),
        ],
        "set_head": [
            DemoLine("set_head(list_of(1, 2, 3), 4)",
                     lambda: set_head(list_of(1, 2, 3), 4)),
        ],
        "drop": [
            DemoLine(f"drop(list_of(1, 2, 3), {n})",
                     lambda n=n: drop(list_of(1, 2, 3), n))
            for n in range(5)
        ],
        "drop_while": [
            DemoLine("drop_while(list_of(1, 2, 3), x > 1)",
                     lambda: drop_while(list_of(1, 2, 3), lambda x: x > 1)),
            DemoLine("drop_while(list_of(1, 2, 3), x < 2)",
                     lambda: drop_while(list_of(1, 2, 3), lambda x: x < 2)),
            DemoLine("drop_while(list_of(1, 2, 3, 1, 2), x < 3)",
                     lambda: drop_while(list_of(1, 2, 3, 1, 2), lambda x: x < 3)),
            DemoLine("drop_while(list_of(1, 2, 3), x < 4)",
                     lambda: drop_while(list_of(1, 2, 3), lambda x: x < 4)),
        ],
        "init": [
            DemoLine("init(list_of(1, 2, 3))", lambda: init(list_of(1, 2, 3))),
        ],
        "fold_right": [
            # Rebuilding with cons gives back the original list
            DemoLine("fold_right(list_of(1, 2, 3), EMPTY, cons)",
                     lambda: fold_right(list_of(1, 2, 3), EMPTY, cons), raw=True),
        ],
        "length": [
            DemoLine("length(list_of(9, 23, 34, 0))",
                     lambda: length(list_of(9, 23, 34, 0))),
        ],
        "fold_left": [
            DemoLine("fold_left(list_of(1, 2, 3), 0, +)",
                     lambda: fold_left(list_of(1, 2, 3), 0, lambda acc, x: acc + x)),
        ],
        "folds": [
            DemoLine("sum_left(list_of(1, 2, 5))", lambda: sum_left(list_of(1, 2, 5))),
            DemoLine("product_left(list_of(1, 2, 5))",
                     lambda: product_left(list_of(1, 2, 5))),
            DemoLine("length_left(list_of(3, 2, 1))",
                     lambda: length_left(list_of(3, 2, 1))),
        ],
        "reverse": [
            DemoLine("reverse(list_of(1, 2, 3))", lambda: reverse(list_of(1, 2, 3))),
        ],
        "fold_order": [
            DemoLine("fold_left(list_of(a, b, c), '', acc + x)",
                     lambda: fold_left(abc, "", lambda acc, x: acc + x)),
            DemoLine("fold_left_via_right(list_of(a, b, c), '', acc + x)",
                     lambda: fold_left_via_right(abc, "", lambda acc, x: acc + x)),
            DemoLine("fold_right(list_of(a, b, c), '', acc + x)",
                     lambda: fold_right(abc, "", lambda x, acc: acc + x)),
        ],
        "append": [
            DemoLine("append(list_of(1, 2, 3), list_of(4, 5, 6))",
                     lambda: append(list_of(1, 2, 3), list_of(4, 5, 6))),
        ],
        "concat": [
            DemoLine("concat(list_of(list_of(1, 2, 3), list_of(4, 5, 6), list_of(7, 8, 9)))",
                     lambda: concat(list_of(list_of(1, 2, 3), list_of(4, 5, 6),
                                            list_of(7, 8, 9)))),
        ],
        "map": [
            DemoLine("map(list_of(1, 2, 3), x * 10)",
                     lambda: map(list_of(1, 2, 3), lambda x: x * 10)),
        ],
    }


def render_result(value: Any, raw: bool = False) -> str:
    """List results use stringify (repr under raw); scalars use str()."""
    if isinstance(value, (Empty, Node)):
        return repr(value) if raw else stringify(value)
    return str(value)


def run_demo(sections: Optional[List[str]] = None, raw: bool = False) -> List[str]:
    """
    Evaluate demo sections and return the printed lines.

    Args:
        sections: Section names to run in the given order (default: all)
        raw: Render list results with repr() instead of stringify

    Returns:
        One "<description> = <result>" line per call
    """
    available = build_sections()
    names = list(available) if not sections else sections

    unknown = [name for name in names if name not in available]
    if unknown:
        raise DemoError(f"unknown section(s): {', '.join(unknown)}")

    lines = []
    for name in names:
        for line in available[name]:
            result = render_result(line.compute(), raw or line.raw)
            lines.append(f"{line.description} = {result}")
    return lines


def run_stress(size: int) -> List[str]:
    """Run the loop-based operations over a list of ``size`` integers."""
    if size < 0:
        raise DemoError(f"stress size must be non-negative, got {size}")

    big = of(range(size))
    reversed_big = reverse(big)
    first = reversed_big.head if isinstance(reversed_big, Node) else None
    return [
        f"length_left(of(range({size}))) = {length_left(big)}",
        f"sum_left(of(range({size}))) = {sum_left(big)}",
        f"reverse(of(range({size}))).head = {first}",
        f"length(init(of(range({size})))) = {length(init(big))}",
        f"length(append(big, big)) = {length(append(big, big))}",
    ]


def main():
    parser = argparse.ArgumentParser(
        description="Persistent List Demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      Run every section
  %(prog)s -s drop -s init      Run only the drop and init sections
  %(prog)s --list-sections      Show the available sections
  %(prog)s --raw -s reverse     Show lists in constructor form
  %(prog)s --stress 100000      Exercise the loop-based operations
        """
    )

    parser.add_argument("-s", "--section", action="append", dest="sections",
                        metavar="NAME", help="Run only this section (repeatable)")
    parser.add_argument("--list-sections", action="store_true",
                        help="Print section names and exit")
    parser.add_argument("--raw", action="store_true",
                        help="Render list results with repr() instead of stringify")
    parser.add_argument("--stress", type=int, metavar="N",
                        help="Run the loop-based operations on an N-element list")

    args = parser.parse_args()

    if args.list_sections:
        for name in build_sections():
            print(name)
        return

    try:
        if args.stress is not None:
            lines = run_stress(args.stress)
        else:
            lines = run_demo(args.sections, raw=args.raw)
    except DemoError as e:
        print(f"Demo failed: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Internal demo error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(2)

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
