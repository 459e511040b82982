import argparse

from ..core.FenwickTree import FenwickTree
from ..core.utils import available_settings
from .commands import INVALID_INPUT, apply_command, format_menu, parse_command, prompts_for


def read_int(prompt, input_fn=input, print_fn=print):
    """ Prompts until an integer is entered. EOFError from *input_fn* is propagated. """
    while True:
        raw = input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            print_fn(INVALID_INPUT)


def run_shell(tree=None, input_fn=input, print_fn=print):
    """
    Interactive loop over a Fenwick tree.

    Asks for the number of elements unless *tree* is already initialised,
    then reads menu choices until quit or end of input.

    :returns: the final tree.
    """
    if tree is None:
        tree = FenwickTree()
    try:
        if tree.capacity <= 0:
            n = read_int("Enter number of elements: ", input_fn, print_fn)
            tree.init(n + 1)
        print_fn("")
        print_fn(format_menu())
        running = True
        while running:
            print_fn("")
            choice = read_int("Enter your choice: ", input_fn, print_fn)
            args = [read_int(prompt, input_fn, print_fn) for prompt in prompts_for(choice)]
            tree, output, running = apply_command(tree, parse_command(choice, args))
            if output:
                print_fn(output)
    except EOFError:
        print_fn("")
    return tree


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='bitree',
        description="Binary indexed tree: point updates and prefix/range sums.")

    parser.add_argument(
        "-v", "--values", type=int, nargs='+',
        help="initial values of positions 1..n (skips the size prompt)")

    parser.add_argument(
        "-p", "--print", action='store_true', dest='print_tree',
        help="print the original array and the tree, then exit")

    parser.add_argument(
        "-t", "--table", action='store_true',
        help="print every range sum, then exit")

    parser.add_argument(
        "--progress", action='store_true',
        help="show a progress bar while computing the range sum table")

    parser.add_argument(
        "--range-method", type=str, default='ancestor',
        choices=available_settings['range_method'],
        help="how range sums are computed")

    parser.add_argument(
        "--build-method", type=str, default='update',
        choices=available_settings['build_method'],
        help="how the initial values are loaded")

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    tree = FenwickTree(range_method=args.range_method)
    if args.values:
        tree.build([0] + args.values, method=args.build_method)
    if args.print_tree or args.table:
        if args.print_tree:
            tree.print_tree()
        if args.table:
            print(tree.range_sum_table(progress=args.progress).to_string(index=False))
        return 0
    run_shell(tree)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
