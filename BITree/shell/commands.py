INVALID_INDEX = "  incorrect index given..."
INVALID_INPUT = "  invalid input given..."

# Menu choice -> (command name, label, prompts for the integer arguments)
menu = {
    1: ('add', 'Add a number at an index', ["  Enter number to add: ", "  Enter index: "]),
    2: ('sum', 'Query sum', ["  Enter index: "]),
    3: ('quit', 'Quit', []),
    4: ('range', 'Query sum of a range', ["  Enter start index: ", "  Enter end index: "]),
    5: ('value', 'Query value at an index', ["  Enter index: "]),
    6: ('print', 'Print tree', []),
}


def format_menu():
    return "\n".join("{0}. {1}".format(choice, label) for choice, (_, label, _) in sorted(menu.items()))


def prompts_for(choice):
    if choice not in menu:
        return []
    return menu[choice][2]


def parse_command(choice, args=()):
    """ Maps a menu choice and its integer arguments to a command tuple. Unknown choices quit. """
    if choice not in menu:
        return ('quit',)
    name, _, prompts = menu[choice]
    args = tuple(args)
    if len(args) != len(prompts):
        raise ValueError("command '{0}' expects {1} arguments, got {2}".format(name, len(prompts), len(args)))
    return (name,) + args


def apply_command(tree, command):
    """
    Runs one shell command against *tree*.

    The input tree is never modified: an ``add`` works on a copy.

    :returns: (tree, output, running) where *output* is the text to show
        (possibly empty) and *running* is False once the shell should stop.
    """
    name, args = command[0], command[1:]
    if name == 'quit':
        return tree, "", False
    if name == 'add':
        value, idx = args
        if not tree.is_valid_index(idx):
            return tree, INVALID_INDEX, True
        tree = tree.copy()
        tree.update(idx, value)
        return tree, "", True
    if name == 'sum':
        idx, = args
        if not tree.is_valid_index(idx):
            return tree, INVALID_INDEX, True
        return tree, "    sum = {0}".format(tree.prefix_sum(idx)), True
    if name == 'range':
        start, end = args
        if not (tree.is_valid_index(start) and tree.is_valid_index(end)):
            return tree, INVALID_INDEX, True
        return tree, "    sum[{0}:{1}] = {2}".format(start, end, tree.range_sum(start, end)), True
    if name == 'value':
        idx, = args
        if not tree.is_valid_index(idx):
            return tree, INVALID_INDEX, True
        return tree, "    value = {0}".format(tree.point_value(idx)), True
    if name == 'print':
        return tree, tree.format_tree(), True
    raise ValueError("Unknown command {0!r}".format(name))
