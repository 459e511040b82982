import numbers


available_settings = {}

# Possible ways of computing a range sum / recovering a point value
available_settings['range_method'] = ['ancestor', 'prefix']
available_settings['point_method'] = ['ancestor', 'prefix']

# Possible ways of bulk loading the tree
available_settings['build_method'] = ['update', 'linear']


class InvalidIndexError(IndexError):
    """
    Raised when an update addresses a position outside ``[1, capacity)``.

    :ivar int index: the rejected index.
    :ivar int capacity: capacity of the tree at the time of the call.
    """
    def __init__(self, index, capacity):
        self.index = index
        self.capacity = capacity
        super().__init__("index {0} out of range [1, {1})".format(index, capacity))


def check_setting(name, value):
    assert value in available_settings[name], (
        "Unknown {0} '{1}', choose one of {2}".format(name, value, available_settings[name])
    )
    return value


def check_integer(value, name='index'):
    """ Returns *value* as a python int, rejecting bools and non integral types. """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError("{0} must be an integer, got {1!r}".format(name, value))
    return int(value)


def lowest_set_bit(idx):
    """
    Value of the least significant set bit of *idx*.

    Relies on two's complement negation: ``idx & -idx``. Only defined for
    positive indices.
    """
    if idx <= 0:
        raise ValueError("lowest set bit is only defined for positive indices, got {0}".format(idx))
    return idx & -idx


def next_index(idx):
    """ Next node on the update path (adds the lowest set bit). """
    return idx + lowest_set_bit(idx)


def prev_index(idx):
    """ Next node on the query path (strips the lowest set bit). """
    return idx - lowest_set_bit(idx)


def covered_range(idx):
    """ Inclusive logical positions (start, stop) whose sum is held by node *idx*. """
    return prev_index(idx) + 1, idx
