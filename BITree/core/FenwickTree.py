import numpy as np
import pandas as pd
from tqdm import tqdm

from .utils import (InvalidIndexError, check_integer, check_setting, covered_range,
                    lowest_set_bit, next_index, prev_index)


class FenwickTree(object):
    """
    A data structure for maintaining cumulative (prefix) sums over a fixed
    size sequence of integers (aka "binary indexed tree").
    Adding to a value is O(log n).
    Calculating a prefix sum or a range sum is O(log n).
    Retrieving a single value is O(log n) as well, without any shadow copy
    of the original sequence.

    Positions are 1-based: ``nodes[0]`` is an unused sentinel and the usable
    positions are ``1 .. capacity - 1``. Node ``i`` holds the sum of the
    original values over ``(i - lowbit(i), i]``.

    :param int capacity: (default=0)
        Number of slots, sentinel included. A capacity <= 0 leaves the tree
        uninitialised, i.e. every index is invalid.

    :param str range_method: (default='ancestor')
        ``'ancestor'`` walks down from the end of the range to the common
        ancestor and corrects with the path of ``start - 1``. ``'prefix'``
        subtracts two prefix sums. Both return the same numbers.

    :param str point_method: (default='ancestor')
        Same choice for :meth:`point_value`.

    :param bool verbose: (default=False)
        Print a line when the tree is (re)initialised.

    .. rubric:: Error policy

    - :meth:`update` on an invalid index raises :class:`InvalidIndexError`
      and leaves the tree untouched.
    - Queries on an invalid index return 0.
    - An uninitialised tree behaves as a tree of capacity 0.

    **Example:**

    .. code-block:: python

        tree = FenwickTree.from_values([0, 1, 2, 3, 4, 5])
        tree.prefix_sum(3)    # 6
        tree.range_sum(2, 4)  # 9
        tree.update(3, 10)
        tree.point_value(3)   # 13
    """
    def __init__(self, capacity=0, range_method='ancestor', point_method='ancestor', verbose=False):
        self.settings = {}
        self.settings['range_method'] = check_setting('range_method', range_method)
        self.settings['point_method'] = check_setting('point_method', point_method)
        self.verbose = verbose
        self.capacity = 0
        self.nodes = []
        self.init(capacity)

    @classmethod
    def from_values(cls, values, method='update', **settings):
        """ Builds a tree from *values* (``values[0]`` is ignored). """
        tree = cls(**settings)
        tree.build(values, method=method)
        return tree

    def init(self, capacity):
        """ Allocates *capacity* zeroed slots. A capacity <= 0 is ignored. """
        capacity = check_integer(capacity, 'capacity')
        if capacity <= 0:
            return
        self.capacity = capacity
        self.nodes = [0] * capacity
        if self.verbose:
            print("init: capacity {0} ({1} positions)".format(self.capacity, len(self)))

    def build(self, values, method='update'):
        """
        Loads the tree from *values*, whose element 0 is an unused sentinel.

        With ``method='update'`` every position is added once, in increasing
        order, starting from an all zero tree: O(n log n).
        With ``method='linear'`` each node is pushed once into its parent: O(n).
        Both give the same nodes.
        """
        check_setting('build_method', method)
        values = list(values)
        capacity = len(values)
        values = [check_integer(v, 'value') for v in values[1:]]
        if method == 'update':
            self.capacity = capacity
            self.nodes = [0] * capacity
            for idx, value in enumerate(values, start=1):
                self.update(idx, value)
        else:
            nodes = [0] + values if capacity else []
            for idx in range(1, capacity):
                parent_idx = next_index(idx) # parent in update tree
                if parent_idx < capacity:
                    nodes[parent_idx] += nodes[idx]
            self.capacity = capacity
            self.nodes = nodes
        if self.verbose:
            print("build ({0}): {1} positions, total {2}".format(method, len(self), self.total()))

    def __len__(self):
        return max(self.capacity - 1, 0)

    def is_valid_index(self, idx):
        if isinstance(idx, bool) or not isinstance(idx, (int, np.integer)):
            return False
        return 1 <= idx < self.capacity

    def lowest_set_bit(self, idx):
        return lowest_set_bit(idx)

    def update(self, idx, delta):
        """ Adds *delta* to the value at position *idx*. """
        idx = check_integer(idx)
        delta = check_integer(delta, 'delta')
        if not self.is_valid_index(idx):
            raise InvalidIndexError(idx, self.capacity)
        while idx < self.capacity:
            self.nodes[idx] += delta
            idx = next_index(idx)

    def prefix_sum(self, idx):
        """ Returns the sum of positions 1..idx (inclusive), 0 for an invalid index. """
        idx = check_integer(idx)
        if not self.is_valid_index(idx):
            return 0
        _sum = 0
        while idx > 0:
            _sum += self.nodes[idx]
            idx = prev_index(idx)
        return _sum

    def range_sum(self, start, end):
        """ Returns the sum of positions start..end (inclusive). """
        start = check_integer(start, 'start')
        end = check_integer(end, 'end')
        if start > end:
            return 0
        if not (self.is_valid_index(start) and self.is_valid_index(end)):
            return 0
        if self.settings['range_method'] == 'prefix':
            return self.prefix_sum(end) - self.prefix_sum(start - 1)

        # Add nodes from end until we pass below start: the last index reached
        # is the common ancestor of start - 1 and end.
        _sum = 0
        ancestor_idx = end
        while ancestor_idx >= start:
            _sum += self.nodes[ancestor_idx]
            ancestor_idx = prev_index(ancestor_idx)

        predecessor_idx = start - 1
        while predecessor_idx > ancestor_idx:
            _sum -= self.nodes[predecessor_idx]
            predecessor_idx = prev_index(predecessor_idx)
        return _sum

    def point_value(self, idx):
        """ Returns the original value at position *idx*, 0 for an invalid index. """
        idx = check_integer(idx)
        if not self.is_valid_index(idx):
            return 0
        if self.settings['point_method'] == 'prefix':
            return self.prefix_sum(idx) - self.prefix_sum(idx - 1)

        # Node idx covers (ancestor, idx]; the path of idx - 1 down to the
        # ancestor holds exactly the part of that block before idx.
        value = self.nodes[idx]
        ancestor_idx = prev_index(idx)
        predecessor_idx = idx - 1
        while predecessor_idx > ancestor_idx:
            value -= self.nodes[predecessor_idx]
            predecessor_idx = prev_index(predecessor_idx)
        return value

    def __getitem__(self, idx):
        return self.point_value(idx)

    def __setitem__(self, idx, value):
        # It's more efficient to use update directly, as opposed to
        # __setitem__, since the latter calls __getitem__.
        self.update(idx, check_integer(value, 'value') - self[idx])

    def total(self):
        return self.prefix_sum(self.capacity - 1)

    def values(self):
        """ Retrieves all original values in O(n), sentinel included. """
        _values = [0] * self.capacity
        for idx in range(1, self.capacity):
            _values[idx] += self.nodes[idx]
            parent_idx = next_index(idx)
            if parent_idx < self.capacity:
                _values[parent_idx] -= self.nodes[idx]
        return _values

    def copy(self):
        tree = FenwickTree(range_method=self.settings['range_method'], point_method=self.settings['point_method'], verbose=self.verbose)
        tree.capacity = self.capacity
        tree.nodes = list(self.nodes)
        return tree

    def __eq__(self, other):
        return isinstance(other, FenwickTree) and self.capacity == other.capacity and self.nodes == other.nodes

    def __repr__(self):
        return "FenwickTree(capacity={0}, values={1})".format(self.capacity, self.values()[1:])

    def check_invariant(self, values=None):
        """
        Checks that every node holds the sum of its block of *values*
        (defaults to :meth:`values`). Mismatches are printed.

        :returns: True if all the nodes are consistent.
        """
        if values is None:
            values = self.values()
        vals = np.asarray(values, dtype=np.int64)
        if vals.shape[0] != self.capacity:
            raise ValueError("expected {0} values, got {1}".format(self.capacity, vals.shape[0]))
        ok = True
        for i in range(1, self.capacity):
            start, stop = covered_range(i)
            s = int(np.sum(vals[start:stop + 1]))
            if self.nodes[i] != s:
                print("cum sum error at node {0}: {1} != {2} (positions {3}..{4})".format(i, self.nodes[i], s, start, stop))
                ok = False
        return ok

    def to_frame(self):
        """ One row per position: original value, node content and the positions the node sums. """
        _values = self.values()
        rows = []
        for idx in range(1, self.capacity):
            start, stop = covered_range(idx)
            rows.append({
                'index': idx,
                'value': _values[idx],
                'node': self.nodes[idx],
                'covers': ' + '.join(str(i) for i in range(start, stop + 1)),
            })
        return pd.DataFrame(rows, columns=['index', 'value', 'node', 'covers'])

    def format_tree(self):
        lines = ["********** ORIGINAL TREE *********"]
        rows = self.to_frame().to_dict('records')
        for row in rows:
            lines.append("    ARR[{0:2d}]: {1:4d}".format(row['index'], row['value']))
        lines.append("********** FENWICK TREE **********")
        for row in rows:
            lines.append("    BIT[{0:2d}]: {1:4d}    // {2}".format(row['index'], row['node'], row['covers']))
        lines.append("**********************************")
        return "\n".join(lines)

    def print_tree(self):
        """ Prints the original array and the binary indexed tree array. """
        print(self.format_tree())

    def range_sum_table(self, progress=False):
        """ Every range sum [start, end] with 1 <= start <= end < capacity. """
        rows = []
        for start in tqdm(range(1, self.capacity), disable=not progress, desc='range sums'):
            for end in range(start, self.capacity):
                rows.append((start, end, self.range_sum(start, end)))
        return pd.DataFrame(rows, columns=['start', 'end', 'sum'])
