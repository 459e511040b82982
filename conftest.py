import pytest

from BITree.core.FenwickTree import FenwickTree


VALUES = [0, 1, 2, 3, 4, 5]


@pytest.fixture
def values():
    return list(VALUES)


@pytest.fixture(params=['ancestor', 'prefix'])
def method(request):
    return request.param


@pytest.fixture
def tree(method):
    return FenwickTree.from_values(VALUES, range_method=method, point_method=method)
