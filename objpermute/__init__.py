"""
Enumerate every combination of values in a mapping of keys to value-lists:

    >>> from objpermute import create_product_iterator
    >>> create_product_iterator(dict(x=[0, 1], y=[2, 3])).drain()
    [{'x': 0, 'y': 2}, {'x': 1, 'y': 2}, {'x': 0, 'y': 3}, {'x': 1, 'y': 3}]
"""

from objpermute.permutations import ProductIterator, Step, create_product_iterator, cartesian, is_axis  # noqa


__all__ = ["ProductIterator", "Step", "create_product_iterator", "cartesian", "is_axis"]
