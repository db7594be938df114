"""
Lazy enumeration of every combination of values in a mapping of keys to value-lists.

The mapping's values are 'axes'. Each combination picks one value from every axis,
and combinations are produced one at a time, in mixed-radix counting order, where the
first axis is the fastest-varying digit::

    >>> it = create_product_iterator(dict(x=[0, 1], y=[2, 3]))
    >>> it.advance()
    Step(finished=False, value={'x': 0, 'y': 2})
    >>> it.drain()
    [{'x': 1, 'y': 2}, {'x': 0, 'y': 3}, {'x': 1, 'y': 3}]
    >>> it.advance()
    Step(finished=True, value=None)

Entries that are not axes (anything but a non-empty list/tuple/range-like sequence)
are ignored, and input that is not a mapping at all yields nothing. Nothing here raises
on malformed input.
"""

import logging
from collections import namedtuple
from collections.abc import Mapping, Sequence
from functools import reduce
from operator import mul


_logger = logging.getLogger(__name__)


TEXT_TYPES = (str, bytes, bytearray)


Step = namedtuple("Step", "finished value")
Step.__doc__ = "The outcome of ``ProductIterator.advance``: ``value`` is the combination, or ``None`` when ``finished``"
_FINISHED = Step(True, None)


def is_axis(value):
    """
    Whether ``value`` can serve as an axis: a finite, indexable, non-empty sequence.
    Text is a sequence of characters, but is deliberately not an axis.
    """
    return isinstance(value, Sequence) and not isinstance(value, TEXT_TYPES) and len(value) > 0


class ProductIterator(object):
    """
    An iterator over all combinations of the axes in ``axis_map``.

    Use ``advance()`` to pull combinations one by one, ``drain()`` to collect the rest
    into a list, or simply iterate over it.

    Not safe for concurrent use; callers sharing an instance across threads must
    serialize access themselves.

    :param axis_map: a mapping of keys to lists of values. Any other value is accepted and treated as empty.
    """

    def __init__(self, axis_map):
        self._axis_map = axis_map
        self._keys = []
        self._axes = []
        self._cursor = []
        self._length_estimate = 0

        dropped = []
        if isinstance(axis_map, Mapping):
            for key, values in axis_map.items():
                if is_axis(values):
                    self._keys.append(key)
                    self._axes.append(values)
                    self._cursor.append(0)
                    self._length_estimate += len(values)
                else:
                    dropped.append(key)
        elif axis_map is not None:
            _logger.debug("Not a mapping (%s), no combinations to produce", type(axis_map).__name__)

        self._count = reduce(mul, map(len, self._axes), 1) if self._axes else 0
        self._finished = not self._keys
        _logger.debug("Permuting %s (%s combinations); ignored: %s", self._keys, self._count, dropped)

    def __repr__(self):
        state = "finished" if self._finished else "%s remaining" % self.remaining
        return "<%s %s: %s of %s>" % (self.__class__.__name__, list(self._keys), state, self._count)

    @property
    def axis_map(self):
        "The mapping this iterator was created with"
        return self._axis_map

    @property
    def length_estimate(self):
        "The sum of the axis lengths - not the number of combinations, see ``count``"
        return self._length_estimate

    @property
    def count(self):
        "The total number of combinations"
        return self._count

    @property
    def finished(self):
        "Whether all combinations were produced"
        return self._finished

    @property
    def keys(self):
        "The keys that are axes, in the order their indices are counted"
        return tuple(self._keys)

    @property
    def cursor(self):
        "A snapshot of the current index into each axis"
        return tuple(self._cursor)

    @property
    def remaining(self):
        "The number of combinations yet to be produced"
        if self._finished:
            return 0
        position = 0
        weight = 1
        for index, axis in zip(self._cursor, self._axes):
            position += index * weight
            weight *= len(axis)
        return self._count - position

    def advance(self):
        """
        Produce the next combination.

        Returns a ``Step``; once the space is exhausted this keeps returning
        ``Step(finished=True, value=None)``, however many times it is called.
        """
        if self._finished:
            return _FINISHED

        combination = {}
        carry = True  # the first axis always moves
        for i, (key, axis) in enumerate(zip(self._keys, self._axes)):
            index = self._cursor[i]
            combination[key] = axis[index]
            if carry:
                index += 1
                carry = index >= len(axis)
                self._cursor[i] = 0 if carry else index

        if carry:
            # every axis wrapped around - this was the last one
            self._finished = True
            _logger.debug("Exhausted all %s combinations of %s", self._count, self._keys)

        return Step(False, combination)

    def drain(self):
        """
        Collect the combinations not yet produced into a list.

        This holds them all in memory at once; prefer iterating when the space is large.
        """
        results = []
        while True:
            finished, combination = self.advance()
            if finished:
                break
            results.append(combination)
        return results

    def __iter__(self):
        return self

    def __next__(self):
        finished, combination = self.advance()
        if finished:
            raise StopIteration
        return combination

    def __length_hint__(self):
        return self.remaining


def create_product_iterator(axis_map):
    """
    Accepts a mapping whose values are lists of possible values, and returns a
    ``ProductIterator`` over every combination of them.

    For example, ``{'x': [0, 1], 'y': [2, 3]}`` has the combinations
    ``{'x': 0, 'y': 2}``, ``{'x': 1, 'y': 2}``, ``{'x': 0, 'y': 3}`` and ``{'x': 1, 'y': 3}``.

    Keys referring to an empty list, or to anything that isn't a list-like sequence, are
    disregarded and won't appear in any combination. Never raises.
    """
    return ProductIterator(axis_map)


def cartesian(**kwargs):
    """
    Given keyword arguments with sequence values, yields dictionaries of all
    possible keyword/value permutations.

    Example:

        >>> list(cartesian(a=[1,2], b=tuple("xy")))
        [{'a': 1, 'b': 'x'},
         {'a': 2, 'b': 'x'},
         {'a': 1, 'b': 'y'},
         {'a': 2, 'b': 'y'}]

    Note that a string is not an axis - ``b="xy"`` would be ignored.
    """
    yield from create_product_iterator(kwargs)
