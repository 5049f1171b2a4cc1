"""
Sample points and test case records.

A record looks like:
    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}, ...}
Each numeric key is the x coordinate; its decoded value is y.
"""

import json
from collections import namedtuple

from errors import DuplicateX, InsufficientPoints, MalformedRecord
from radix import decode

Point = namedtuple('Point', ['x', 'y'])


class SampleSet:
    """Ordered, immutable sequence of points with distinct x values."""

    def __init__(self, points):
        self.points = tuple(Point(int(x), int(y)) for x, y in points)

        seen = set()
        for point in self.points:
            if point.x in seen:
                raise DuplicateX(point.x)
            seen.add(point.x)

    def select(self, k):
        """Return the first k points in insertion order."""
        if k < 1 or k > len(self.points):
            raise InsufficientPoints(len(self.points), k)
        return self.points[:k]

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __repr__(self):
        return f"SampleSet({list(self.points)})"


class TestCase:
    """Declared point count n, selection count k and the decoded samples."""

    __test__ = False  # not a pytest collection target

    def __init__(self, n, k, samples):
        self.n = n
        self.k = k
        self.samples = samples

    def __repr__(self):
        return f"TestCase(n={self.n}, k={self.k}, samples={self.samples!r})"


def _read_count(keys, name):
    value = keys.get(name)
    if isinstance(value, bool):
        raise MalformedRecord(f"'keys.{name}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedRecord(f"'keys.{name}' must be an integer, got {value!r}")


def from_record(record):
    """
    Decode a record into a TestCase.

    Every numeric key is read regardless of n, so gaps in the indices
    (e.g. 1, 2, 3, 6) are tolerated. Points are ordered by key.
    """
    if not isinstance(record, dict) or not isinstance(record.get('keys'), dict):
        raise MalformedRecord("Record must contain a 'keys' object")

    n = _read_count(record['keys'], 'n')
    k = _read_count(record['keys'], 'k')

    entries = []
    for key, entry in record.items():
        if key == 'keys':
            continue
        if not isinstance(key, str) or not key.isascii() or not key.isdigit():
            raise MalformedRecord(f"Unexpected key {key!r}")
        if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
            raise MalformedRecord(f"Entry {key!r} needs 'base' and 'value'")
        if not isinstance(entry['value'], str):
            raise MalformedRecord(f"Entry {key!r} value must be a string, got {entry['value']!r}")
        entries.append((int(key), entry))

    entries.sort(key=lambda item: item[0])
    points = [(x, decode(entry['value'], entry['base'])) for x, entry in entries]

    return TestCase(n, k, SampleSet(points))


def load(path):
    """Read a JSON test case file."""
    with open(path, encoding='utf-8') as f:
        record = json.load(f)
    return from_record(record)
