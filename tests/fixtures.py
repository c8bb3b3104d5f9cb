"""
Common code for tests.
"""
import attrs

from protomix import DataRecord


class Counter:
    """
    DataObject by duck typing, its own attributes are not part of the data.
    """
    def __init__(self, data):
        self.hidden = True
        self._data = data
        self.n_calls = 0

    def to_data(self):
        self.n_calls += 1
        return self._data


@attrs.define
class Position(DataRecord):
    x: float = 0
    y: float = 0
    tags: list = attrs.field(factory=list)
