import random
from collections import Counter


class SampleIndexError(IndexError):
    """Raised when a sample index falls outside ``[0, total)``."""


class FrequencyDistribution:
    """
    Counts of the values observed after one context.

    Values keep the order in which they were first seen, so the flattened
    view used by ``sample_by_index`` is deterministic: the same history and
    the same index always give the same value.
    """
    def __init__(self):
        self.counts = Counter()
        self.total = 0

    def add(self, value):
        self.counts[value] += 1
        self.total += 1

    def count(self, value):
        return self.counts[value]

    def sample_by_index(self, index):
        """
        Returns the value at ``index`` in the flattened distribution, where
        each value is repeated ``count`` times in first-seen order.
        """
        if index < 0 or index >= self.total:
            raise SampleIndexError(f"Sample index {index} out of range for total {self.total}")
        for value, count in self.counts.items():
            index -= count
            if index < 0:
                return value
        # Unreachable while total matches the sum of counts
        raise AssertionError("Frequency distribution total is out of sync with its counts")

    def sample_random(self, rng=None):
        """Weighted random pick: ``value`` comes back with probability count/total."""
        if rng is None:
            rng = random.Random()
        return self.sample_by_index(rng.randrange(self.total))

    def __len__(self):
        return len(self.counts)

    def __iter__(self):
        return iter(self.counts.items())

    def __contains__(self, value):
        return value in self.counts

    def __repr__(self):
        return f"FrequencyDistribution({dict(self.counts)!r}, total={self.total})"
