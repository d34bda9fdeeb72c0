import itertools
import logging
import random
from collections import defaultdict
from types import MappingProxyType

from .context import ContextKey
from .distribution import FrequencyDistribution

logger = logging.getLogger(__name__)


class UnseenContextError(LookupError):
    """Raised when generation reaches a context that was never recorded."""


class Generator:
    """
    Pulls an unbounded sequence of values out of a transition table.

    Each generator owns its context key and random source, and only ever
    reads the table. Sentinels drawn from the table move the key forward
    but are never returned.
    """
    def __init__(self, table, order, sentinel=None, rng=None):
        self.table = table
        self.sentinel = sentinel
        self.rng = rng if rng is not None else random.Random()
        self.start = self.key = ContextKey.initial(order, sentinel)
        logger.debug(f"Created generator at context {self.key!r}.")

    def __iter__(self):
        return self

    def __next__(self):
        while True:
            distribution = self.table.get(self.key)
            if distribution is None:
                raise UnseenContextError(f"No transitions recorded for context {self.key!r}. Ingest a sequence first.")
            # Only empty sequences were ingested: sampling would spin on sentinels forever
            if self.key == self.start and len(distribution) == 1 and self.sentinel in distribution:
                raise UnseenContextError("Only empty sequences have been ingested; there are no tokens to generate.")
            candidate = distribution.sample_random(self.rng)
            self.key = self.key.advance(candidate)
            if candidate != self.sentinel:
                return candidate

    def take(self, n):
        return list(itertools.islice(self, n))


class MarkovChain:
    """
    An order-k Markov chain over arbitrary hashable tokens.

    ``sentinel`` marks the start and end of a sequence and must never equal a
    real token. Every ``ingest`` call is treated as its own sequence: it
    starts from an all-sentinel context and finishes with ``order`` sentinel
    steps so the chain learns how sequences end.

    The table is shared, unlocked state. Callers that ingest from several
    threads, or ingest while generating, must synchronize themselves.
    """
    def __init__(self, order=2, sentinel=None):
        if isinstance(order, bool) or not isinstance(order, int) or order < 1:
            raise ValueError(f"Order must be a positive integer, got {order!r}")
        self.order = order
        self.sentinel = sentinel
        self.model = defaultdict(FrequencyDistribution)

    def ingest(self, tokens, transform=None):
        """
        Records every (context -> next token) pair in ``tokens``.

        ``transform`` is an optional callable applied to each token before it
        is recorded, e.g. ``train.trim_token``. The whole input is checked
        before anything is recorded, so a rejected sequence leaves the table
        untouched.
        """
        if transform is not None:
            tokens = map(transform, tokens)
        tokens = list(tokens)

        for token in tokens:
            if token == self.sentinel:
                raise ValueError(f"Token {token!r} collides with the chain's sentinel")

        key = ContextKey.initial(self.order, self.sentinel)
        # Pad with sentinels so the chain learns how to wind down
        for value in itertools.chain(tokens, itertools.repeat(self.sentinel, self.order)):
            self.model[key].add(value)
            key = key.advance(value)

        logger.debug(f"Ingested {len(tokens)} tokens; table now holds {len(self.model)} contexts.")

    def stream(self, rng=None):
        """Returns a lazy, unbounded ``Generator`` over this chain's table."""
        return Generator(self.model, self.order, self.sentinel, rng)

    def generate(self, count, rng=None):
        if count < 0:
            raise ValueError(f"Count must be non-negative, got {count}")
        return self.stream(rng).take(count)

    @staticmethod
    def _as_key(key):
        # A bare string is one token, not a sequence of characters
        if isinstance(key, ContextKey):
            return key
        if isinstance(key, str):
            return ContextKey((key,))
        return ContextKey(key)

    def distribution(self, key):
        """
        Looks up the distribution recorded for ``key``: a ContextKey, a
        sequence of tokens, or a single string token for order-1 chains.
        """
        return self.model.get(self._as_key(key))

    @property
    def table(self):
        return MappingProxyType(self.model)

    def __len__(self):
        return len(self.model)

    def __contains__(self, key):
        return self._as_key(key) in self.model

    def __repr__(self):
        return f"MarkovChain(order={self.order}, sentinel={self.sentinel!r}, contexts={len(self.model)})"
