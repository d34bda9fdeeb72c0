from .context import ContextKey
from .distribution import FrequencyDistribution, SampleIndexError
from .markov_chain import Generator, MarkovChain, UnseenContextError

__all__ = [
    'ContextKey',
    'FrequencyDistribution',
    'Generator',
    'MarkovChain',
    'SampleIndexError',
    'UnseenContextError',
]
