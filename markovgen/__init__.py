"""Order-k Markov chain text generation."""
from .markov_chain import (
    ContextKey,
    FrequencyDistribution,
    Generator,
    MarkovChain,
    SampleIndexError,
    UnseenContextError,
)

__version__ = "0.1.0"
