import logging
from pathlib import Path

from .. import config

logger = logging.getLogger(__name__)


def trim_token(token):
    """Strips surrounding whitespace from words but leaves single characters alone."""
    return token.strip() if len(token) > 1 else token


def tokenize(text, split='word'):
    """Splits ``text`` into tokens using the pattern for ``split`` ('word' or 'char')."""
    try:
        pattern = config.SPLIT_PATTERNS[split]
    except KeyError:
        raise ValueError(f"Unknown split method {split!r}; expected one of {sorted(config.SPLIT_PATTERNS)}") from None
    return [token for token in pattern.split(text) if token]


def read_tokens(file_path, split='word'):
    with open(file_path, 'r', encoding='utf-8') as f:
        content = f.read()
    return tokenize(content, split)


def add_file(chain, file_path, split='word'):
    """
    Reads one text file and ingests its tokens into ``chain`` as a single
    sequence. Returns the number of tokens ingested.
    """
    file_path = Path(file_path)
    logger.info(f"Processing {file_path}...")
    tokens = read_tokens(file_path, split)
    chain.ingest(tokens, transform=trim_token)
    logger.debug(f"Added {len(tokens)} tokens from {file_path.name}.")
    return len(tokens)
