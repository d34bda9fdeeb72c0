import os
import re

# --- Generation defaults ---
# Each can be overridden through the environment, and again on the command line.
DEFAULT_ORDER = int(os.environ.get('MARKOVGEN_ORDER', 2))
DEFAULT_COUNT = int(os.environ.get('MARKOVGEN_COUNT', 50))
DEFAULT_SPLIT = os.environ.get('MARKOVGEN_SPLIT', 'word').lower()
DEFAULT_SEED = int(os.environ['MARKOVGEN_SEED']) if os.environ.get('MARKOVGEN_SEED') else None

# --- Tokenizer configuration ---
# Split after whitespace that ends a word; the whitespace stays on the token until it is trimmed.
WORD_REGEX = re.compile(r'(?<=\b\s)')
# Split between every character, newlines included.
CHAR_REGEX = re.compile(r'(?<=.)', re.DOTALL)

SPLIT_PATTERNS = {
    'word': WORD_REGEX,
    'char': CHAR_REGEX,
}

# Words are printed with spaces between them, characters are printed back to back.
OUTPUT_DELIMITERS = {
    'word': ' ',
    'char': '',
}

if DEFAULT_SPLIT not in SPLIT_PATTERNS:
    raise ValueError(f"MARKOVGEN_SPLIT must be one of {sorted(SPLIT_PATTERNS)}, got {DEFAULT_SPLIT!r}")

# --- Demo configuration ---
DEMO_ORDER = 1
DEMO_COUNT = 50
DEMO_TEXT = "I am not a number! I am a free man!"
DEMO_MORE_TEXT = "They are the eggmen. I am the walrus."
