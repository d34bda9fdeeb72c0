"""
Command-line front end: reads text files, splits them into words or
characters, feeds them into a Markov chain and prints generated output.
"""
import logging
import random
from pathlib import Path

import click
from tqdm import tqdm

from .. import config
from .markov_chain import MarkovChain
from .train import add_file, tokenize, trim_token


def generate_text(chain, count, split='word', rng=None):
    """Generates ``count`` tokens and joins them with the split method's delimiter."""
    return config.OUTPUT_DELIMITERS[split].join(chain.generate(count, rng))


def run_demo(rng):
    """Plays with a small word chain using hardcoded sentences."""
    chain = MarkovChain(order=config.DEMO_ORDER)

    click.echo(f"Initial string: {config.DEMO_TEXT}")
    chain.ingest(tokenize(config.DEMO_TEXT, 'word'), transform=trim_token)
    click.echo("Generated gibberish:")
    click.echo(generate_text(chain, config.DEMO_COUNT, 'word', rng))

    # Add another sequence to the same chain
    click.echo(f"Another string: {config.DEMO_MORE_TEXT}")
    chain.ingest(tokenize(config.DEMO_MORE_TEXT, 'word'), transform=trim_token)
    click.echo("More gibberish:")
    click.echo(generate_text(chain, config.DEMO_COUNT, 'word', rng))


@click.command()
@click.argument('files', nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--order', '-k', type=click.IntRange(min=1), default=config.DEFAULT_ORDER, show_default=True,
              help="Order of the Markov chain.")
@click.option('--count', '-n', type=click.IntRange(min=0), default=config.DEFAULT_COUNT, show_default=True,
              help="Number of tokens to generate.")
@click.option('--split', type=click.Choice(sorted(config.SPLIT_PATTERNS), case_sensitive=False),
              default=config.DEFAULT_SPLIT, show_default=True, help="Split the input into words or characters.")
@click.option('--seed', type=int, default=config.DEFAULT_SEED, help="Random seed for reproducible output.")
@click.option('--demo', is_flag=True, help="Run the built-in demonstration instead of reading files.")
@click.option('--verbose', '-v', is_flag=True, help="Enable debug logging.")
def main(files, order, count, split, seed, demo, verbose):
    """
    Prints generated gibberish to standard output using a Markov chain
    built from the given text FILES.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')
    split = split.lower()
    rng = random.Random(seed)

    if demo:
        run_demo(rng)
        return

    if not files:
        raise click.UsageError("At least one input file is required.")

    chain = MarkovChain(order=order)
    ingested = 0
    for file_path in tqdm(files, desc="Reading files", disable=None):
        try:
            add_file(chain, file_path, split)
            ingested += 1
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Could not read {file_path}: {e}")
            click.secho(f"Skipping {file_path}: {e}", fg='yellow', err=True)

    if not ingested:
        raise click.ClickException("None of the input files could be read.")

    click.echo(generate_text(chain, count, split, rng))


if __name__ == '__main__':
    main()
