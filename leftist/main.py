"""Command-line front end for the leftist priority queue.

Pushes the given integers into one queue, optionally merges in a second
queue, then drains the result and prints one value per line in priority
order.
"""

import logging
from argparse import ArgumentParser
from typing import List, Optional, Sequence

from leftist.config import QueueConfig, init_config


def parse_values(text: str) -> List[int]:
    """Parse a comma-separated list of integers, ignoring blanks."""
    return [int(part) for part in text.split(",") if part.strip()]


def drain(
    config: QueueConfig, values: Sequence[int], extra: Sequence[int]
) -> List[int]:
    """Fill a queue (and a second one to merge in) and pop everything.

    Args:
        config: Queue settings.
        values: Elements for the first queue.
        extra: Elements for the second queue, merged into the first.

    Returns:
        All elements in the order they were popped.
    """
    queue = config.new_queue()
    for value in values:
        queue.push(value)
    if extra:
        other = config.new_queue()
        for value in extra:
            other.push(value)
        queue.merge(other)
    logging.info("draining %d values in %s order", queue.size(), config.order.value)
    popped = []
    while not queue.empty():
        popped.append(queue.pop())
    return popped


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser."""
    parser = ArgumentParser(prog="leftist")
    parser.add_argument("values", nargs="*", type=int)
    parser.add_argument("--merge", type=parse_values, default=[])
    parser.add_argument("--order", choices=["max", "min"], default="max")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point.

    Parses command-line arguments, configures logging, then prints the
    drained queue.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    config = init_config(args.order)
    for value in drain(config, args.values, args.merge):
        print(value)
    logging.info("done")


if __name__ == "__main__":
    main()
