"""Command-line entry point: subscribe to a node's JSON feed and validate it."""

import argparse
import os
import sys

from .config import DEFAULT_ENDPOINT, ENDPOINT_ENV_VAR, ValidatorConfig
from .logging import FileLogHandler, Logger, LoggerConfig, LogLevel
from .processor import MessageProcessor
from .transport import TransportUnavailableError, ZmqSubscriber


def parse_args(argv: list[str] | None = None) -> ValidatorConfig:
    """Parse CLI arguments.

    The endpoint defaults to the ``ZMQ_PUB`` environment variable when set,
    and to a local node otherwise; ``--endpoint`` overrides both.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        ValidatorConfig: Parsed configuration.
    """
    parser = argparse.ArgumentParser(
        prog="zmq-json-validator",
        description="Check that a node's ZMQ JSON notifications round-trip through typed models",
    )
    parser.add_argument(
        "--endpoint",
        default=os.environ.get(ENDPOINT_ENV_VAR, DEFAULT_ENDPOINT),
        help=f"The endpoint to connect to (env: {ENDPOINT_ENV_VAR}, default: {DEFAULT_ENDPOINT})",
    )
    parser.add_argument(
        "--subscribe",
        default="",
        help="Topic prefix to subscribe to (default: everything)",
    )
    parser.add_argument("--rcv-hwm", type=int, default=100_000)
    parser.add_argument(
        "--lax",
        action="store_true",
        help="Use lax decoding, e.g. accept numeric strings for integer fields",
    )
    parser.add_argument(
        "--strict-numbers",
        action="store_true",
        help="Treat integer/float differences of equal value (100 vs 100.0) as mismatches",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.name for level in LogLevel],
        default=LogLevel.INFO.name,
    )
    parser.add_argument("--log-file", default=None, help="Append logs to this .txt file")
    args = parser.parse_args(argv)

    try:
        return ValidatorConfig(
            endpoint=args.endpoint,
            subscribe_filter=args.subscribe,
            rcv_hwm=args.rcv_hwm,
            strict_decoding=not args.lax,
            strict_numeric_types=args.strict_numbers,
            log_level=LogLevel[args.log_level],
            log_file=args.log_file,
        )
    except ValueError as exc:
        parser.error(str(exc))


def run(
    subscriber: ZmqSubscriber,
    processor: MessageProcessor,
    max_messages: int | None = None,
) -> None:
    """Blocking receive loop; runs forever unless ``max_messages`` is given."""
    count = 0
    while max_messages is None or count < max_messages:
        processor.handle(subscriber.recv())
        count += 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = parse_args(argv)

    handlers = []
    if config.log_file is not None:
        try:
            handlers.append(FileLogHandler(config.log_file, create=True))
        except OSError as exc:
            print(f"Cannot open log file {config.log_file}: {exc}", file=sys.stderr)
            return 1
    logger = Logger(
        name="zmq_json_validator",
        config=LoggerConfig(base_level=config.log_level),
        handlers=handlers,
    )

    print(f"Connecting to {config.endpoint}", flush=True)
    subscriber = ZmqSubscriber(
        path=config.endpoint,
        subscribe_filter=config.subscribe_filter,
        rcv_hwm=config.rcv_hwm,
    )
    try:
        subscriber.start()
    except TransportUnavailableError as exc:
        logger.error(str(exc))
        logger.shutdown()
        return 1

    if config.subscribe_filter:
        print(f"Subscribed to messages prefixed '{config.subscribe_filter}'", flush=True)
    else:
        print("Subscribed to all messages", flush=True)

    processor = MessageProcessor(config, logger=logger)
    try:
        run(subscriber, processor)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        subscriber.stop()
        print(processor.stats.summary(), flush=True)
        logger.shutdown()
    return 0
