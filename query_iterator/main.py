from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence, TextIO

from sqlalchemy.exc import SQLAlchemyError

from query_iterator.config.settings import Settings, get_settings
from query_iterator.core.constants import LOGGER_NAME
from query_iterator.db import session_scope
from query_iterator.services.iterators import to_iterator

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] [query_iterator] %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="query_iterator",
        description="Stream an ordered SQL query chunk by chunk as JSON lines.",
    )
    parser.add_argument("query", help="SQL query with a deterministic ORDER BY")
    parser.add_argument("--chunk-size", type=int, default=None)
    parser.add_argument("--database-url", default=None)
    parser.add_argument("--limit", type=int, default=None, help="stop after N records")
    parser.add_argument("--count", action="store_true", help="print the record count only")
    parser.add_argument("--log-level", default=None)
    return parser


def run(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    written = 0

    with session_scope(settings) as session:
        iterator = to_iterator(
            args.query,
            args.chunk_size,
            session=session,
            config=settings.iterator_config(),
        )

        if args.count:
            print(iterator.count(), file=out)
            return 0

        if args.limit is not None and args.limit <= 0:
            logger.info("limit=%d, nothing to stream", args.limit)
            return 0

        logger.info("streaming query chunk_size=%d limit=%s", iterator.chunk_size, args.limit)

        for record in iterator:
            print(json.dumps(record, default=str), file=out)
            written += 1
            if args.limit is not None and written >= args.limit:
                break

    logger.info("done records=%d", written)
    return 0


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.database_url:
        overrides["database_url"] = args.database_url
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(settings.log_level)

    try:
        return run(args, settings, out or sys.stdout)
    except ValueError as exc:
        logger.error("Invalid query or arguments: %s", exc)
        return 2
    except SQLAlchemyError:
        logger.exception("Query failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
