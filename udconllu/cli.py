"""Command-line interface.

* `udconllu check` reports malformed sentences and summary counts.
* `udconllu normalize` rewrites the well-formed sentences in canonical form.

Use with `--help` to see the full set of options."""

import argparse
import contextlib
import logging
import os
import sys
from typing import List, Optional, TextIO

from . import config, documents, errors, sentences


class Error(Exception):
    pass


def _items(path: str, options: config.Config):
    # Yields items, logging errors or, in strict mode, raising the first.
    for item in documents.parse_from_path(path):
        if isinstance(item, errors.Error):
            if options.strict:
                raise Error(f"{path}: {item}") from item
            logging.warning("%s: %s", path, item)
        yield item


def check(paths: List[str], options: config.Config) -> int:
    """Parses files, logging errors and counts.

    Returns:
        Exit status: 1 if any sentence is malformed, 0 otherwise.
    """
    total_sentences = 0
    total_tokens = 0
    total_errors = 0
    for path in paths:
        for item in _items(path, options):
            if isinstance(item, errors.Error):
                total_errors += 1
            else:
                total_sentences += 1
                total_tokens += len(item)
    logging.info("Sentences:\t%d", total_sentences)
    logging.info("Tokens:\t%d", total_tokens)
    logging.info("Errors:\t%d", total_errors)
    return 1 if total_errors else 0


def _write(sentence: sentences.Sentence, sink: TextIO, keep_comments: bool):
    if not keep_comments:
        sentence = sentences.Sentence(sentence)
    print(sentence, file=sink)


def normalize(path: str, options: config.Config) -> int:
    """Re-emits the well-formed sentences of a file.

    In strict mode, a partially written output file is removed before the
    error is raised.

    Returns:
        Exit status: 1 if any sentence was skipped, 0 otherwise.

    Raises:
        Error: in strict mode, on the first malformed sentence.
    """
    skipped = 0
    try:
        with contextlib.ExitStack() as stack:
            sink = (
                stack.enter_context(
                    open(options.output, "w", encoding="utf-8")
                )
                if options.output
                else sys.stdout
            )
            for item in _items(path, options):
                if isinstance(item, errors.Error):
                    skipped += 1
                    continue
                _write(item, sink, options.keep_comments)
    except Error:
        if options.output and os.path.exists(options.output):
            os.remove(options.output)
        raise
    if skipped:
        logging.info("Skipped %d malformed sentence(s)", skipped)
    return 1 if skipped else 0


def _get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--config", help="path to YAML configuration file")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="stop at the first malformed sentence",
    )
    parser.add_argument("--log_level", help="logging level (e.g., DEBUG)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    check_parser = subparsers.add_parser(
        "check", help="report malformed sentences"
    )
    check_parser.add_argument(
        "paths", nargs="+", help="path(s) to input .conllu files"
    )
    normalize_parser = subparsers.add_parser(
        "normalize", help="rewrite well-formed sentences"
    )
    normalize_parser.add_argument("path", help="path to input .conllu file")
    normalize_parser.add_argument(
        "--output", help="path for output .conllu file (default: stdout)"
    )
    normalize_parser.add_argument(
        "--drop_comments",
        action="store_false",
        dest="keep_comments",
        default=None,
        help="omit comment lines",
    )
    return parser


def udconllu_python_interface(argv: Optional[List[str]] = None) -> int:
    """Interface for use from Python; returns the exit status.

    The root logger's level is set from the options for the duration of
    the call and restored afterwards.

    Args:
        argv: command-line arguments; sys.argv if None.
    """
    args = _get_parser().parse_args(argv)
    options = (
        config.Config.read(args.config) if args.config else config.Config()
    )
    options = options.update(
        strict=args.strict,
        log_level=args.log_level,
        output=getattr(args, "output", None),
        keep_comments=getattr(args, "keep_comments", None),
    )
    logger = logging.getLogger()
    level = logger.level
    logger.setLevel(options.log_level)
    try:
        if args.command == "check":
            return check(args.paths, options)
        return normalize(args.path, options)
    finally:
        logger.setLevel(level)


def main() -> None:
    logging.basicConfig(
        format="%(filename)s %(levelname)s: %(asctime)s - %(message)s",
        datefmt="%d-%b-%y %H:%M:%S",
        level="INFO",
    )
    try:
        status = udconllu_python_interface()
    except Error as error:
        logging.error("%s", error)
        status = 1
    sys.exit(status)


if __name__ == "__main__":
    main()
