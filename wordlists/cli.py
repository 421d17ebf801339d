from __future__ import annotations

import argparse
import logging
import random
import sys
import tomllib
from collections.abc import Iterable, Sequence

from pydantic import ValidationError

from .core.config.settings import Settings
from .core.errors.base import AppError, ErrorCode
from .core.logging.setup import setup_logging
from .core.services.classifier.model import DigraphClassifier
from .core.services.pipeline import WordListPipeline


def _non_negative(s: str) -> int:
    n = int(s)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {s}")
    return n


def _report(exc: AppError) -> int:
    sys.stderr.write(f"error: {exc.message}\n")
    return 1


def _configure(verbose: bool) -> Settings:
    try:
        settings = Settings()
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        raise AppError(ErrorCode.CONFIG_INVALID, f"invalid configuration: {exc}") from exc
    setup_logging("DEBUG" if verbose else settings.logging.level)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordlists-sample",
        description="Sample lines from a word list and write them sorted case-insensitively.",
    )
    parser.add_argument("input", help="Word list to sample from")
    parser.add_argument("output", help="File to write the sorted sample to (overwritten)")
    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        "-n",
        "--sample-size",
        type=_non_negative,
        default=None,
        help="Number of lines to draw (default: every line of INPUT)",
    )
    size.add_argument(
        "--size-from",
        default=None,
        metavar="REFERENCE",
        help="Draw as many lines as REFERENCE has",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source")
    parser.add_argument("--verbose", action="store_true", help="Emit debug logs on stderr")

    args = parser.parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = _configure(bool(args.verbose))
        seed = args.seed if args.seed is not None else settings.sampling.seed
        result = WordListPipeline(settings=settings).run(
            args.input,
            args.output,
            sample_size=args.sample_size,
            size_from=args.size_from,
            rng=random.Random(seed),
        )
    except AppError as exc:
        logger.error(
            "Command failed",
            extra={"event": "cli_failed", "error_code": exc.code.value, "reason": exc.message},
        )
        return _report(exc)
    except KeyboardInterrupt:
        logger.warning("Interrupted", extra={"event": "cli_interrupted"})
        sys.stderr.write("Interrupted\n")
        return 130

    logger.debug(
        "Sample written",
        extra={
            "event": "cli_completed",
            "output_path": result.output_path,
            "count": result.lines_written,
        },
    )
    return 0


def _words_from(args_words: list[str]) -> Iterable[str]:
    if args_words:
        return args_words
    return (line.rstrip("\n") for line in sys.stdin)


def classify_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordlists-classify",
        description="Guess whether words are nêhiyawêwin (crk) or English (eng).",
    )
    parser.add_argument("--crk", required=True, help="nêhiyawêwin word list used for training")
    parser.add_argument("--eng", required=True, help="English word list used for training")
    parser.add_argument("--verbose", action="store_true", help="Also print both probabilities")
    parser.add_argument("words", nargs="*", help="Words to classify (default: read stdin)")

    args = parser.parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = _configure(False)
        model = DigraphClassifier.train(
            args.crk,
            args.eng,
            min_occurrences=settings.classifier.min_occurrences,
            encoding=settings.io.encoding,
        )
        for word in _words_from(list(args.words)):
            result = model.classify(word)
            if args.verbose:
                sys.stdout.write(f"  P(crk|{result.word}) = {result.prob_crk}\n")
                sys.stdout.write(f"  P(eng|{result.word}) = {result.prob_eng}\n")
            sys.stdout.write(f"{result.word}: {result.language.value}\n")
    except AppError as exc:
        logger.error(
            "Command failed",
            extra={"event": "cli_failed", "error_code": exc.code.value, "reason": exc.message},
        )
        return _report(exc)
    except KeyboardInterrupt:
        logger.warning("Interrupted", extra={"event": "cli_interrupted"})
        sys.stderr.write("Interrupted\n")
        return 130
    return 0
