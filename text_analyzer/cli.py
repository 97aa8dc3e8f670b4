# cli.py
import argparse
import logging
import sys

from text_analyzer import config
from text_analyzer.data.counts import count_matrix, top_tokens
from text_analyzer.data.vocabulary import build_vocabulary
from text_analyzer.io import read_file
from text_analyzer.logging_setup import configure_logging
from text_analyzer.preprocessing.errors import TextAnalyzerError
from text_analyzer.preprocessing.pipeline import Pipeline
from text_analyzer.preprocessing.tokenizer import make_tokenizer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-analyzer",
        description="Apply text operations to a file. "
        "Selected operations run in the order punctuation, spaces, lowercase, ngrams.",
    )
    parser.add_argument("path", help="input text file")
    parser.add_argument("--remove-punctuation", action="store_true", help="drop ASCII punctuation")
    parser.add_argument("--trim-spaces", action="store_true", help="collapse whitespace")
    parser.add_argument("--lowercase", action="store_true", help="lowercase the text")
    parser.add_argument("--ngrams", type=int, metavar="N", help="replace the text with word N-grams")
    parser.add_argument(
        "--separator",
        help=f"n-gram separator, requires --ngrams (default: {config.DEFAULT_NGRAM_SEPARATOR!r})",
    )
    parser.add_argument(
        "--default", action="store_true", help="clean punctuation, spaces and case (default pipeline)"
    )
    parser.add_argument("--top", type=int, metavar="K", help="print the K most frequent tokens instead")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    return parser


def _separator(args: argparse.Namespace) -> str:
    if args.separator is None:
        return config.DEFAULT_NGRAM_SEPARATOR
    return args.separator


def pipeline_from_args(args: argparse.Namespace) -> Pipeline:
    if args.default:
        return config.create_pipeline(ngram_size=args.ngrams, ngram_separator=_separator(args))
    return config.create_pipeline(
        remove_punctuation=args.remove_punctuation,
        trim_spaces=args.trim_spaces,
        lowercase=args.lowercase,
        ngram_size=args.ngrams,
        ngram_separator=_separator(args),
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.separator is not None and args.ngrams is None:
        parser.error("--separator requires --ngrams")
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    pipeline = pipeline_from_args(args)
    logger.info("Running %r on %s", pipeline, args.path)

    try:
        text = read_file(args.path, encoding=args.encoding)
        if args.top is None:
            print(pipeline.process(text))
            return 0

        tokenizer = make_tokenizer(pipeline, min_token_length=config.MIN_TOKEN_LENGTH)
        token_to_id, _ = build_vocabulary([text], tokenizer)
        matrix = count_matrix([text], tokenizer, token_to_id)
    except TextAnalyzerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for token, count in top_tokens(matrix, token_to_id, args.top):
        print(f"{token}\t{count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
