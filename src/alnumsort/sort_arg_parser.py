# Path: src/alnumsort/sort_arg_parser.py
import argparse
import logging
from dataclasses import dataclass
from pathlib import Path

from argcomplete.completers import FilesCompleter


@dataclass
class ParsedArgs:
    files: list[str]
    output: Path | None
    reverse: bool
    unique: bool
    check: bool
    strict: bool
    progress: bool


class SortArgsHandler:
    def __init__(self, log: logging.Logger):
        self.log = log
        self.parser = self._setup_parser()

    def _setup_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="alnumsort",
            description="Sort lines in natural order (digit runs compare as numbers).",
            formatter_class=argparse.RawTextHelpFormatter,
        )
        files_arg = parser.add_argument(
            "files",
            nargs="*",
            metavar="FILE",
            help="Input files. Reads stdin when omitted or when FILE is '-'.",
        )
        config_arg = parser.add_argument(
            "-c",
            "--config",
            default=None,
            help="YAML config file (default: $ALNUMSORT_CONFIG or the bundled one).",
        )
        parser.add_argument(
            "-o",
            "--output",
            default=None,
            help="Write the result to this file instead of stdout.",
        )
        # None means "not given on the command line", the config value applies
        parser.add_argument(
            "-r", "--reverse", action="store_true", default=None, help="Reverse the order."
        )
        parser.add_argument(
            "-u",
            "--unique",
            action="store_true",
            default=None,
            help="Drop duplicate lines, keeping the first occurrence.",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Only check whether the input is already sorted.",
        )
        parser.add_argument(
            "--strict",
            action="store_true",
            default=None,
            help="Fail on malformed UTF-8 instead of decoding it to U+FFFD.",
        )
        parser.add_argument(
            "--progress",
            action="store_true",
            default=None,
            help="Show a progress bar while reading input files.",
        )

        files_arg.completer = FilesCompleter()  # type: ignore [reportAttributeAccessIssue]
        config_arg.completer = FilesCompleter(allowednames=("yaml", "yml"))  # type: ignore [reportAttributeAccessIssue]
        return parser

    def parse_args(self, argv: list[str] | None = None) -> argparse.Namespace:
        return self.parser.parse_args(argv)

    def validate_args(self, args: argparse.Namespace, config: dict) -> ParsedArgs | None:
        def pick(flag: bool | None, key: str) -> bool:
            return config[key] if flag is None else flag

        if args.check and args.output:
            self.log.error("'--check' cannot be combined with '-o/--output'.")
            return None
        if args.check and args.unique:
            self.log.error("'--check' cannot be combined with '-u/--unique'.")
            return None

        # a configured default never applies to a check run
        unique = False if args.check else pick(args.unique, "unique")

        files = args.files or ["-"]
        if files.count("-") > 1:
            self.log.error("Standard input ('-') can only be read once.")
            return None

        return ParsedArgs(
            files=files,
            output=Path(args.output) if args.output else None,
            reverse=pick(args.reverse, "reverse"),
            unique=unique,
            check=args.check,
            strict=pick(args.strict, "strict"),
            progress=pick(args.progress, "progress"),
        )
