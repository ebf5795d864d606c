# Path: src/alnumsort/__main__.py
import logging
import sys
from pathlib import Path
from typing import List

import argcomplete
import yaml
from tqdm import tqdm

from src.alnumsort.comparator import compare, natural_sorted
from src.alnumsort.cursor import CodepointCursor, MalformedInputError
from src.alnumsort.sort_arg_parser import ParsedArgs, SortArgsHandler
from src.alnumsort.sort_config_parser import load_config, resolve_config_path
from src.config.constants import PROJECT_ROOT
from src.config.logging_config import setup_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSORTED = 1
EXIT_ERROR = 2


def read_lines(files: List[str], progress: bool = False) -> List[bytes]:
    lines: List[bytes] = []
    for name in tqdm(files, desc="Reading", unit="file", disable=not progress):
        if name == "-":
            data = sys.stdin.buffer.read()
        else:
            data = Path(name).read_bytes()
        chunk = data.splitlines()
        log.debug(f"Read {len(chunk)} lines from: {name}")
        lines.extend(chunk)
    return lines


def write_lines(lines: List[bytes], output: Path | None):
    data = b"".join(line + b"\n" for line in lines)
    if output is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
    log.info(f"Wrote {len(lines)} lines to: {output}")


def validate_lines(lines: List[bytes]):
    for line_no, line in enumerate(lines, 1):
        try:
            for _ in CodepointCursor(line, strict=True):
                pass
        except MalformedInputError:
            log.error(f"Line {line_no} is not valid UTF-8.")
            raise


def find_unsorted(lines: List[bytes], reverse: bool = False, strict: bool = False) -> int | None:
    """Return the 1-based number of the first out-of-order line, or None."""
    for index in range(1, len(lines)):
        order = compare(lines[index - 1], lines[index], strict=strict)
        if (order > 0 and not reverse) or (order < 0 and reverse):
            return index + 1
    return None


def run(args: ParsedArgs) -> int:
    lines = read_lines(args.files, args.progress)
    log.info(f"Loaded {len(lines)} lines from {len(args.files)} input(s).")

    if args.strict:
        validate_lines(lines)

    if args.check:
        line_no = find_unsorted(lines, args.reverse, args.strict)
        if line_no is not None:
            log.error(f"❌ Line {line_no} is out of natural order.")
            return EXIT_UNSORTED
        log.info("✅ Input is already in natural order.")
        return EXIT_OK

    if args.unique:
        lines = list(dict.fromkeys(lines))

    sorted_lines = natural_sorted(lines, reverse=args.reverse, strict=args.strict)
    write_lines(sorted_lines, args.output)
    return EXIT_OK


def main(argv: List[str] | None = None) -> int:
    arg_handler = SortArgsHandler(log=logging.getLogger(__name__))
    argcomplete.autocomplete(arg_handler.parser)
    args = arg_handler.parse_args(argv)

    config_path = resolve_config_path(args.config)
    try:
        config = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError):
        return EXIT_ERROR

    setup_logging(config["log-file"], PROJECT_ROOT / config["log-dir"])
    log.debug(f"Config loaded from: {config_path}")

    processed_args = arg_handler.validate_args(args, config)
    if not processed_args:
        return EXIT_ERROR

    try:
        exit_code = run(processed_args)
    except MalformedInputError as e:
        log.error(f"❌ Malformed input: {e}")
        return EXIT_ERROR
    except OSError:
        log.critical("❌ Could not read or write files.", exc_info=True)
        return EXIT_ERROR

    if exit_code == EXIT_OK and not processed_args.check:
        log.info("✅ Done!")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
