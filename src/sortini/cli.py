"""Command line interface: sort an ini file in place or into another file."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence, TextIO

from .args import Parameters
from .interface import IniDocument

logger = logging.getLogger("sortini")

ERROR_BANNER = "**** ERROR OCCURRED"

USAGE = """\
Sorts the specified .ini file.

USAGE:
  sortini [options] file [outfile]

OPTIONS:
  -q, -quiet            no console output (-!q to revert)
  -v, -verbose          debug output (-!v to revert)
  -o <file>             write to <file> instead of overwriting the input
  -expand, -!expand     empty line between sections, spaces around '='
  -i, -case-i           case-insensitive comparison of sections and entries
  -!i, -case-s          case-sensitive comparison of sections and entries
  -sections-is, -sections-cs, -entries-is, -entries-cs
  -sort-asc, -sort-desc, -!sort
                        sort direction of sections and entries
  -sections, -sections-asc, -sections-desc, -!sections
  -entries, -entries-asc, -entries-desc, -!entries

Options may start with '-', '/' or '!' and are case-insensitive.
If input is redirected, the ini is read from stdin. If output is redirected,
the result is written to stdout."""

OUTPUT_FLAGS = ("o", "out", "output")

# flag -> ((parameter, ...), value)
PARAMETER_FLAGS: dict[tuple[str, ...], tuple[tuple[str, ...], Any]] = {
    ("expand",): (("expand",), True),
    ("not-expand",): (("expand",), False),
    ("i", "case-i", "casei"): (
        ("sections_comparison", "entries_comparison"),
        "case-insensitive",
    ),
    ("not-i", "case-s", "cases"): (
        ("sections_comparison", "entries_comparison"),
        "case-sensitive",
    ),
    ("sections-is",): (("sections_comparison",), "case-insensitive"),
    ("sections-cs",): (("sections_comparison",), "case-sensitive"),
    ("entries-is",): (("entries_comparison",), "case-insensitive"),
    ("entries-cs",): (("entries_comparison",), "case-sensitive"),
    ("sort-asc", "sortasc"): (
        ("sections_sort_direction", "entries_sort_direction"),
        "ascending",
    ),
    ("sort-desc", "sortdesc"): (
        ("sections_sort_direction", "entries_sort_direction"),
        "descending",
    ),
    ("not-sort",): (("sections_sort_direction", "entries_sort_direction"), None),
    ("sections", "sections-asc"): (("sections_sort_direction",), "ascending"),
    ("sections-desc",): (("sections_sort_direction",), "descending"),
    ("not-sections",): (("sections_sort_direction",), None),
    ("entries", "entries-asc"): (("entries_sort_direction",), "ascending"),
    ("entries-desc",): (("entries_sort_direction",), "descending"),
    ("not-entries",): (("entries_sort_direction",), None),
}

SWITCH_FLAGS: dict[tuple[str, ...], tuple[str, bool]] = {
    ("q", "quiet"): ("quiet", True),
    ("not-q", "not-quiet"): ("quiet", False),
    ("v", "verbose"): ("verbose", True),
    ("not-v", "not-verbose"): ("verbose", False),
}

HELP_FLAGS = ("?", "h", "help")

KNOWN_FLAGS = {
    flag
    for flags in (*PARAMETER_FLAGS, *SWITCH_FLAGS, OUTPUT_FLAGS, HELP_FLAGS)
    for flag in flags
}


class _SetParameters(argparse.Action):
    """Set one value for several parameters, in command line order."""

    def __init__(self, option_strings, dest, targets=(), **kwargs) -> None:
        self.targets = targets
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        parameters = getattr(namespace, "parameters", None) or {}
        for target in self.targets:
            parameters[target] = self.const
        namespace.parameters = parameters


def _normalize_flag(arg: str) -> str | None:
    """Normalize a flag: strip leading '-' and '/', lower-case, '!x' -> 'not-x'.

    Returns:
        str | None: The normalized flag or None if arg is no flag.
    """
    if not arg or arg[0] not in "-/!":
        return None
    flag = arg.lstrip("-/").lower()
    if not flag:
        # a lone "-" or "/"
        return None
    if flag.startswith("!"):
        flag = f"not-{flag[1:]}"
    if arg[0] == "/" and flag not in KNOWN_FLAGS:
        # most likely an absolute path
        return None
    return flag


def normalize_arguments(arguments: Sequence[str]) -> list[str]:
    """Rewrite flags in any accepted spelling into '--flag'.

    Args:
        arguments (Sequence[str]): Raw command line arguments.

    Returns:
        list[str]: Arguments argparse can process.
    """
    normalized: list[str] = []
    expects_value = False
    for arg in arguments:
        flag = None if expects_value else _normalize_flag(arg)
        if flag is None:
            normalized.append(arg)
            expects_value = False
        else:
            normalized.append(f"--{flag}")
            expects_value = flag in OUTPUT_FLAGS
    return normalized


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises ArgumentError instead of exiting."""

    def error(self, message: str):
        raise argparse.ArgumentError(None, message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sortini",
        add_help=False,
        allow_abbrev=False,
        usage=USAGE,
        exit_on_error=False,
    )
    parser.add_argument("file", nargs="?")
    parser.add_argument("outfile", nargs="?")
    parser.add_argument(*(f"--{f}" for f in OUTPUT_FLAGS), dest="output")
    parser.add_argument(
        *(f"--{f}" for f in HELP_FLAGS), dest="help", action="store_true"
    )
    for flags, (dest, value) in SWITCH_FLAGS.items():
        parser.add_argument(
            *(f"--{f}" for f in flags),
            dest=dest,
            action="store_const",
            const=value,
            default=False,
        )
    for flags, (targets, value) in PARAMETER_FLAGS.items():
        parser.add_argument(
            *(f"--{f}" for f in flags),
            dest="parameters",
            action=_SetParameters,
            targets=targets,
            const=value,
            default=None,
        )
    return parser


def _is_redirected(stream: TextIO) -> bool:
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        return True


def run(
    document: IniDocument,
    file: str | None,
    output: str | None,
    stdin: TextIO,
    stdout: TextIO,
) -> bool:
    """Load, sort and write the document.

    Returns:
        bool: Whether the result was written to stdout.
    """
    from_stdin = not file and _is_redirected(stdin)
    to_stdout = _is_redirected(stdout)

    # LOAD
    if from_stdin:
        logger.debug("Reading from stdin.")
        document.load_lines(stdin.read().splitlines())
    else:
        if not file:
            raise ValueError("No file specified.")
        if not Path(file).is_file():
            raise FileNotFoundError(
                f"The specified file was not found (or is inaccessible): {file}"
            )
        if not document.load(file):
            raise OSError(f"Could not load specified file: {file}")

    # SORT
    document.sort()

    # OUTPUT
    if output:
        if not document.save(output):
            raise OSError(f"Failed saving to {output}")
    elif not (from_stdin or to_stdout):
        if not document.save():
            raise OSError(f"Failed saving back to {document.file_name}")
        return False

    if to_stdout or (from_stdin and not output):
        stdout.write(document.export())
        return True
    return False


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Entry point of the sortini command.

    Args:
        argv (Sequence[str] | None, optional): Command line arguments. If None, will
            use sys.argv. Defaults to None.
        stdin, stdout, stderr (TextIO | None, optional): Streams to use instead of
            the sys ones. Defaults to None.

    Returns:
        int: 0 on success, 1 on error.
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if not argv and not _is_redirected(stdin):
        print(USAGE, file=stdout)
        return 0

    output = None
    try:
        args, unknown = build_parser().parse_known_args(normalize_arguments(argv))

        for arg in unknown:
            if not args.quiet:
                print(f"Unknown option: {arg.removeprefix('--')}", file=stdout)

        if args.help:
            if not args.quiet:
                print(USAGE, file=stdout)
            return 0

        level = logging.DEBUG if args.verbose else logging.WARNING
        logging.basicConfig(
            level=level, format="%(levelname)s: %(message)s", stream=stderr
        )
        # basicConfig is a no-op once the root logger has handlers
        logger.setLevel(level)

        file = args.file.strip().strip('"') if args.file else None
        output = args.output or args.outfile

        parameters = Parameters()
        parameters.update(**(args.parameters or {}))
        written_to_stdout = run(
            IniDocument(file, parameters), file, output, stdin, stdout
        )
    except Exception as e:
        message = f"{ERROR_BANNER}\n{e}\n"
        print(message, file=stderr)
        if output:
            try:
                Path(output).write_text(message, encoding="utf-8")
            except OSError as write_error:
                logger.error("Could not write error to %s: %s", output, write_error)
        return 1

    if not args.quiet and not written_to_stdout:
        print("SUCCESS", file=stdout)
    return 0
