#!/usr/bin/env python3
"""
coqindent: Indents Coq code

Common usage:
  coqindent theories/Lemma.v
  coqindent --check theories/
  coqindent --exclude theories/Extracted .
  coqindent --from 10 --upto 40 theories/Lemma.v
  cat Lemma.v | coqindent -

Directories are searched recursively for `.v` files. Exclusions name exact
files or directories; an excluded directory is not searched.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from coqindent.config import find_config_file, load_config, merge_cli_with_config
from coqindent.file_resolver import (
    ArgumentConflictError,
    FileResolver,
    FileResolverConfig,
    ResolutionError,
    ResolvedInputs,
)


@dataclass
class Options:
    """Command-line options for the coqindent tool."""

    inputs: list[str]
    exclude: list[str]
    from_line: int | None
    upto_line: int | None
    check: bool
    respect_ignore_file: bool
    verbose: bool
    version: bool


@dataclass(frozen=True)
class IndentRequest:
    """Resolved work handed to the indenter. Line bounds and `check` pass through untouched."""

    inputs: ResolvedInputs
    from_line: int | None = None
    upto_line: int | None = None
    check: bool = False

    @property
    def has_line_range(self) -> bool:
        return self.from_line is not None or self.upto_line is not None


def _line_number(value: str) -> int:
    try:
        line = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("not a valid line number") from None
    if line < 1:
        raise argparse.ArgumentTypeError("not a valid line number")
    return line


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which config-backed flags the user explicitly passed.
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        type=str,
        default=[],
        help="The files or directories to indent (use '-' for stdin)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATH",
        help="Exclude a file or directory. Can be repeated",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check that files are indented correctly",
    )
    parser.add_argument(
        "--from",
        type=_line_number,
        dest="from_line",
        metavar="LINE",
        help="Line to begin indenting from",
    )
    parser.add_argument(
        "--upto",
        type=_line_number,
        dest="upto_line",
        metavar="LINE",
        help="Line to stop indenting at",
    )
    parser.add_argument(
        "--no-ignore-file",
        action="store_true",
        dest="no_ignore_file",
        help="Do not read exclusions from .coqindentignore",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report directories and entries that could not be read",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # store_true flags can only be explicit when set.
    explicit_flags: set[str] = set()
    if opts.check:
        explicit_flags.add("check")
    if opts.no_ignore_file:
        explicit_flags.add("respect_ignore_file")

    return (
        Options(
            inputs=opts.inputs,
            exclude=opts.exclude,
            from_line=opts.from_line,
            upto_line=opts.upto_line,
            check=opts.check,
            respect_ignore_file=not opts.no_ignore_file,
            verbose=opts.verbose,
            version=opts.version,
        ),
        explicit_flags,
    )


def _warn(error: ResolutionError) -> None:
    print(f"Warning: {error}", file=sys.stderr)


def build_request(options: Options) -> IndentRequest:
    """
    Resolve inputs and apply the line-range rule.

    Raises `ArgumentConflictError` if `--from` or `--upto` is combined with
    more than one input.
    """
    config = FileResolverConfig(
        exclude=options.exclude,
        respect_ignore_file=options.respect_ignore_file,
    )
    resolver = FileResolver(config)
    inputs = resolver.resolve(
        options.inputs,
        on_warning=_warn,
        on_error=_warn if options.verbose else None,
    )
    request = IndentRequest(
        inputs=inputs,
        from_line=options.from_line,
        upto_line=options.upto_line,
        check=options.check,
    )
    if request.has_line_range and len(request.inputs) > 1:
        raise ArgumentConflictError(
            "--from and --upto cannot be used with more than one input file."
        )
    return request


def print_request(request: IndentRequest) -> None:
    """Print one input per line, stdin first, then files in path order."""
    for item in sorted(request.inputs, key=lambda i: (not i.is_stdin, str(i))):
        print(item)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the coqindent CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("coqindent")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not options.inputs:
        print(
            "Error: No input specified. Provide files, directories (use '.' for current"
            " directory), or '-' for stdin. Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    config_path = find_config_file(Path.cwd())
    if config_path:
        merge_cli_with_config(options, load_config(config_path), explicit_flags)

    try:
        request = build_request(options)
    except ArgumentConflictError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_request(request)
    return 0


if __name__ == "__main__":
    sys.exit(main())
