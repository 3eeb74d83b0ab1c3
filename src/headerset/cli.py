#!/usr/bin/env python3
"""
headerset: Resolve the header set of a library for interface generation

Common usage:
  headerset Foo.json --install-name /Library/Frameworks/Foo.framework/Versions/A/Foo
  headerset Foo.json --exclude-public-header '/src/**/*Internal.h'
  headerset Foo.json --extra-private-header Sources/FooPrivate.h --format json -o out.json

Defaults can be kept in `headerset.toml`, `.headerset.toml` or `[tool.headerset]`
in pyproject.toml.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from headerset.config import HeadersetConfig, find_config_file, load_config, merge_cli_with_config
from headerset.log import setup_logging
from headerset.output import format_json, format_text, write_output
from headerset.resolution import (
    Directive,
    HeaderDirectives,
    ResolutionContext,
    VisibilityClass,
    framework_name_from_install_name,
)


@dataclass
class Options:
    """Command-line options for the headerset tool."""

    file_lists: list[str]
    # Extra headers; `None` when the flag was not given
    extra_public_header: list[str] | None
    extra_private_header: list[str] | None
    extra_project_header: list[str] | None
    # Exclusions
    exclude_public_header: list[str]
    exclude_private_header: list[str]
    exclude_project_header: list[str]
    # Umbrella headers
    public_umbrella_header: str | None
    private_umbrella_header: str | None
    project_umbrella_header: str | None
    # Library identity
    install_name: str | None
    dynamiclib: bool
    # Output
    output: str
    format: str
    include_excluded: bool
    verbose: bool
    version: bool

    def extra_headers(self) -> dict[VisibilityClass, list[str]]:
        """Extra headers given on the command line; classes without a flag are absent."""
        given = {
            VisibilityClass.public: self.extra_public_header,
            VisibilityClass.private: self.extra_private_header,
            VisibilityClass.project: self.extra_project_header,
        }
        return {k: v for k, v in given.items() if v is not None}

    def directives(self) -> HeaderDirectives:
        exclude = [
            Directive(pattern, visibility)
            for visibility, patterns in (
                (VisibilityClass.public, self.exclude_public_header),
                (VisibilityClass.private, self.exclude_private_header),
                (VisibilityClass.project, self.exclude_project_header),
            )
            for pattern in patterns
        ]
        umbrella = {
            visibility: path
            for visibility, path in (
                (VisibilityClass.public, self.public_umbrella_header),
                (VisibilityClass.private, self.private_umbrella_header),
                (VisibilityClass.project, self.project_umbrella_header),
            )
            if path
        }
        framework_name = None
        if self.install_name and not self.dynamiclib:
            framework_name = framework_name_from_install_name(self.install_name)
        return HeaderDirectives(
            extra=self.extra_headers(),
            exclude=exclude,
            umbrella=umbrella,
            framework_name=framework_name,
        )


# argparse dest names whose presence on the command line overrides config
_TRACKED_FLAGS = (
    "exclude_public_header",
    "exclude_private_header",
    "exclude_project_header",
    "public_umbrella_header",
    "private_umbrella_header",
    "project_umbrella_header",
    "install_name",
    "dynamiclib",
)


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns `(options, explicit_flags)` where `explicit_flags` names the
    options the user actually passed (for config merge precedence).
    Tracked options default to `None` so presence can be detected.
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="headerset",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "file_lists",
        nargs="*",
        type=str,
        default=[],
        metavar="FILELIST",
        help="JSON header file lists providing the base headers",
    )
    for visibility in ("public", "private", "project"):
        parser.add_argument(
            f"--extra-{visibility}-header",
            action="append",
            default=None,
            metavar="PATH",
            help=f"Add a {visibility} header file, or every header in a directory. "
            "Replaces configured extra headers. Can be repeated",
        )
    for visibility in ("public", "private", "project"):
        parser.add_argument(
            f"--exclude-{visibility}-header",
            action="append",
            default=None,
            metavar="PATH_OR_GLOB",
            help=f"Exclude {visibility} headers matching a glob, a file or a directory. "
            "Can be repeated",
        )
    for visibility in ("public", "private", "project"):
        parser.add_argument(
            f"--{visibility}-umbrella-header",
            default=None,
            metavar="PATH",
            help=f"Designate the {visibility} umbrella header",
        )
    parser.add_argument(
        "--install-name",
        default=None,
        metavar="NAME",
        help="Install name of the library; a framework install name enables umbrella "
        "header inference",
    )
    parser.add_argument(
        "--dynamiclib",
        action="store_true",
        default=None,
        help="The library is a plain dynamic library, not a framework",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file (use '-' for stdout)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--include-excluded",
        action="store_true",
        help="Also list excluded headers, marked as excluded",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log resolution steps")
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    explicit_flags = {name for name in _TRACKED_FLAGS if getattr(opts, name) is not None}

    return (
        Options(
            file_lists=opts.file_lists,
            extra_public_header=opts.extra_public_header,
            extra_private_header=opts.extra_private_header,
            extra_project_header=opts.extra_project_header,
            exclude_public_header=opts.exclude_public_header or [],
            exclude_private_header=opts.exclude_private_header or [],
            exclude_project_header=opts.exclude_project_header or [],
            public_umbrella_header=opts.public_umbrella_header,
            private_umbrella_header=opts.private_umbrella_header,
            project_umbrella_header=opts.project_umbrella_header,
            install_name=opts.install_name,
            dynamiclib=bool(opts.dynamiclib),
            output=opts.output,
            format=opts.format,
            include_excluded=opts.include_excluded,
            verbose=opts.verbose,
            version=opts.version,
        ),
        explicit_flags,
    )


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the headerset CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("headerset")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    setup_logging(verbose=options.verbose)

    config = HeadersetConfig()
    config_path = find_config_file(Path.cwd())
    if config_path:
        config = load_config(config_path)
        merge_cli_with_config(options, config, explicit_flags)

    directives = options.directives()
    if not options.file_lists and not directives.extra and not config.extra_headers():
        print(
            "Error: No input specified. Provide header file lists or --extra-*-header"
            " options. Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    context = ResolutionContext(default_extra=config.extra_headers())
    result = context.run_file_lists(options.file_lists, directives)

    for diagnostic in result.diagnostics:
        print(diagnostic, file=sys.stderr)
    if not result.ok:
        return 1

    render = format_json if options.format == "json" else format_text
    try:
        write_output(options.output, render(result.headers, options.include_excluded))
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
