"""Generate a LICENSE file from the bundled templates."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .catalog import LicenseTemplate, available, lookup
from .errors import LicenseError, PromptAborted, UnknownLicense, WriteFailure
from .gitconfig import guess_author
from .render import build_context, default_year, ensure_value, render

logger = logging.getLogger(__name__)

DEFAULT_LICENSE = "mit"
DEFAULT_OUTPUT = "LICENSE"
FALLBACK_AUTHOR = "Your Name"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    root = logging.getLogger("lic_cli")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


def display_license_list(templates: Sequence[LicenseTemplate]) -> None:
    width = max(len(template.key) for template in templates)
    for template in templates:
        aliases = ", ".join(sorted(set(template.spec.aliases) - {template.key}))
        alias_text = f" (aliases: {aliases})" if aliases else ""
        print(f"{template.key.ljust(width)} - {template.name}{alias_text}")


def prompt_value(prompt: str, default: str) -> str:
    """Ask for a value, returning ``default`` on an empty answer or EOF.

    EOF with no default raises :class:`PromptAborted`.
    """
    shown = f"{prompt} [{default}]: " if default else f"{prompt}: "
    while True:
        try:
            user_input = input(shown)
        except EOFError:
            if not default:
                raise PromptAborted(prompt) from None
            user_input = ""
        user_input = user_input.strip()
        if not user_input and default:
            return default
        if user_input:
            return user_input
        print("This field is required.", file=sys.stderr)


def choose_license(templates: Sequence[LicenseTemplate]) -> LicenseTemplate:
    print("Pick a license template:")
    for index, template in enumerate(templates, start=1):
        print(f"  {index:2d}. {template.key} - {template.name}")
    while True:
        answer = prompt_value("License number or identifier", templates[0].key)
        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(templates):
                return templates[index - 1]
            print(f"Choose a number between 1 and {len(templates)}.", file=sys.stderr)
            continue
        try:
            return lookup(answer)
        except UnknownLicense as exc:
            print(str(exc), file=sys.stderr)


def write_license(path: Path, text: str) -> Path:
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise WriteFailure(path, exc) from exc
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise WriteFailure(path, exc) from exc
    logger.debug("Wrote %d characters to %s", len(text), path)
    return path


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lic",
        description="Initialize a LICENSE file from bundled license templates.",
    )
    parser.add_argument("-a", "--author", help="Copyright holder name (defaults to git config user.name)")
    parser.add_argument("-y", "--year", help="Copyright year (defaults to the current year)")
    parser.add_argument(
        "-l",
        "--license",
        help=f"License identifier or alias, e.g. mit, apache-2.0, gpl-3.0 (default: {DEFAULT_LICENSE})",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Pick the license and confirm author and year interactively",
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="Output path (default: %(default)s)")
    parser.add_argument("--list", action="store_true", help="List supported licenses and exit")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of leaving unknown placeholders in the output",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def run_interactive(args: argparse.Namespace) -> int:
    print("Initialize License")
    if args.license:
        template = lookup(args.license)
    else:
        template = choose_license(available())
    author = ensure_value(args.author) or prompt_value(
        "Copyright holder name", guess_author() or FALLBACK_AUTHOR
    )
    year = ensure_value(args.year) or prompt_value("Copyright year", default_year())
    context = build_context(author, year)
    text = render(template, context, strict=args.strict)
    write_license(Path(args.output).expanduser(), text)
    print(f"{template.name} created for {context.author}!")
    return 0


def run_cli(args: argparse.Namespace) -> int:
    template = lookup(args.license or DEFAULT_LICENSE)
    context = build_context(args.author, args.year)
    text = render(template, context, strict=args.strict)
    write_license(Path(args.output).expanduser(), text)
    print(f"Created {template.name} for {context.author} ({context.year}).")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    if args.list:
        display_license_list(available())
        return 0
    try:
        if args.interactive:
            return run_interactive(args)
        return run_cli(args)
    except LicenseError as exc:
        print(str(exc), file=sys.stderr)
        return 1
