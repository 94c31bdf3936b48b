"""Command-line front end for the quickpopup text tools.

Reads the selection from an argument or stdin so the splitter and the other
transforms can be used outside the editor.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from quickpopup import __version__
from quickpopup.config import Config, ConfigError, load_config
from quickpopup.popup import Rect, Viewport, calculate_popup_position
from quickpopup.text import ParagraphSplitter, convert_to_link, get_new_file_path


def _read_text(value: str | None) -> str:
    """Use the positional argument, falling back to stdin."""
    if value is not None:
        return value
    return sys.stdin.read()


def cmd_split(args: argparse.Namespace, config: Config) -> int:
    splitter = ParagraphSplitter(config.splitter)
    print(splitter.split(_read_text(args.text)))
    return 0


def cmd_position(args: argparse.Namespace, config: Config) -> int:
    top, left, width, height = args.selection
    popup_width, popup_height = args.popup
    viewport_width, viewport_height = args.viewport

    placement = calculate_popup_position(
        Rect(top=top, left=left, width=width, height=height),
        Rect(top=0, left=0, width=popup_width, height=popup_height),
        Viewport(width=viewport_width, height=viewport_height),
        config.popup,
    )
    print(json.dumps(placement.to_dict()))
    return 0


def cmd_link(args: argparse.Namespace, config: Config) -> int:
    print(convert_to_link(_read_text(args.text).strip()))
    return 0


def cmd_note_path(args: argparse.Namespace, config: Config) -> int:
    print(get_new_file_path(args.title, args.folder))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quickpopup", description="Selection popup text tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="Path to a JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("split", help="Split text into paragraphs")
    p.add_argument("text", nargs="?", help="Text to split (default: stdin)")
    p.set_defaults(func=cmd_split)

    p = sub.add_parser("position", help="Compute the popup placement as JSON")
    p.add_argument("--selection", type=float, nargs=4, required=True,
                   metavar=("TOP", "LEFT", "WIDTH", "HEIGHT"), help="Selection rectangle")
    p.add_argument("--popup", type=float, nargs=2, required=True,
                   metavar=("WIDTH", "HEIGHT"), help="Popup size")
    p.add_argument("--viewport", type=float, nargs=2, required=True,
                   metavar=("WIDTH", "HEIGHT"), help="Viewport size")
    p.set_defaults(func=cmd_position)

    p = sub.add_parser("link", help="Wrap text as an internal [[link]]")
    p.add_argument("text", nargs="?", help="Text to wrap (default: stdin)")
    p.set_defaults(func=cmd_link)

    p = sub.add_parser("note-path", help="Path for a new note titled after the text")
    p.add_argument("title", help="Note title or selected text")
    p.add_argument("--folder", default="", help="Target folder")
    p.set_defaults(func=cmd_note_path)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
