# otui_preview/cli.py
import argparse
import json
import logging
import sys
from pathlib import Path

import requests

from .client import push_otui_file, read_otui_from_file
from .otui_parser import parse_otui, prettify_otui
from .preview import INITIAL_OTUI, render_otui
from .surfaces import HTMLPreviewSurface


def save_output_to_file(content: str, output_path: str):
    # Ensure the output directory exists
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)


def _load_source(infile):
    return read_otui_from_file(infile) if infile else INITIAL_OTUI


def cmd_parse(args) -> int:
    tree = parse_otui(_load_source(args.infile))
    print(json.dumps(tree, indent=2))
    return 0


def cmd_render(args) -> int:
    surface = HTMLPreviewSurface()
    result = render_otui(_load_source(args.infile), surface)
    page = surface.render_page(title=args.title)
    if args.out:
        save_output_to_file(page, args.out)
        print(f"Saved preview to {args.out}")
    else:
        print(page)
    return 0 if result.ok else 1


def cmd_format(args) -> int:
    print(prettify_otui(read_otui_from_file(args.infile)))
    return 0


def cmd_serve(args) -> int:
    from .otui_preview_daemon import run

    run(config_file_path=args.config)
    return 0


def cmd_push(args) -> int:
    try:
        result = push_otui_file(args.infile, daemon_url=args.url)
    except requests.RequestException as e:
        print(f"[!] Could not reach preview daemon: {e}", file=sys.stderr)
        return 1
    print(f"Status: {result.get('status')}")
    if result.get("message"):
        print(result["message"])
    return 0 if result.get("status") == "rendered" else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="otui-preview", description="OTUI layout live preview")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Print the parsed attribute tree as JSON")
    p_parse.add_argument("infile", nargs="?", help="Path to .otui file (default: built-in sample)")
    p_parse.set_defaults(func=cmd_parse)

    p_render = sub.add_parser("render", help="Render the layout to an HTML page")
    p_render.add_argument("infile", nargs="?", help="Path to .otui file (default: built-in sample)")
    p_render.add_argument("--out", help="Path to save the HTML page")
    p_render.add_argument("--title", default="OTUI Preview", help="Page title")
    p_render.set_defaults(func=cmd_render)

    p_format = sub.add_parser("format", help="Re-indent an .otui file")
    p_format.add_argument("infile", help="Path to .otui file")
    p_format.set_defaults(func=cmd_format)

    p_serve = sub.add_parser("serve", help="Run the preview daemon")
    p_serve.add_argument("--config", help="Path to YAML configuration file")
    p_serve.set_defaults(func=cmd_serve)

    p_push = sub.add_parser("push", help="Send an .otui file to a running daemon")
    p_push.add_argument("infile", help="Path to .otui file")
    p_push.add_argument("--url", help="Daemon base URL (default: from configuration)")
    p_push.set_defaults(func=cmd_push)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
