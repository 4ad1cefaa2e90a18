"""EchoText CLI: encode, decode and inspect share tokens from the command line."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from echotext.codec.compact import encode_compact
from echotext.codec.dispatcher import DecodeFailure, resolve_shared_config
from echotext.codec.legacy import encode as encode_legacy
from echotext.codec.links import build_share_url, extract_token
from echotext.config import get_settings
from echotext.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, DEFAULT_REPEAT, DEFAULT_SPACING
from echotext.models.effects import AVAILABLE_EFFECTS, effect_css_class, effect_display_name, effect_to_index
from echotext.models.share_config import ShareConfig
from echotext.observability.logger import configure_logging

log = logging.getLogger("echotext.cli")


def cmd_encode(args) -> int:
    """Encode a config given as flags into a token."""
    try:
        config = ShareConfig(
            text=args.text,
            effect=args.effect,
            color=args.color,
            is_bold=args.bold,
            is_italic=args.italic,
            is_strikethrough=args.strikethrough,
            font_size=args.font_size,
            font_family=args.font_family,
            spacing=args.spacing,
            repeat=args.repeat,
        )
    except ValidationError as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 2

    token = encode_legacy(config) if args.legacy else encode_compact(config)
    if not token:
        print("Could not generate a share link.", file=sys.stderr)
        return 1

    if args.origin:
        print(build_share_url(token, args.origin))
    else:
        print(token)
    log.info("encoded format=%s length=%d", "legacy" if args.legacy else "compact", len(token))
    return 0


def cmd_decode(args) -> int:
    """Resolve a token (or share URL) and print the config as JSON."""
    result = resolve_shared_config(extract_token(args.token))
    if isinstance(result, DecodeFailure):
        print(result.message, file=sys.stderr)
        return 1
    print(json.dumps(result.to_wire(), ensure_ascii=False, indent=2 if args.pretty else None))
    return 0


def cmd_effects(args) -> int:
    """List the effect names, wire indexes and animation classes."""
    for effect in AVAILABLE_EFFECTS:
        name = effect_display_name(effect)
        print(f"  {effect_to_index(effect)}  {effect.value:8s} {name:8s} {effect_css_class(effect)}")
    return 0


def cmd_serve(args) -> int:
    """Start the HTTP service."""
    from echotext.main import run

    settings = args.settings
    overrides = {}
    if args.host:
        overrides["HOST"] = args.host
    if args.port:
        overrides["PORT"] = args.port
    run(settings.model_copy(update=overrides))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="echotext", description="EchoText share link toolkit")
    parser.add_argument("-V", "--verbose", action="store_true", help="Enable DEBUG-level logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- encode ---
    p_enc = subparsers.add_parser("encode", help="Encode a config into a share token")
    p_enc.add_argument("--text", required=True, help="Text to display")
    p_enc.add_argument("--effect", default=None, choices=[e.value for e in AVAILABLE_EFFECTS],
                       help="Effect name")
    p_enc.add_argument("--color", default="#000000", help="Hex colour, e.g. '#ff0000' or 'f00'")
    p_enc.add_argument("--bold", action="store_true")
    p_enc.add_argument("--italic", action="store_true")
    p_enc.add_argument("--strikethrough", action="store_true")
    p_enc.add_argument("--repeat", type=int, default=DEFAULT_REPEAT, help="Repeat count (>= 1)")
    p_enc.add_argument("--font-size", type=float, default=DEFAULT_FONT_SIZE,
                       help="Only kept by --legacy tokens")
    p_enc.add_argument("--font-family", default=DEFAULT_FONT_FAMILY, help="Only kept by --legacy tokens")
    p_enc.add_argument("--spacing", type=float, default=DEFAULT_SPACING, help="Only kept by --legacy tokens")
    p_enc.add_argument("--legacy", action="store_true", help="Emit a full-fidelity legacy token")
    p_enc.add_argument("--origin", default=None, help="Print a full share URL under this origin")

    # --- decode ---
    p_dec = subparsers.add_parser("decode", help="Decode a share token or URL")
    p_dec.add_argument("token", help="Token, '/s/<token>' path or full share URL")
    p_dec.add_argument("--pretty", action="store_true", help="Indent JSON output")

    # --- effects ---
    subparsers.add_parser("effects", help="List available effects")

    # --- serve ---
    p_serve = subparsers.add_parser("serve", help="Start the HTTP API")
    p_serve.add_argument("--host", default=None, help="Bind host (defaults to HOST setting)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (defaults to PORT setting)")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    args.settings = get_settings()
    if args.verbose:
        args.settings = args.settings.model_copy(update={"LOG_LEVEL": "DEBUG"})
    if args.command != "serve":
        # stdout carries command output; logs go to stderr, quiet unless asked
        level = "DEBUG" if args.verbose else "WARNING"
        configure_logging(
            args.settings.model_copy(update={"LOG_LEVEL": level, "LOG_JSON": False}),
            stream=sys.stderr,
        )

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "effects": cmd_effects,
        "serve": cmd_serve,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
