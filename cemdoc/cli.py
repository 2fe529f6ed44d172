"""CLI entrypoints for cemdoc commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import PRIVACY_MODES, ConfigError, load_config
from .converter import Converter
from .logging import configure_logging
from .render.document import ManifestError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cemdoc",
        description="Render a custom elements manifest as Markdown.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a manifest to Markdown.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    render_parser.add_argument(
        "manifest",
        nargs="?",
        default="custom-elements.json",
        help="Path to the manifest JSON, or '-' for stdin (defaults to custom-elements.json).",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write Markdown to this file instead of stdout.",
    )
    render_parser.add_argument(
        "--private",
        choices=PRIVACY_MODES,
        default=None,
        help="Hide private members, or move protected/private members into a details block.",
    )
    render_parser.add_argument(
        "--heading-offset",
        type=int,
        default=None,
        help="Shift every heading level by this amount.",
    )
    render_parser.add_argument(
        "--config",
        default=None,
        help="Path to .cemdoc.yml or the directory holding it (defaults to the current directory).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP rendering service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cemdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    if args.command == "render":
        try:
            config = load_config(Path(args.config) if args.config else Path.cwd())
            config = config.with_overrides(
                heading_offset=args.heading_offset,
                private=args.private,
                output=Path(args.output) if args.output else None,
            )
            outcome = Converter().run(args.manifest, config.output, options=config.render)
        except (ManifestError, ConfigError) as exc:
            parser.exit(1, f"{exc}\n")
        except OSError as exc:
            parser.exit(1, f"cemdoc render failed: {exc}\nRun with --verbose for more details.\n")
        if outcome.path is not None:
            print(f"Markdown written to {_relativize(outcome.path)}")
    elif args.command == "serve":
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
