"""CLI entrypoints for repodoc commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .github import GitHubClient
from .logging import configure_logging
from .summary import describe_repository
from .workflow import Phase, WorkflowController


def _add_verbosity_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default: object = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .repodoc.yml or the directory containing it (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repodoc",
        description="Generate README files from GitHub repository metadata.",
    )
    _add_verbosity_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a README for a GitHub repository.",
    )
    _add_verbosity_options(generate_parser, suppress_default=True)
    _add_config_option(generate_parser)
    generate_parser.add_argument(
        "identifier",
        help="Repository reference: owner/name, github.com/owner/name or a full URL.",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the README to this path instead of printing it.",
    )
    generate_parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a short repository summary before the README.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing a generation session.",
    )
    _add_verbosity_options(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repodoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(getattr(args, "quiet", False)))

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "generate":
        controller = WorkflowController(
            GitHubClient.from_config(config.github),
            pacing_delay=config.workflow.pacing_delay,
        )
        state = asyncio.run(controller.submit(args.identifier))
        if state.phase is Phase.FAILED:
            parser.exit(1, f"Generation failed: {state.error}\n")
        if state.phase is not Phase.DOCUMENT_READY or state.document is None:
            parser.exit(1, f"{state.notice or 'README generation did not complete'}\n")

        if args.summary and state.descriptor is not None:
            print(describe_repository(state.descriptor))
            print()
        if args.output is not None:
            output = args.output.expanduser()
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(state.document + "\n", encoding="utf-8")
            print(f"README written to {_relativize(output)}")
        else:
            print(state.document)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(args.host, args.port, config=config)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
