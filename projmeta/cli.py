"""CLI entrypoints for projmeta commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import OUTPUT_FORMATS, ConfigError, ProjMetaConfig, load_config
from .consistency import check_config_files
from .loader import extract_metadata, load_detected_sources
from .logging import configure_logging, get_logger
from .models import ConfigFileRef, ConfigKind, LoadedConfig, MetadataError
from .render import render_metadata, render_report


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "count",
        "help": "Show progress on stderr (-v) or the full trace (-vv).",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = 0
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_format_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to .projmeta.yml output.format, else text).",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projmeta",
        description="Extract and cross-check project metadata from config files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a DEBUG-level trace of the run to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser(
        "show",
        help="Print the metadata of every config file found in a project.",
    )
    _add_verbose_option(show_parser, suppress_default=True)
    _add_format_option(show_parser)
    _add_path_argument(show_parser)

    extract_parser = subparsers.add_parser(
        "extract",
        help="Print the metadata of a single config file.",
    )
    _add_verbose_option(extract_parser, suppress_default=True)
    _add_format_option(extract_parser)
    extract_parser.add_argument("file", help="Path to the config file.")
    extract_parser.add_argument(
        "--kind",
        required=True,
        choices=[kind.value for kind in ConfigKind],
        help="Format of the config file.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Report fields on which a project's config files disagree.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_format_option(check_parser)
    _add_path_argument(check_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for projmeta commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbosity=args.verbose, log_file=args.log_file)
    logger = get_logger(__name__)

    try:
        if args.command == "extract":
            config = load_config(Path(args.file).parent)
            ref = ConfigFileRef(kind=ConfigKind(args.kind), path=Path(args.file))
            sources = [LoadedConfig(ref=ref, metadata=extract_metadata(ref))]
            print(render_metadata(sources, _output_format(args, config)))
        elif args.command == "show":
            config = load_config(Path(args.path))
            sources = load_detected_sources(args.path, config.files)
            print(render_metadata(sources, _output_format(args, config)))
        elif args.command == "check":
            config = load_config(Path(args.path))
            report = check_config_files(
                args.path,
                config.files,
                ignore_fields=config.consistency.ignore_fields,
            )
            logger.debug(
                "Compared %d config files, %d discrepancies",
                len(report.sources),
                len(report.discrepancies),
            )
            print(render_report(report, _output_format(args, config)))
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (MetadataError, ConfigError) as exc:
        parser.exit(1, f"projmeta {args.command} failed: {exc}\n")


def _output_format(args: argparse.Namespace, config: ProjMetaConfig) -> str:
    return args.format or config.output.format or "text"


if __name__ == "__main__":
    main(sys.argv[1:])
