"""Main module for the media optimizer CLI."""

import sys
import json
import argparse
from typing import Any, Dict, List, Optional

from . import __version__
from .core.config import load_config
from .core.exceptions import MediaOptimizerError
from .core.factories import LoggerFactory
from .core.models import MediaConfig
from .core.services import MediaResolver
from .core.validator import ENUM_FIELDS

OPTION_FLAGS = ("width", "height", "quality", "format", "fit", "focal", "dpr", "blur")


def _parse_widths(value: str) -> List[int]:
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"widths must be comma-separated integers, got {value!r}"
        )


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--imagekit-id", help="ImageKit URL ID (env: MEDIA_IMAGEKIT_ID)")
    parser.add_argument(
        "--supabase-url", help="Supabase project URL (env: MEDIA_SUPABASE_URL)"
    )
    parser.add_argument("--bucket", help="Storage bucket name (env: MEDIA_SUPABASE_BUCKET)")
    parser.add_argument(
        "--force-backup",
        action="store_true",
        help="Route the primary slot to the backup provider",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")


def _add_transform_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="File path inside the storage bucket")
    parser.add_argument("--width", type=int, help="Target width (1-4000)")
    parser.add_argument("--height", type=int, help="Target height (1-4000)")
    parser.add_argument("--quality", type=int, help="Quality (1-100, default: 80)")
    parser.add_argument("--format", choices=ENUM_FIELDS["format"], help="Output format")
    parser.add_argument("--fit", choices=ENUM_FIELDS["fit"], help="Resize strategy")
    parser.add_argument("--focal", choices=ENUM_FIELDS["focal"], help="Focal point")
    parser.add_argument("--dpr", type=float, help="Device pixel ratio (1-3)")
    parser.add_argument("--blur", type=int, help="Blur radius (1-100)")
    parser.add_argument("--sharpen", action="store_true", help="Sharpen the image")


def build_config(args: argparse.Namespace) -> MediaConfig:
    """Merge CLI flags over MEDIA_* environment variables."""
    data = MediaConfig.env_values()
    overrides: Dict[str, Any] = {
        "image_kit_id": args.imagekit_id,
        "supabase_url": args.supabase_url,
        "bucket_name": args.bucket,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    if args.force_backup:
        data["force_backup_mode"] = True
    if args.debug:
        data["debug"] = True
    return load_config(data)


def collect_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Gather the transform options that were actually given."""
    options = {
        name: getattr(args, name)
        for name in OPTION_FLAGS
        if getattr(args, name) is not None
    }
    if args.sharpen:
        options["sharpen"] = True
    return options


def main(argv: Optional[List[str]] = None) -> None:
    """
    Entry point for the media optimizer command-line interface.

    Commands:
        resolve: print primary and backup URLs for a path as JSON
        srcset: print a responsive srcset string as JSON
        version: print version information
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="media-optimizer",
        description="Media Optimizer - ImageKit/Supabase image URL generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve a path with explicit configuration
  media-optimizer resolve photos/hero.jpg --width 1200 --format webp \\
                  --imagekit-id demo --supabase-url https://xyz.supabase.co

  # Responsive srcset using MEDIA_* environment variables
  media-optimizer srcset photos/hero.jpg --widths 320,640,1024

  # Show version
  media-optimizer version
        """,
    )

    subparsers: argparse._SubParsersAction = parser.add_subparsers(
        dest="command", help="Available commands"
    )

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve primary and backup URLs for a media path"
    )
    _add_transform_arguments(resolve_parser)
    _add_config_arguments(resolve_parser)
    resolve_parser.add_argument(
        "--with-srcset", action="store_true", help="Include the default srcset"
    )

    srcset_parser = subparsers.add_parser(
        "srcset", help="Build a responsive srcset for a media path"
    )
    _add_transform_arguments(srcset_parser)
    _add_config_arguments(srcset_parser)
    srcset_parser.add_argument(
        "--widths", type=_parse_widths, default=None, help="Comma-separated widths"
    )

    subparsers.add_parser("version", help="Show version information")

    args: argparse.Namespace = parser.parse_args(argv)

    if args.command in ("resolve", "srcset"):
        try:
            config = build_config(args)
            logger = LoggerFactory.create_logger(
                "media-optimizer.resolver", "DEBUG" if config.debug else None
            )
            resolver = MediaResolver(config, logger=logger)
            options = collect_options(args)
            if args.command == "resolve":
                if args.with_srcset:
                    media = resolver.resolve_optimized_media(args.path, options)
                else:
                    media = resolver.resolve(args.path, options)
                payload: Dict[str, Any] = media.model_dump(mode="json", exclude_none=True)
            else:
                payload = {
                    "src_set": resolver.build_src_set(args.path, options, args.widths)
                }
        except MediaOptimizerError as exc:
            print(f"error: {exc}", file=sys.stderr)
            sys.exit(2)
        print(json.dumps(payload, indent=2))

    elif args.command == "version":
        print("Media Optimizer CLI")
        print(f"Version {__version__}")
        print("ImageKit primary / Supabase backup URL generation")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
