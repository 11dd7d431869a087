# nuri/cli.py
"""
nuri command line.
Generate a 16-colour ANSI terminal theme from a wallpaper image.

Usage:
  nuri IMAGE [--name NAME] [--mode dark|light|auto] [--target ghostty,zellij,neovim]
             [--output PATH | --install [--no-clobber]] [--preview] [--colors K]
             [--min-contrast RATIO] [--debug]

Pipeline:
  load (downsample to 256px, Lab) -> k-means -> slot assignment -> serialize.

Output:
  Without --output/--install the theme is printed to stdout. Diagnostics go
  to stderr so the theme can be piped straight into a file.

Exit codes:
  0 ok, 2 image not found, 3 unsupported/corrupt image, 4 write/install failed.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .assign import AnsiPalette, assign_slots
from .backends import Target, check_theme_name, get_backend, parse_targets
from .constants import DEFAULT_CLUSTERS
from .contrast import accent_contrast_report, enforce_min_contrast
from .extract import ExtractedColor, extract_colors
from .image_io import (
    ImageNotFound,
    UnsupportedOrCorruptFormat,
    image_to_lab_pixels,
    load_image_rgb,
)
from .mode import RequestedMode, ThemeMode, effective_mode, parse_mode
from .preview import print_preview
from .utils import (
    debug_log,
    error,
    format_percentage,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_config_line,
    warn,
)

EXIT_OK = 0
EXIT_NOT_FOUND = 2
EXIT_BAD_IMAGE = 3
EXIT_WRITE_FAILED = 4


# CLI args & small helpers


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _theme_name(text: str) -> str:
    try:
        return check_theme_name(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{exc} (no path separators)") from None


def _targets(text: str) -> List[Target]:
    try:
        targets = parse_targets(text)
    except ValueError:
        names = ", ".join(t.value for t in Target)
        raise argparse.ArgumentTypeError(
            f"unknown target in {text!r} (choose from {names})"
        ) from None
    if not targets:
        raise argparse.ArgumentTypeError("no target given")
    return targets


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuri",
        description="Generate color themes from wallpaper images.",
    )
    parser.add_argument("image", type=Path, help="Path to the input image")
    parser.add_argument(
        "-n",
        "--name",
        type=_theme_name,
        default=None,
        help="Theme name (defaults to image file stem)",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=parse_mode,
        default=None,
        metavar="{dark,light,auto}",
        help="Force dark or light mode (auto-detected if omitted)",
    )
    out = parser.add_mutually_exclusive_group()
    out.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write theme to this file instead of stdout",
    )
    out.add_argument(
        "--install",
        action="store_true",
        help="Install theme to the target's standard config directory",
    )
    parser.add_argument(
        "-t",
        "--target",
        type=_targets,
        default=[Target.GHOSTTY],
        help="Target theme format(s), comma-separated (e.g. ghostty,zellij)",
    )
    parser.add_argument(
        "--preview", action="store_true", help="Print a colored terminal preview"
    )
    parser.add_argument(
        "-k",
        "--colors",
        type=_positive_int,
        default=DEFAULT_CLUSTERS,
        help="Number of K-means clusters",
    )
    parser.add_argument(
        "--min-contrast",
        type=float,
        default=None,
        metavar="RATIO",
        help="Lift accents until they reach this contrast ratio against the background",
    )
    parser.add_argument(
        "--no-clobber",
        action="store_true",
        help="Error instead of overwriting when installing an existing theme",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose pipeline details")
    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.output is not None and len(args.target) != 1:
        parser.error("--output takes exactly one target")
    if args.name is None:
        stem = args.image.stem
        args.name = stem if stem not in ("", ".", "..") else "nuri"
    return args


def generate_palette(
    image: Path,
    k: int,
    requested_mode: RequestedMode,
    min_contrast: Optional[float] = None,
    debug: bool = False,
) -> Tuple[AnsiPalette, List[ExtractedColor], ThemeMode]:
    """
    Load -> extract -> assign (-> optional contrast).

    Raises ImageNotFound / UnsupportedOrCorruptFormat from the load step only.
    """
    t_start = time.perf_counter()
    rgb = load_image_rgb(image)
    pixels = image_to_lab_pixels(rgb)
    t_loaded = time.perf_counter()
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{rgb.shape[1]}x{rgb.shape[0]}"),
                    ("Pixels", int(pixels.shape[0])),
                    ("Load", format_seconds_compact(t_loaded - t_start)),
                ]
            )
        )

    colors = extract_colors(pixels, k)
    t_extracted = time.perf_counter()
    if debug:
        debug_log(
            f"clusters: {len(colors)} (k={k}) in "
            f"{format_seconds_compact(t_extracted - t_loaded)}"
        )
        for ec in colors:
            debug_log(f"  -> {ec.color.to_hex()}  {format_percentage(ec.weight)}")

    mode = effective_mode(requested_mode, colors)
    if debug:
        debug_log(f"mode: {mode.value}")

    palette = assign_slots(colors, mode)
    if min_contrast is not None:
        palette = enforce_min_contrast(palette, min_contrast, mode)

    if debug:
        fg_ratio, min_accent = accent_contrast_report(palette)
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Foreground contrast", fg_ratio),
                    ("Dimmest accent", min_accent),
                    ("Total", format_seconds_compact(time.perf_counter() - t_start)),
                ]
            )
        )
    return palette, colors, mode


def _emit(args: argparse.Namespace, palette: AnsiPalette) -> int:
    """Serialize to stdout, a file, or the targets' install directories."""
    for target in args.target:
        backend = get_backend(target)
        try:
            if args.install:
                path = backend.install(palette, args.name, no_clobber=args.no_clobber)
                log(f"Installed {backend.name} theme to {path}")
            elif args.output is not None:
                path = backend.write_to(palette, args.name, args.output)
                log(f"Wrote {backend.name} theme to {path}")
            else:
                sys.stdout.write(backend.serialize(palette, args.name))
                sys.stdout.flush()
        except FileExistsError as exc:
            error(f"{exc} (drop --no-clobber to overwrite)")
            return EXIT_WRITE_FAILED
        except OSError as exc:
            error(f"failed to write {backend.name} theme: {exc}")
            return EXIT_WRITE_FAILED
    return EXIT_OK


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_cli_args(argv)
    if args.min_contrast is not None and args.min_contrast <= 1.0:
        warn(f"--min-contrast {args.min_contrast} has no effect (ratios start at 1)")

    if args.debug:
        print_config_line(
            "run",
            [
                ("Image", args.image.name),
                ("Theme", args.name),
                ("Clusters", args.colors),
                ("Mode", getattr(args.mode, "value", args.mode) or "auto"),
                ("Targets", ",".join(t.value for t in args.target)),
            ],
            debug=True,
        )

    try:
        palette, colors, _mode = generate_palette(
            args.image,
            args.colors,
            args.mode,
            min_contrast=args.min_contrast,
            debug=args.debug,
        )
    except ImageNotFound as exc:
        error(f"{exc}. Check the path.")
        return EXIT_NOT_FOUND
    except UnsupportedOrCorruptFormat as exc:
        error(f"{exc}. Check the file format.")
        return EXIT_BAD_IMAGE

    if args.preview:
        to_stdout = not args.install and args.output is None
        print_preview(palette, colors, stream=sys.stderr if to_stdout else sys.stdout)

    return _emit(args, palette)


if __name__ == "__main__":
    sys.exit(main())
