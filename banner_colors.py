#!/usr/bin/env python3
"""
Pick accessible banner colours from the command line.

    banner_colors.py generate [--attempts N]
    banner_colors.py remix
    banner_colors.py vary
    banner_colors.py check FOREGROUND BACKGROUND [--large]
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

import settings
from color_set import ColorSet, quality_score, validation_failures
from contrast import analyze_contrast, hex_to_rgb, is_light, wcag_level
from fast_remix import fast_remix_color_set
from gradients import load_catalog
from preview import render_preview
from selection import create_variation, generate_optimal_color_set


# =============================================================================
# Render
# =============================================================================

def render_color_set(color_set: ColorSet) -> str:
    """Render a colour set as a prose report."""
    ratios = color_set.contrast_ratios
    background = color_set.background
    lines = []

    lines.append(f"GRADIENT: {color_set.gradient.name}")
    lines.append(f"  {color_set.gradient.css}")
    lines.append(f"  Dominant: {background} ({'light' if is_light(background) else 'dark'})")
    lines.append("")

    lines.append("COLORS:")
    lines.append(f"  Heading: {color_set.heading_color} | "
                 f"{ratios.heading_to_background:.2f}:1 (WCAG {wcag_level(ratios.heading_to_background)})")
    lines.append(f"  Body:    {color_set.text_color} | "
                 f"{ratios.text_to_background:.2f}:1 (WCAG {wcag_level(ratios.text_to_background)})")
    lines.append(f"  CTA:     {color_set.cta_color} | "
                 f"{ratios.cta_to_background:.2f}:1 (WCAG {wcag_level(ratios.cta_to_background)}) | "
                 f"text {ratios.cta_text_to_cta}")
    lines.append("")

    failures = validation_failures(color_set)
    lines.append(f"Score: {quality_score(color_set):.2f} | Valid: {'yes' if not failures else 'no'}")
    for failure in failures:
        lines.append(f"  - {failure}")

    return "\n".join(lines)


def render_check(foreground: str, background: str, is_large_text: bool) -> str:
    result = analyze_contrast(foreground, background, is_large_text)
    size = "large" if is_large_text else "normal"
    return "\n".join([
        f"{foreground} on {background}: {result.ratio:.2f}:1",
        f"  AA ({size} text): {'pass' if result.meets_aa else 'fail'}",
        f"  AAA ({size} text): {'pass' if result.meets_aaa else 'fail'}",
    ])


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--seed', type=int, default=None,
                        help='Seed the random source for reproducible picks')
    common.add_argument('--json', action='store_true',
                        help='Print the renderer-facing JSON instead of prose')
    common.add_argument('--preview', '-p', default=None,
                        help='Write a PNG preview of the colour set to this path')
    common.add_argument('--catalog', '-c', default=None,
                        help='JSON gradient catalog to sample from')

    parser = argparse.ArgumentParser(description='Pick accessible banner colours.')
    parser.add_argument('--log-level', default=settings.LOG_LEVEL,
                        help='Logging level (default: %(default)s)')
    commands = parser.add_subparsers(dest='command', required=True)

    generate = commands.add_parser('generate', parents=[common],
                                   help='Best-of-N search over random gradients')
    generate.add_argument('--attempts', '-n', type=int, default=settings.DEFAULT_MAX_ATTEMPTS,
                          help='Number of combinations to try (default: %(default)s)')

    commands.add_parser('remix', parents=[common], help='Random pre-validated colour set')
    commands.add_parser('vary', parents=[common],
                        help='Generate a colour set, then a CTA variation of it')

    check = commands.add_parser('check', help='Contrast ratio between two colours')
    check.add_argument('foreground')
    check.add_argument('background')
    check.add_argument('--large', action='store_true', help='Use large-text thresholds')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(),
                        format='%(levelname)s %(name)s: %(message)s')

    if args.command == 'check':
        for color in (args.foreground, args.background):
            if hex_to_rgb(color) is None:
                print(f"Error: not a hex colour: {color}", file=sys.stderr)
                return 2
        print(render_check(args.foreground, args.background, args.large))
        return 0

    rng = random.Random(args.seed).random if args.seed is not None else None

    try:
        catalog = load_catalog(args.catalog) if args.catalog else None

        if args.command == 'generate':
            color_sets = [generate_optimal_color_set(args.attempts, catalog, rng)]
        elif args.command == 'remix':
            color_sets = [fast_remix_color_set(rng)]
        else:
            base = generate_optimal_color_set(catalog=catalog, rng=rng)
            color_sets = [base, create_variation(base)]
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = [c.to_dict() for c in color_sets]
        print(json.dumps(payload if len(payload) > 1 else payload[0], indent=2))
    else:
        print("\n\n".join(render_color_set(c) for c in color_sets))

    if args.preview:
        output_path = Path(args.preview)
        try:
            render_preview(color_sets[-1], output_path)
        except OSError as e:
            print(f"Error writing preview: {e}", file=sys.stderr)
            return 1
        print(f"\nWrote: {output_path}", file=sys.stderr if args.json else sys.stdout)

    return 0


if __name__ == '__main__':
    sys.exit(main())
