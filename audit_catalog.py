#!/usr/bin/env python3
"""Audit gradients and the remix table against the colour-set validator."""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

import settings
from color_set import ColorSet, quality_score, validation_failures
from fast_remix import FAST_REMIX_TABLE
from gradients import GRADIENTS, Gradient, load_catalog
from selection import create_variation, harmonious_color_set


@dataclass
class AuditResult:
    label: str
    color_set: ColorSet
    failures: list

    @property
    def passed(self) -> bool:
        return not self.failures


def unique_gradients(catalog: Sequence[Gradient]) -> list[Gradient]:
    """Drop repeated definitions, keeping the first occurrence."""
    seen = set()
    unique = []
    for gradient in catalog:
        if gradient not in seen:
            seen.add(gradient)
            unique.append(gradient)
    return unique


def audit_gradients(catalog: Sequence[Gradient]) -> list[AuditResult]:
    """Run the per-gradient selection once for each gradient and validate it."""
    results = []
    for gradient in catalog:
        color_set = harmonious_color_set(gradient=gradient)
        results.append(AuditResult(gradient.name, color_set, validation_failures(color_set)))
    return results


def audit_remix_table(table: Optional[Sequence[ColorSet]] = None) -> list[AuditResult]:
    """Validate every remix entry and the CTA variation derived from it."""
    if table is None:
        table = FAST_REMIX_TABLE

    results = []
    for entry in table:
        name = entry.gradient.name
        results.append(AuditResult(f"{name} (remix)", entry, validation_failures(entry)))
        variation = create_variation(entry)
        results.append(AuditResult(f"{name} (variation)", variation, validation_failures(variation)))
    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Audit gradients and remix entries against the colour-set validator.'
    )
    parser.add_argument(
        '--catalog', '-c',
        default=None,
        help='JSON gradient catalog (default: built-in catalog)'
    )
    parser.add_argument(
        '--all',
        action='store_true',
        help='Audit repeated gradient definitions too'
    )
    parser.add_argument(
        '--remix',
        action='store_true',
        help='Also audit the fast remix table and its variations'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Exit 1 when any gradient fails validation'
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL)

    try:
        catalog = load_catalog(args.catalog) if args.catalog else GRADIENTS
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not args.all:
        catalog = unique_gradients(catalog)

    start = time.perf_counter()
    results = audit_gradients(catalog)
    if args.remix:
        results.extend(audit_remix_table())
    elapsed = time.perf_counter() - start

    total = len(results)
    for i, result in enumerate(results, 1):
        ratios = result.color_set.contrast_ratios
        if result.passed:
            print(f"[{i}/{total}] {result.label} → ok "
                  f"(score {quality_score(result.color_set):.2f}, cta {result.color_set.cta_color} "
                  f"{ratios.cta_to_background:.2f}:1)")
        else:
            print(f"[{i}/{total}] {result.label} → FAIL: {'; '.join(result.failures)}")

    failed = [r for r in results if not r.passed]

    # Summary
    print()
    print(f"Completed: {total - len(failed)}/{total} passed in {elapsed * 1000:.1f}ms")
    if failed:
        print(f"Failed ({len(failed)}):")
        for result in failed:
            print(f"  - {result.label}")
        if args.strict:
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
