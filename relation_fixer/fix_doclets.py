"""Add missing inherited, mixed and implemented members to a JSDoc doclet dump.

Reads the output of `jsdoc -X` after the relation closures (`augmentsNested`,
`mixesNested`, `implementsNested`, `descendants`) have been computed, and writes
the dump back with synthesized member doclets and superseded ones ignored.
"""

import argparse
import logging
from pathlib import Path

from relation_fixer.add_missing_doclets import add_missing_doclets
from relation_fixer.compute_config_hash import compute_config_hash
from relation_fixer.fix_report import FixReport
from relation_fixer.load_config import load_config
from relation_fixer.load_doclets import load_doclets, write_doclets
from relation_fixer.validation import ValidationError


def run_fix(args: argparse.Namespace) -> int:
    """Execute the relation fixing pipeline."""
    if not args.input.exists():
        msg = f"Doclet dump not found: {args.input}"
        raise SystemExit(msg)

    config = load_config(args.config)
    if args.strict:
        config["strict"] = True
    if args.drop_ignored:
        config["drop_ignored"] = True

    doclets = load_doclets(args.input)
    print(f"Loaded {len(doclets)} doclets from: {args.input}")

    report = FixReport(compute_config_hash(config))
    try:
        fixed = add_missing_doclets(doclets, config, report)
    except ValidationError as exc:
        msg = f"Invalid doclets: {exc}"
        raise SystemExit(msg) from exc

    if args.dry_run:
        report.generate_report(args.report)
        print(f"Dry run complete. Report generated at {args.report}")
        return 0

    write_doclets(args.output, fixed)
    print(f"Wrote {len(fixed)} doclets into: {args.output}")
    return 0


def main() -> int:
    """Run the relation fixer."""
    ap = argparse.ArgumentParser(
        description="Add missing inherited/mixed members to a JSDoc doclet dump.",
    )
    ap.add_argument(
        "input",
        type=Path,
        help="Doclet dump (*.json from `jsdoc -X`, or *.yml)",
    )
    ap.add_argument(
        "output",
        type=Path,
        help="Where to write the fixed doclets (JSON)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and write a report without writing doclets",
    )
    ap.add_argument(
        "--report",
        default="relation_report.json",
        help="Report path used by --dry-run (default: relation_report.json)",
    )
    ap.add_argument(
        "--drop-ignored",
        action="store_true",
        help="Remove superseded doclets instead of marking them ignored",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed member longnames and duplicate longnames",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every resolved entity",
    )
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    return run_fix(args)


if __name__ == "__main__":
    raise SystemExit(main())
