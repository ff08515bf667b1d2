"""Main orchestration script for dumping JSDoc doclets and fixing their relations."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(
    cmd_list: Sequence[str | Path],
    cwd: Path | str | None = None,
    stdout_path: Path | None = None,
) -> None:
    """Run a command and exit if it fails, optionally capturing stdout to a file."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        if stdout_path is None:
            subprocess.run(cmd_list, check=True, cwd=cwd)
        else:
            with open(stdout_path, "w", encoding="utf-8") as out:
                subprocess.run(cmd_list, check=True, cwd=cwd, stdout=out)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full doclet dump and relation fixing pipeline."""
    parser = argparse.ArgumentParser(
        description="Dump JSDoc doclets and add missing inherited members."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before fixing doclets",
    )
    parser.add_argument(
        "--jsdoc-config",
        default="jsdoc.json",
        help="JSDoc configuration file passed to `jsdoc -c` (default: jsdoc.json)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and generate a report without writing doclets",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\n✅ Development checks passed. Proceeding with relation fixing.\n")

    build_dir = root_dir / "build"
    build_dir.mkdir(parents=True, exist_ok=True)
    dump_file = build_dir / "doclets.json"
    out_file = build_dir / "doclets.fixed.json"

    # 1. Dump doclets using jsdoc's explain mode
    print("--- Step 1: Dumping JSDoc doclets ---")
    run_command(
        ["npx", "jsdoc", "-X", "-c", args.jsdoc_config],
        stdout_path=dump_file,
    )

    # 2. Add missing inherited/mixed members
    print("\n--- Step 2: Adding missing doclets ---")
    cmd = [
        sys.executable,
        "-m",
        "relation_fixer.fix_doclets",
        str(dump_file),
        str(out_file),
    ]

    if args.dry_run:
        cmd.append("--dry-run")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Fixed doclets written to {out_file}")


if __name__ == "__main__":
    main()
