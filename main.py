"""Main orchestration script for building a doc tree from a tagged syntax dump."""

import argparse
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).parent


def default_output(input_path: Path, fmt: str) -> Path:
    """Return where the tree for ``input_path`` is written when --out is absent."""
    return ROOT_DIR / "doctree_out" / f"{input_path.stem}.{fmt}"


def build_steps(args: argparse.Namespace, out: Path) -> list[tuple[str, list[str]]]:
    """Return the labelled commands to run, in order."""
    python_exe = sys.executable
    steps: list[tuple[str, list[str]]] = []
    if args.dev:
        steps.append(("tests", [python_exe, "-m", "pytest", "-q"]))

    build = [
        python_exe,
        "-m",
        "doctree.doctree_cli",
        str(args.input),
        "--out",
        str(out),
        "--format",
        args.format,
    ]
    if args.config:
        build.extend(["--config", args.config])
    steps.append(("build", build))
    return steps


def run_step(label: str, cmd: list[str]) -> None:
    """Run one step from the project root; stop the pipeline if it fails."""
    print(f"--- {label}: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=ROOT_DIR, check=False)
    if result.returncode != 0:
        print(f"Step '{label}' failed with exit code {result.returncode}")
        sys.exit(result.returncode)


def main(argv: list[str] | None = None) -> None:
    """Run the test suite (optionally) and then the doc-tree build."""
    parser = argparse.ArgumentParser(
        description="Build a documentation tree from a tagged syntax dump."
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Syntax dump (YAML or JSON) produced by the parser front end",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run the test suite before building the tree",
    )
    parser.add_argument(
        "--out",
        type=Path,
        help="Output file (default: doctree_out/<input stem>.<format>)",
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args(argv)

    # The build runs from ROOT_DIR, so a relative input must not depend on cwd.
    args.input = args.input.resolve()
    out = (args.out or default_output(args.input, args.format)).resolve()
    for label, cmd in build_steps(args, out):
        run_step(label, cmd)

    print(f"\nSUCCESS: Doc tree written to {out}")


if __name__ == "__main__":
    main()
