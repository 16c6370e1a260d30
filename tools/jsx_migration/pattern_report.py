#!/usr/bin/env python3
# CUI // SP-CTI
"""JSX Pattern Report - run detect/synthesize/describe on one parsed file.

Reads a Babel AST serialized to JSON (e.g. ``JSON.stringify(parser.parse(
code, {plugins: ["jsx"]}))``) and prints the migration guide, the Flutter
skeletons, or both as JSON.

Usage:
    # Markdown guide on stdout
    python tools/jsx_migration/pattern_report.py --ast-file Profile.ast.json

    # Flutter skeletons instead of the guide
    python tools/jsx_migration/pattern_report.py --ast-file Profile.ast.json --skeletons

    # Everything as JSON, with a custom naming config
    python tools/jsx_migration/pattern_report.py --ast-file Profile.ast.json \\
        --config args/jsx_pattern_config.yaml --json

    # Write the guide to a file
    python tools/jsx_migration/pattern_report.py --ast-file Profile.ast.json \\
        --output docs/Profile.migration.md
"""

import argparse
import json
import logging
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from tools.jsx_migration.code_synthesizer import synthesize  # noqa: E402
from tools.jsx_migration.migration_guide import describe  # noqa: E402
from tools.jsx_migration.pattern_config import (  # noqa: E402
    PatternConfigError,
    load_pattern_config,
)
from tools.jsx_migration.pattern_detector import detect  # noqa: E402

CUI_BANNER = "CUI // SP-CTI"

logger = logging.getLogger("jsxport.jsx_migration.pattern_report")


def build_report(tree, config=None):
    """Run the full pipeline on one tree and return a JSON-ready dict."""
    catalog = detect(tree, config=config)
    return _report_dict(catalog, synthesize(catalog))


def _report_dict(catalog, skeletons):
    return {
        "catalog": catalog.to_dict(),
        "skeletons": skeletons.to_dict(),
        "guide": describe(catalog),
    }


def _load_tree(ast_file):
    path = Path(ast_file)
    if not path.exists():
        raise FileNotFoundError(f"AST file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description=f"{CUI_BANNER}\nJSX Pattern Report (React -> Flutter)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--ast-file", required=True, help="Babel AST JSON file")
    parser.add_argument("--config", help="Pattern config YAML (default: args/jsx_pattern_config.yaml)")
    parser.add_argument("--skeletons", action="store_true", help="Print Flutter skeletons instead of the guide")
    parser.add_argument("--output", help="Write the guide to this file")
    parser.add_argument("--json", action="store_true", dest="json_output", help="JSON output")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        config = load_pattern_config(Path(args.config) if args.config else None)
        tree = _load_tree(args.ast_file)
    except (FileNotFoundError, PatternConfigError, json.JSONDecodeError,
            UnicodeDecodeError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    catalog = detect(tree, config=config)
    skeletons = synthesize(catalog)
    report = _report_dict(catalog, skeletons)

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(report["guide"], encoding="utf-8")
        logger.info("Wrote migration guide to %s", out_path)

    if args.json_output:
        report["ast_file"] = str(args.ast_file)
        print(json.dumps(report, indent=2))
    elif args.skeletons:
        print(skeletons.render() or "// No JSX patterns detected")
    elif not args.output:
        print(report["guide"])
    else:
        print(f"Detected {report['catalog']['total']} JSX patterns; guide written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
