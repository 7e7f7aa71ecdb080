"""CLI entrypoint for the content-batch QC audit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .engine import run_validation
from .models import AuditInputError
from .settings import (
    BRANDS_MASTER_PATH,
    CATEGORIES_MASTER_PATH,
    COLORS_MASTER_PATH,
    CONTENT_SHEET_PATH,
    OUTPUT_DIR,
    SIZES_MASTER_PATH,
    TEMPLATE_RULES_MASTER_PATH,
)
from .workbook import load_inputs, write_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Audit a content batch against brand/color/size/category/template masters")
    parser.add_argument("--brands", default=BRANDS_MASTER_PATH, help="Brand master sheet")
    parser.add_argument("--colors", default=COLORS_MASTER_PATH, help="Color master sheet")
    parser.add_argument("--sizes", default=SIZES_MASTER_PATH, help="Size master sheet")
    parser.add_argument("--categories", default=CATEGORIES_MASTER_PATH, help="Category to template mapping sheet")
    parser.add_argument("--template-rules", default=TEMPLATE_RULES_MASTER_PATH, help="Template field rules export")
    parser.add_argument("--content", default=CONTENT_SHEET_PATH, help="Content batch to audit")
    parser.add_argument("--out-dir", default=OUTPUT_DIR, help="Directory for the QC report workbook")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        masters, content = load_inputs(
            {
                "brands": args.brands,
                "colors": args.colors,
                "sizes": args.sizes,
                "categories": args.categories,
                "template_rules": args.template_rules,
                "content": args.content,
            }
        )
        report = run_validation(masters, content)
    except AuditInputError as exc:
        print(f"Audit failed: {exc}", file=sys.stderr)
        return 2

    print(f"Rows loaded from content sheet: {len(report.rows)}")
    print(f"Template rules rows loaded: {len(masters.template_rules)}")
    print(f"Rows passed: {report.stats.passed}")
    print(f"Rows failed: {report.stats.failed}")
    print(f"Rows with CATEGORY errors: {report.stats.category_errors}")
    print(f"Rows with TEMPLATE errors: {report.stats.template_errors}")
    print(f"Rows with VALUE errors: {report.stats.value_errors}")
    print(f"Rows with HEADER errors: {report.stats.header_errors}")
    for w in report.warnings:
        print(f"Master data warning: {w}")

    out_path = write_report(report, args.out_dir)
    print(f"Report XLSX written: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
