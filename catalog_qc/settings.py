from __future__ import annotations

from typing import List

# =========================
# FILE PATHS
# =========================

BRANDS_MASTER_PATH = "Master_Brands.xlsx"
COLORS_MASTER_PATH = "Master_Colors.xlsx"
SIZES_MASTER_PATH = "Master_Sizes.xlsx"
CATEGORIES_MASTER_PATH = "Master_Categories.xlsx"
TEMPLATE_RULES_MASTER_PATH = "Template_Export.xlsx"
CONTENT_SHEET_PATH = "INPUT_FILE.xlsx"
OUTPUT_DIR = "."

# =========================
# SETTINGS
# =========================

MULTI_VALUE_DELIMITER = "|"
CATEGORY_PATH_DELIMITER = ">"

PASSED = "Passed"
FAILED = "Failed"

SINGLE = "Single"
MULTI = "Multi"
OPEN = "Open"

# Column candidates are tried in order; the first non-blank cell wins.
COL_CATEGORY_MASTER_CATEGORY: List[str] = ["Category", "Category Name"]
COL_TEMPLATE_NAME: List[str] = ["Template Name", "Template"]
COL_RULE_FIELD_NAME: List[str] = ["Field Name", "Attribute"]
COL_RULE_FIELD_TYPE: List[str] = ["Field Type", "Input Type"]
COL_RULE_MANDATORY: List[str] = ["Mandatory", "Required"]
COL_RULE_ALLOWED_VALUES: List[str] = ["Allowed Values", "Values"]
COL_CONTENT_CATEGORY: List[str] = ["1st Category"]

MANDATORY_YES = "yes"

# =========================
# REPORT OUTPUT
# =========================

REPORT_FILE_PREFIX = "QC_Report"
REPORT_SHEET_NAME = "QC Report"
SUMMARY_SHEET_NAME = "Summary"

COL_OUT_HEADER_CHECK = "QC Header Check"
COL_OUT_REMARKS = "QC Remarks"
COL_OUT_FINAL_STATUS = "QC Final Status"

ALL_CHECKS_PASSED = "All checks passed"
MAX_SUMMARY_DIAGNOSTICS = 3
TRUNCATION_MARKER = "..."
