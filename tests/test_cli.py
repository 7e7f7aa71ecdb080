from __future__ import annotations

from pathlib import Path

import pandas as pd

from catalog_qc.cli import main


def _csv(path: Path, df: pd.DataFrame) -> str:
    df.to_csv(path, index=False)
    return str(path)


def _args(tmp_path: Path) -> list:
    return [
        "--brands",
        _csv(tmp_path / "brands.csv", pd.DataFrame({"Brand": ["Nike"]})),
        "--colors",
        _csv(tmp_path / "colors.csv", pd.DataFrame({"Color": ["Red"]})),
        "--sizes",
        _csv(tmp_path / "sizes.csv", pd.DataFrame({"Size": ["M"]})),
        "--categories",
        _csv(tmp_path / "categories.csv", pd.DataFrame({"Category": ["Shoes"], "Template": ["Footwear"]})),
        "--template-rules",
        _csv(
            tmp_path / "rules.csv",
            pd.DataFrame({"Template": ["Footwear"], "Attribute": ["Brand"], "Required": ["yes"]}),
        ),
        "--content",
        _csv(
            tmp_path / "content.csv",
            pd.DataFrame(
                {"1st Category": ["Shoes", "Hats"], "Template Name": ["Footwear", "Footwear"], "Brand": ["Nike", "Acme"]}
            ),
        ),
        "--out-dir",
        str(tmp_path / "reports"),
    ]


def test_cli_writes_report(tmp_path: Path, capsys) -> None:
    assert main(_args(tmp_path)) == 0

    out = capsys.readouterr().out
    assert "Rows loaded from content sheet: 2" in out
    assert "Rows passed: 1" in out
    assert "Rows with CATEGORY errors: 1" in out
    assert "Report XLSX written:" in out

    written = list((tmp_path / "reports").glob("QC_Report_*.xlsx"))
    assert len(written) == 1


def test_cli_missing_input_exits_with_audit_failure(tmp_path: Path, capsys) -> None:
    args = _args(tmp_path)
    args[args.index("--sizes") + 1] = str(tmp_path / "missing.csv")

    assert main(args) == 2
    assert "Audit failed" in capsys.readouterr().err
    assert not (tmp_path / "reports").exists()
