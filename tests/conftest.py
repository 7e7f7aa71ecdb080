from __future__ import annotations

import pytest

from catalog_qc.masters import build_index
from catalog_qc.models import ContentTable, MasterIndex, MasterTables


@pytest.fixture
def master_tables() -> MasterTables:
    return MasterTables(
        brands=[{"Brand": "Nike"}],
        colors=[{"Color": "Red"}, {"Color": "Blue"}],
        sizes=[{"Size": "M"}],
        categories=[
            {"Category": "Shoes", "Template Name": "Footwear"},
            {"Category": "Tops", "Template Name": "Apparel"},
        ],
        template_rules=[
            {"Template Name": "Footwear", "Field Name": "Brand", "Field Type": "Dropdown", "Mandatory": "Yes"},
            {"Template Name": "Footwear", "Field Name": "Color Name", "Field Type": "Multi Select", "Mandatory": "No"},
            {"Template Name": "Apparel", "Field Name": "Brand", "Field Type": "Dropdown", "Mandatory": "Yes"},
            {"Template Name": "Apparel", "Field Name": "Size Name", "Field Type": "Select", "Mandatory": "Yes"},
            {
                "Template Name": "Apparel",
                "Field Name": "Fit",
                "Field Type": "Select",
                "Mandatory": "No",
                "Allowed Values": "Slim | Regular|",
            },
        ],
    )


@pytest.fixture
def index(master_tables: MasterTables) -> MasterIndex:
    return build_index(
        master_tables.brands,
        master_tables.colors,
        master_tables.sizes,
        master_tables.categories,
        master_tables.template_rules,
    )


@pytest.fixture
def footwear_batch() -> ContentTable:
    return ContentTable(
        rows=[
            {"1st Category": "Shoes>Running", "Template Name": "Footwear", "Brand": "Nike", "Color Name": "Green"},
            {"1st Category": "", "Template Name": "Footwear", "Brand": "Nike", "Color Name": None},
            {"1st Category": "Shoes", "Template Name": "Footwear", "Brand": " nike ", "Color Name": "red|BLUE"},
        ],
        headers=["1st Category", "Template Name", "Brand", "Color Name"],
    )
