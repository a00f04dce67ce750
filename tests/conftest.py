"""Root test configuration: shared sample report"""

import pytest


PASTED_REPORT = """\
Quarterly Report
1.0 Overview
Some text.
1.1 Details
Caption here | Col1 | Col2 | | :--- | :--- | | v1 | v2"""

REPAIRED_REPORT = """\
# Quarterly Report
## 1.0 Overview
Some text.
### 1.1 Details
Caption here

| Col1 | Col2 |
| :--- | :--- |
| v1 | v2"""


@pytest.fixture(name="pasted_report")
def pasted_report_fixture():
    return PASTED_REPORT


@pytest.fixture(name="repaired_report")
def repaired_report_fixture():
    return REPAIRED_REPORT


@pytest.fixture(name="report_file")
def report_file_fixture(tmp_path):
    """The sample report written to disk as pasted from the clipboard."""
    f = tmp_path / "pasted.md"
    f.write_text(PASTED_REPORT, encoding="utf-8")
    return f
