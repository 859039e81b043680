"""
Validate generated files by reading them back, and check that the .xlsx output
is really CSV text that spreadsheet libraries refuse to open as a workbook.
"""

import zipfile

import pandas as pd
import pytest
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from fixturegen.config import GeneratorConfig
from fixturegen.generator import generate_test_file
from fixturegen.validate import load_test_file, validate_test_file


@pytest.fixture
def generated(tmp_path):
    config = GeneratorConfig(rows=300, cols=8, seed=1, progress_interval=100, output_dir=str(tmp_path))
    result = generate_test_file(config, verbose=False)
    return config, result


def test_generated_file_is_valid(generated):
    config, result = generated
    assert validate_test_file(result.xlsx_path, config) == []


def test_loaded_frame_shape(generated):
    config, result = generated
    df = load_test_file(result.xlsx_path)

    assert isinstance(df, pd.DataFrame)
    assert df.shape == (config.rows, config.cols)
    assert df["Column_1"].iloc[-1] == "Row_300"


def test_wrong_row_count_reported(generated):
    config, result = generated
    expected = GeneratorConfig(rows=301, cols=8, output_dir=config.output_dir)

    problems = validate_test_file(result.xlsx_path, expected)
    assert problems == ["Expected 301 data rows, found 300"]


def test_wrong_header_reported(generated):
    config, result = generated
    expected = GeneratorConfig(rows=300, cols=9, output_dir=config.output_dir)

    problems = validate_test_file(result.xlsx_path, expected)
    assert len(problems) == 1
    assert problems[0].startswith("Header mismatch")


def test_bad_values_reported(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_text(
        "Column_1,Column_2,Column_3\n"
        "Row_1,100000,1.00\n"
        "Row_5,12,3.5\n"
    )
    config = GeneratorConfig(rows=2, cols=3, output_dir=str(tmp_path))

    problems = validate_test_file(str(path), config)

    assert any("Column_3: '3.5'" in p for p in problems)
    assert any("label 'Row_5' should be 'Row_2'" in p for p in problems)
    assert any("integer 100000 outside [0, 100000)" in p for p in problems)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_test_file(str(tmp_path / "nope.xlsx"), GeneratorConfig())


def test_xlsx_output_is_not_a_workbook(generated):
    _, result = generated
    assert not zipfile.is_zipfile(result.xlsx_path)
    with pytest.raises((zipfile.BadZipFile, InvalidFileException)):
        load_workbook(result.xlsx_path)


def write_file(tmp_path, text, name="fixture.xlsx"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_extra_field_in_one_row_reported(tmp_path):
    path = write_file(tmp_path, "Column_1,Column_2,Column_3\nRow_1,1,1.00\nRow_2,2,2.00,extra\n")

    problems = validate_test_file(path, GeneratorConfig(rows=2, cols=3))
    assert problems == ["Row 2: expected 3 fields, found 4"]


def test_extra_field_in_every_row_reported(tmp_path):
    path = write_file(tmp_path, "Column_1,Column_2,Column_3\nRow_1,1,1.00,x\nRow_2,2,2.00,y\n")

    problems = validate_test_file(path, GeneratorConfig(rows=2, cols=3))
    assert problems == [
        "Row 1: expected 3 fields, found 4",
        "Row 2: expected 3 fields, found 4",
    ]


def test_short_row_reported(tmp_path):
    path = write_file(tmp_path, "Column_1,Column_2,Column_3\nRow_1,1,1.00\nRow_2,2\n")

    problems = validate_test_file(path, GeneratorConfig(rows=2, cols=3))
    assert problems == ["Row 2: expected 3 fields, found 2"]


def test_many_ragged_rows_are_capped(tmp_path):
    body = "".join(f"Row_{i + 1},{i},1.00,x\n" for i in range(7))
    path = write_file(tmp_path, "Column_1,Column_2,Column_3\n" + body)

    problems = validate_test_file(path, GeneratorConfig(rows=7, cols=3))
    assert len(problems) == 6
    assert problems[-1] == "2 more rows with the wrong field count"


def test_empty_file_reported(tmp_path):
    path = write_file(tmp_path, "")

    problems = validate_test_file(path, GeneratorConfig(rows=2, cols=3))
    assert problems == ["File is empty: expected a header line"]


def test_huge_integer_reported_as_written(tmp_path):
    path = write_file(tmp_path, "Column_1,Column_2,Column_3\nRow_1,100000000000000000000,1.00\n")

    problems = validate_test_file(path, GeneratorConfig(rows=1, cols=3))
    assert problems == ["Row 1: integer 100000000000000000000 outside [0, 100000)"]
