"""
Check a generated test file against the configuration that produced it.

Line widths are checked on the raw text first, since a ragged file cannot be
loaded reliably. The file is then read back with pandas (every cell as a
string) and compared with the expected layout from column_specs(). Problems
are returned as readable messages so callers can print or assert on them.
"""

import os
from typing import Callable, List

import numpy as np
import pandas as pd

from fixturegen.config import GeneratorConfig, column_specs


MAX_REPORTED_ROWS = 5  # Per-column cap on listed bad rows


def load_test_file(path: str) -> pd.DataFrame:
    """Load a generated file as an all-string DataFrame with a positional index."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Test file not found: {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False, index_col=False)
    return df.reset_index(drop=True)


def _check_widths(path: str, config: GeneratorConfig) -> List[str]:
    """
    Check the header and the field count of every data line.

    Returns:
        List of problems, empty if every line has config.cols fields
    """
    with open(path, encoding="utf-8") as f:
        lines = f.read().splitlines()

    if not lines:
        return ["File is empty: expected a header line"]

    problems = []
    expected_headers = [spec.header for spec in column_specs(config)]
    headers = lines[0].split(",")
    if headers != expected_headers:
        problems.append(f"Header mismatch: expected {expected_headers}, found {headers}")
        return problems

    reported = 0
    for row_number, line in enumerate(lines[1:], start=1):
        width = len(line.split(","))
        if width != config.cols:
            if reported < MAX_REPORTED_ROWS:
                problems.append(f"Row {row_number}: expected {config.cols} fields, found {width}")
            reported += 1
    if reported > MAX_REPORTED_ROWS:
        problems.append(f"{reported - MAX_REPORTED_ROWS} more rows with the wrong field count")

    return problems


def _report(problems: List[str], mask: np.ndarray, values: pd.Series, describe: Callable[[int, str], str]):
    # Row numbers are 1-based data row positions
    for pos in np.flatnonzero(mask)[:MAX_REPORTED_ROWS]:
        problems.append(describe(int(pos) + 1, values.iloc[pos]))


def validate_test_file(path: str, config: GeneratorConfig) -> List[str]:
    """
    Validate a generated file.

    Args:
        path: Path to the generated file (either extension)
        config: Configuration used to generate it

    Returns:
        List of problems found, empty if the file is valid
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Test file not found: {path}")

    problems = _check_widths(path, config)
    if problems:
        return problems

    df = load_test_file(path)

    if len(df) != config.rows:
        problems.append(f"Expected {config.rows} data rows, found {len(df)}")

    for spec in column_specs(config):
        values = df[spec.header]
        mask = ~values.str.fullmatch(spec.value_pattern.pattern).to_numpy(dtype=bool, na_value=False)
        describe = (lambda row, value, spec=spec:
                    f"Row {row}, {spec.header}: '{value}' doesn't match pattern {spec.value_pattern.pattern}")
        _report(problems, mask, values, describe)

    labels = df["Column_1"]
    expected_labels = np.array([f"Row_{i + 1}" for i in range(len(df))], dtype=object)
    mask = labels.to_numpy(dtype=object) != expected_labels
    _report(problems, mask, labels, lambda row, value: f"Row {row}: label '{value}' should be 'Row_{row}'")

    if config.cols >= 2:
        raw = df["Column_2"]
        ints = pd.to_numeric(raw, errors="coerce").to_numpy(dtype=float, na_value=np.nan)
        mask = (ints < 0) | (ints >= config.int_upper_bound)
        _report(problems, mask, raw,
                lambda row, value: f"Row {row}: integer {value} outside [0, {config.int_upper_bound})")

    return problems
