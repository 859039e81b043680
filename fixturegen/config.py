import re
from dataclasses import dataclass
from typing import Optional, Pattern, List


FILLER_TEMPLATE = "Sample_Data_{row}_{col}_Lorem_Ipsum_Dolor_Sit_Amet_Consectetur_Adipiscing_Elit"


@dataclass
class GeneratorConfig:
    """Configuration for a generated test file.

    Defaults produce roughly a 10MB file:
    - rows/cols: size of the data block (header row is extra)
    - int_upper_bound: column 2 holds integers in [0, int_upper_bound)
    - decimal_upper_bound: column 3 holds two-decimal values in [0, decimal_upper_bound)
    - progress_interval: print progress every N rows (row 0 included)

    Note: the file is written as CSV and then renamed to xlsx_filename.
    """
    rows: int = 12000
    cols: int = 20
    int_upper_bound: int = 100000
    decimal_upper_bound: int = 10000
    progress_interval: int = 5000

    csv_filename: str = "test-data-large.csv"
    xlsx_filename: str = "test-data-large-10MB.xlsx"
    output_dir: str = "."

    seed: Optional[int] = None  # None = different data on every run

    def __post_init__(self):
        if self.rows < 0:
            raise ValueError(f"rows must be >= 0, got {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols}")
        if self.progress_interval < 1:
            raise ValueError(f"progress_interval must be >= 1, got {self.progress_interval}")
        if self.int_upper_bound < 1 or self.decimal_upper_bound <= 0:
            raise ValueError(
                f"Upper bounds must be positive (int_upper_bound={self.int_upper_bound}, "
                f"decimal_upper_bound={self.decimal_upper_bound})"
            )
        if self.csv_filename == self.xlsx_filename:
            raise ValueError(f"csv_filename and xlsx_filename must differ, both are '{self.csv_filename}'")


@dataclass
class ColumnSpec:
    """Describes one generated column.

    position is 1-based, matching the Column_N header. The value_pattern
    must fully match every value generated for the column.
    """
    position: int
    header: str
    value_pattern: Pattern[str]


def column_specs(config: GeneratorConfig) -> List[ColumnSpec]:
    """Return the column layout for a configuration."""
    specs = []
    for col in range(config.cols):
        if col == 0:
            pattern = re.compile(r"Row_\d+")
        elif col == 1:
            pattern = re.compile(r"\d+")
        elif col == 2:
            pattern = re.compile(r"\d+\.\d{2}")
        else:
            pattern = re.compile(re.escape(FILLER_TEMPLATE.format(row="ROW", col=col)).replace("ROW", r"\d+"))
        specs.append(ColumnSpec(position=col + 1, header=f"Column_{col + 1}", value_pattern=pattern))
    return specs
