import os
import random
from dataclasses import dataclass
from typing import Optional, List

from fixturegen.config import GeneratorConfig, FILLER_TEMPLATE


@dataclass
class GenerationResult:
    """Outcome of a generator run."""
    csv_path: str
    xlsx_path: str
    size_bytes: int
    rows: int
    cols: int

    @property
    def size_mb(self) -> float:
        return self.size_bytes / (1024 * 1024)


class FixtureGenerator:
    """Generates a large CSV test file and renames it with an .xlsx extension."""

    def __init__(self, config: Optional[GeneratorConfig] = None, verbose: bool = True):
        """
        Initialize the generator.

        Args:
            config: Generation settings (defaults to GeneratorConfig())
            verbose: Print progress and summary lines
        """
        self.config = config if config is not None else GeneratorConfig()
        self.verbose = verbose
        self._random = random.Random(self.config.seed)

    def build_header(self) -> List[str]:
        """
        Build the header cells.

        Returns:
            Column_1 .. Column_N for N configured columns
        """
        return [f"Column_{c + 1}" for c in range(self.config.cols)]

    def build_row(self, r: int) -> List[str]:
        """
        Build the cells for 0-based data row r.

        Cell 0 is the row label, cell 1 a random integer, cell 2 a random
        two-decimal value and every later cell a filler string.
        """
        row = []
        for c in range(self.config.cols):
            if c == 0:
                row.append(f"Row_{r + 1}")
            elif c == 1:
                row.append(str(self._random.randrange(self.config.int_upper_bound)))
            elif c == 2:
                row.append(f"{self._random.random() * self.config.decimal_upper_bound:.2f}")
            else:
                row.append(FILLER_TEMPLATE.format(row=r, col=c))
        return row

    def generate(self) -> str:
        """
        Build the full file contents.

        Returns:
            Header line followed by one line per row, each newline-terminated
        """
        lines = [",".join(self.build_header()) + "\n"]

        for r in range(self.config.rows):
            lines.append(",".join(self.build_row(r)) + "\n")

            if self.verbose and r % self.config.progress_interval == 0:
                print(f"Generated {r} rows...")

        return "".join(lines)

    def write(self, content: str) -> str:
        """Write content to the CSV path and return that path."""
        path = os.path.join(self.config.output_dir, self.config.csv_filename)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    def rename(self, path: str) -> str:
        """Rename path to the .xlsx file name, replacing an existing file."""
        xlsx_path = os.path.join(self.config.output_dir, self.config.xlsx_filename)
        os.replace(path, xlsx_path)
        return xlsx_path

    def run(self) -> GenerationResult:
        """
        Generate the data, write it, measure it and rename it.

        Filesystem errors are not caught.

        Returns:
            GenerationResult describing both paths and the file size
        """
        content = self.generate()
        csv_path = self.write(content)

        size_bytes = os.path.getsize(csv_path)
        if self.verbose:
            print(f"\nFile created: {csv_path}")
            print(f"File size: {size_bytes / (1024 * 1024):.2f} MB")

        xlsx_path = self.rename(csv_path)
        if self.verbose:
            print(f"Renamed to: {xlsx_path}")
            print("\nNote: This is technically a CSV file with .xlsx extension.")
            print("Excel will open it fine for testing purposes.")

        return GenerationResult(
            csv_path=csv_path,
            xlsx_path=xlsx_path,
            size_bytes=size_bytes,
            rows=self.config.rows,
            cols=self.config.cols,
        )


def generate_test_file(config: Optional[GeneratorConfig] = None, verbose: bool = True) -> GenerationResult:
    """
    Run a FixtureGenerator once.

    Args:
        config: Generation settings (defaults to GeneratorConfig())
        verbose: Print progress and summary lines

    Returns:
        GenerationResult for the renamed file
    """
    return FixtureGenerator(config, verbose=verbose).run()
