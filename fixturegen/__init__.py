"""Generate large CSV test fixtures saved under a spreadsheet extension."""

from fixturegen.config import GeneratorConfig, ColumnSpec, column_specs
from fixturegen.generator import FixtureGenerator, GenerationResult, generate_test_file
from fixturegen.validate import validate_test_file

__all__ = [
    "GeneratorConfig",
    "ColumnSpec",
    "column_specs",
    "FixtureGenerator",
    "GenerationResult",
    "generate_test_file",
    "validate_test_file",
]
