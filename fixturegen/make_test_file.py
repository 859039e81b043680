#!/usr/bin/env python3
"""Create a large test file (CSV content, .xlsx name) in the current directory"""

from fixturegen.config import GeneratorConfig
from fixturegen.generator import FixtureGenerator


def main():
    FixtureGenerator(GeneratorConfig(), verbose=True).run()


if __name__ == "__main__":
    main()
