"""Pytest configuration and shared fixtures for the markbook test suite.

This module provides shared fixtures, test configuration, and hypothesis
profiles used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from markbook.api import MarkdownProcessor

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")


@pytest.fixture
def processor() -> MarkdownProcessor:
    """Provide a processor with default options."""
    return MarkdownProcessor()


@pytest.fixture
def sample_text() -> str:
    """Provide sample book content touching every construct.

    Returns
    -------
    str
        Markup used across multiple tests.

    """
    return """# Sample Book

This is a **sample book** with *italic text* and some `inline code`.

## Lists

- Item 1
- Item 2
1. First
2. Second

> A wise quote

```python
print("Hello")
```

See [the docs](https://example.com) and ![a map](map.png) or ~~not~~.
"""
