from typing import Generator

import pytest

from boundedint.validation.error_handling import (
    ValidationErrorCollector,
    validation_context,
)


@pytest.fixture(scope="function")
def validation_collector() -> Generator[ValidationErrorCollector, None, None]:
    """Fixture that manages the validation context for tests."""
    with validation_context() as collector:
        yield collector
