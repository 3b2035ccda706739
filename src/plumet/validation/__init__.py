from plumet.validation.validator import (
    UnitValidationError,
    partition,
    validate,
    validate_or_raise,
)

__all__ = ["UnitValidationError", "partition", "validate", "validate_or_raise"]
