from scopetheme.validation.validator import validate, validate_or_raise

__all__ = ["validate", "validate_or_raise"]
