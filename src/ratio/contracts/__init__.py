"""
Contract Validation Module

Валидация и (де)сериализация JSON-представления рациональных чисел.
"""

from .validators import (
    RATIONAL_SCHEMA_VERSION,
    SCHEMA_DIR,
    RationalValidator,
    SchemaLoader,
    from_contract,
    get_rational_validator,
    get_schema_loader,
    to_contract,
    validate_rational,
)

__all__ = [
    # Constants
    "RATIONAL_SCHEMA_VERSION",
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "RationalValidator",
    # Functions
    "get_schema_loader",
    "get_rational_validator",
    "validate_rational",
    "to_contract",
    "from_contract",
]
