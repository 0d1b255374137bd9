"""
JSON Schema Contract Validators

Валидация JSON-представления рациональных чисел согласно формальному
контракту schema/rational.json (JSON Schema draft 2020-12). Схема лежит внутри
пакета и устанавливается вместе с ним как package data.

Формат:
    {"schema_version": "1", "numerator": -15432, "denominator": 125}

Целые значения сериализуются со знаменателем 1. При десериализации значение
проходит через make(), поэтому неканоническая дробь (2/4) читается как 1/2.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.ratio.core.constructor import make
from src.ratio.core.rational import Number, Rational, is_integer

# Версия контракта rational.json
RATIONAL_SCHEMA_VERSION = "1"

# Каталог схем, поставляемый внутри пакета
SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'rational')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий экземпляр загрузчика (создаётся при первом обращении)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# RATIONAL VALIDATOR
# =============================================================================


class RationalValidator:
    """
    Валидатор JSON-представления по схеме rational.json.

    Схема загружается через общий SchemaLoader и проходит meta-валидацию
    один раз при создании экземпляра.
    """

    schema_name = "rational"

    def __init__(self, loader: Optional[SchemaLoader] = None):
        loader = loader or get_schema_loader()
        self.schema = loader.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


_RATIONAL_VALIDATOR: Optional[RationalValidator] = None


def get_rational_validator() -> RationalValidator:
    """Общий экземпляр валидатора (создаётся при первом обращении)."""
    global _RATIONAL_VALIDATOR
    if _RATIONAL_VALIDATOR is None:
        _RATIONAL_VALIDATOR = RationalValidator()
    return _RATIONAL_VALIDATOR


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_rational(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления рационального числа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_rational_validator().validate(data)


def to_contract(value: Number) -> Dict[str, Any]:
    """
    Сериализация int | Rational в dict по контракту rational.json.

    Raises:
        TypeError: Если value не int и не Rational (float не сериализуется,
            сначала переведите его в дробь)

    Examples:
        >>> to_contract(make(-1, 3))
        {'schema_version': '1', 'numerator': -1, 'denominator': 3}
        >>> to_contract(7)
        {'schema_version': '1', 'numerator': 7, 'denominator': 1}
    """
    if isinstance(value, Rational):
        numerator, denominator = value.numerator, value.denominator
    elif is_integer(value):
        numerator, denominator = value, 1
    else:
        raise TypeError(f"cannot serialize {type(value).__name__} as rational")

    return {
        "schema_version": RATIONAL_SCHEMA_VERSION,
        "numerator": numerator,
        "denominator": denominator,
    }


def from_contract(data: Dict[str, Any]) -> Number:
    """
    Десериализация dict по контракту rational.json в каноническое значение.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_rational(data)
    return make(data["numerator"], data["denominator"])
