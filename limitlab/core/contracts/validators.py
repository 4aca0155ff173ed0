"""
JSON Schema контракты результатов limitlab

Проверяет dict, полученный через to_contract(), против схем из schema/:
approximation_step, limit_result, continuity_result, epsilon_delta_outcome.

NaN и ±inf остаются float: тип "number" в JSON Schema их принимает, так что
бесконечные пределы и неопределённые fx проходят валидацию без потерь.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик схем с кэшем по имени (схемы неизменяемы)."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без .json.

        Raises:
            FileNotFoundError: Нет файла схемы
            ValueError: Схема не проходит meta-validation Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор одного контракта; подклассы задают schema_name."""

    schema_name: str = ""

    def __init__(self, schema_name: str | None = None):
        if schema_name is not None:
            self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises ValidationError при первом нарушении."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ApproximationStepValidator(ContractValidator):
    schema_name = "approximation_step"


class LimitResultValidator(ContractValidator):
    schema_name = "limit_result"


class ContinuityResultValidator(ContractValidator):
    schema_name = "continuity_result"


class EpsilonDeltaOutcomeValidator(ContractValidator):
    schema_name = "epsilon_delta_outcome"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_approximation_step(data: Dict[str, Any]) -> None:
    ApproximationStepValidator().validate(data)


def validate_limit_result(data: Dict[str, Any]) -> None:
    LimitResultValidator().validate(data)


def validate_continuity_result(data: Dict[str, Any]) -> None:
    ContinuityResultValidator().validate(data)


def validate_epsilon_delta_outcome(data: Dict[str, Any]) -> None:
    EpsilonDeltaOutcomeValidator().validate(data)
