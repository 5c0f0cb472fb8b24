"""
JSON Schema Contract Validation

Контракт big_integer: каноническое текстовое представление BigInteger,
обёрнутое в {"schema_version": ..., "value": ...}.

Схема поставляется внутри пакета (schema/big_integer.json) и загружается
лениво при первой валидации, поэтому импорт модели не зависит от файлов.
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)

# Версия контракта big_integer, которую пишет to_contract()
CONTRACT_SCHEMA_VERSION: Final[str] = "1"

BIG_INTEGER_SCHEMA: Final[str] = "big_integer.json"


@lru_cache(maxsize=None)
def _big_integer_validator() -> Draft202012Validator:
    """Загрузка и meta-валидация схемы (один раз на процесс)."""
    schema_path = resources.files(__package__) / "schema" / BIG_INTEGER_SCHEMA
    schema_text = schema_path.read_text(encoding="utf-8")
    schema = json.loads(schema_text)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация big_integer данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    try:
        _big_integer_validator().validate(data)
    except jsonschema.ValidationError as e:
        logger.debug("Contract big_integer rejected payload: %s", e.message)
        raise
