"""Condition matching against resource attributes.

Supported forms::

    {"authorId": 7}                      equality
    {"authorId": {"$eq": 7}}             equality
    {"authorId": {"$ne": 7}}             negated equality
    {"authorId": 7, "isPublished": true} every field must match

Any other ``$`` operator is rejected by ``validate_condition``.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from warrant.domain.entities import Resource
from warrant.domain.exceptions import UnsupportedConditionOperator, ValidationError

SUPPORTED_OPERATORS = frozenset({"$eq", "$ne"})


def is_operator_map(value: Any) -> bool:
    """True for mappings like {"$ne": 7}; plain embedded documents are compared by equality."""
    return (
        isinstance(value, Mapping)
        and bool(value)
        and all(isinstance(key, str) and key.startswith("$") for key in value)
    )


def validate_condition(condition: Mapping[str, Any]) -> None:
    """Raise UnsupportedConditionOperator for operators the matcher cannot evaluate."""
    for field_name, expected in condition.items():
        if isinstance(field_name, str) and field_name.startswith("$"):
            raise UnsupportedConditionOperator(field_name)
        if is_operator_map(expected):
            for operator in expected:
                if operator not in SUPPORTED_OPERATORS:
                    raise UnsupportedConditionOperator(operator)
        elif isinstance(expected, Mapping) and any(
            isinstance(key, str) and key.startswith("$") for key in expected
        ):
            raise ValidationError(
                f"Condition on {field_name!r} mixes operators and plain fields"
            )


def matches_condition(condition: Mapping[str, Any], resource: Resource) -> bool:
    """All fields of ``condition`` must hold for ``resource``."""
    return all(
        _field_matches(resource.get(field_name), expected)
        for field_name, expected in condition.items()
    )


def _field_matches(actual: Any, expected: Any) -> bool:
    if not is_operator_map(expected):
        return _equals(actual, expected)
    for operator, operand in expected.items():
        if operator == "$eq" and not _equals(actual, operand):
            return False
        if operator == "$ne" and _equals(actual, operand):
            return False
    return True


def _equals(actual: Any, expected: Any) -> bool:
    # bool is an int subclass; True must not equal 1
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return thaw_condition(actual) == thaw_condition(expected)


def freeze_condition(value: Any) -> Any:
    """Read-only deep copy: mappings become MappingProxyType, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_condition(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_condition(item) for item in value)
    return value


def thaw_condition(value: Any) -> Any:
    """Plain dict/list copy of a frozen condition, e.g. for JSON output."""
    if isinstance(value, Mapping):
        return {key: thaw_condition(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw_condition(item) for item in value]
    return value


def condition_key(value: Any) -> Any:
    """Hashable form of a condition."""
    if isinstance(value, Mapping):
        return tuple(sorted((key, condition_key(item)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(condition_key(item) for item in value)
    return value
