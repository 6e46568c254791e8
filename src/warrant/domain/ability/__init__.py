"""Ability engine - rule compilation and evaluation."""

from warrant.domain.ability.ability import Ability
from warrant.domain.ability.builder import (
    AbilityBuilder,
    AbilityFactory,
    compile_ability,
)
from warrant.domain.ability.conditions import matches_condition
from warrant.domain.ability.rule import Rule
from warrant.domain.ability.subject import Subject, resolve_subject_type
from warrant.domain.ability.template import DEFAULT_TEMPLATE_FIELDS, render

__all__ = [
    "DEFAULT_TEMPLATE_FIELDS",
    "Ability",
    "AbilityBuilder",
    "AbilityFactory",
    "Rule",
    "Subject",
    "compile_ability",
    "matches_condition",
    "render",
    "resolve_subject_type",
]
