"""Domain value objects."""

from warrant.domain.value_objects.action import Action
from warrant.domain.value_objects.effect import Effect
from warrant.domain.value_objects.subject_type import ALL_SUBJECTS

__all__ = [
    "ALL_SUBJECTS",
    "Action",
    "Effect",
]
