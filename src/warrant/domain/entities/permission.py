"""Permission entity - atomic (action, subject type, condition) triple."""

from dataclasses import dataclass
from typing import Any

from warrant.domain.value_objects import Action


@dataclass(frozen=True)
class Permission:
    """Permission - action on a subject type, optionally narrowed by a condition template.

    The template is kept unresolved; placeholders such as ``{{id}}`` are filled
    in per acting user when an ability is compiled.
    """

    action: Action
    subject_type: str
    condition_template: dict[str, Any] | None = None
    description: str | None = None
