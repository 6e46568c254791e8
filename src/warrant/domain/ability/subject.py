"""Subject type resolution."""

from warrant.domain.entities import Resource
from warrant.domain.exceptions import ValidationError
from warrant.domain.value_objects import ALL_SUBJECTS

Subject = str | Resource


def resolve_subject_type(subject: Subject) -> str:
    """Subject type tag of a bare type name or a tagged resource."""
    if isinstance(subject, str):
        return subject
    if isinstance(subject, Resource):
        return subject.subject_type
    raise ValidationError(
        f"Subject must be a subject type name or Resource, got {type(subject).__name__}"
    )


def subject_type_matches(rule_subject_type: str, query_subject_type: str) -> bool:
    """A rule for "all" matches any query; a query for "all" matches only "all" rules."""
    return rule_subject_type == ALL_SUBJECTS or rule_subject_type == query_subject_type
