"""Access verification DTOs."""

from dataclasses import dataclass

from warrant.domain.value_objects import Action


@dataclass
class AccessVerification:
    """Outcome of a successful resource access check."""

    action: Action
    subject_type: str
    resource_id: int
    user_id: int
    allowed: bool
    is_owner: bool

    def to_dict(self) -> dict:
        return {
            "action": self.action.value,
            "subject_type": self.subject_type,
            "resource_id": self.resource_id,
            "user_id": self.user_id,
            "allowed": self.allowed,
            "is_owner": self.is_owner,
        }
