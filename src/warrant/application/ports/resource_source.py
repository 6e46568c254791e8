"""Resource source port - loads tagged resource instances."""

from typing import Protocol

from warrant.domain.entities import Resource


class ResourceSource(Protocol):
    """Port for loading a resource by subject type and id."""

    async def get(self, subject_type: str, resource_id: int) -> Resource | None: ...
