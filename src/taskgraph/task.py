from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .actions import Action


@dataclass(frozen=True)
class Task:
    """A task ready for the scheduler: numeric id plus numeric precursors."""

    id: int
    document_id: str
    name: str
    precursors: tuple[int, ...]
    action: Action = field(compare=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "document_id": self.document_id,
            "name": self.name,
            "precursors": list(self.precursors),
        }


@dataclass(frozen=True)
class UnresolvedTask:
    """A task as read from the YAML file, precursors still textual.

    `document_id` is the key of the entry in the file; `id` is the number
    handed out by the allocator.
    """

    id: int
    document_id: str
    name: str
    str_precursors: tuple[str, ...]
    action: Action = field(compare=False)

    def resolve(self, precursor_ids: Iterable[int]) -> Task:
        return Task(
            id=self.id,
            document_id=self.document_id,
            name=self.name,
            precursors=tuple(precursor_ids),
            action=self.action,
        )
