"""Todo entity."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

DONE = "done"
PENDING = "pending"


@dataclass
class Todo:
    """A task with a status and the moment it was finished, if it was."""

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    title: str = ""
    description: str = ""
    status: str = ""
    date_finished: datetime | None = None

    def done(self) -> None:
        """Mark the task finished now."""
        self.status = DONE
        self.date_finished = datetime.now()

    def undone(self) -> None:
        """Put the task back to pending and clear its finish time."""
        self.status = PENDING
        self.date_finished = None