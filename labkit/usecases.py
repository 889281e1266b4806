"""Use cases for finishing todos, with compensation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol

from labkit.todo import Todo

UNDONE_EVENT = "todo_undone"


class UseCase(ABC):
    """A step that can be executed and, if something goes wrong, compensated."""

    @abstractmethod
    def execute(self, input_data: Any) -> Any:
        """Run the step."""

    @abstractmethod
    def compensate(self, input_data: Any) -> Any:
        """Undo the effect of a previous run."""


class TodoRepository(Protocol):
    """Storage for todos."""

    def find_by_id(self, todo_id: str) -> Todo: ...

    def save(self, todo: Todo) -> None: ...


class CompensateEvent(Protocol):
    """Publisher of compensation events."""

    def publish(self, name: str, payload: Any) -> None: ...


@dataclass(frozen=True)
class InputFinishTodo:
    id: str


@dataclass(frozen=True)
class OutputFinishTodo:
    id: str


@dataclass(frozen=True)
class InputCompensateFinishTodo:
    id: str
    reason: str = ""


@dataclass
class FinishTodoUseCase(UseCase):
    """Marks a todo done; compensation puts it back to pending."""

    todo_repository: TodoRepository
    compensate_event: CompensateEvent

    def execute(self, input_data: Any) -> OutputFinishTodo:
        if not isinstance(input_data, InputFinishTodo):
            raise TypeError(f"expected InputFinishTodo, got {type(input_data).__name__}")
        todo = self.todo_repository.find_by_id(input_data.id)
        todo.done()
        self.todo_repository.save(todo)
        return OutputFinishTodo(id=todo.id)

    def compensate(self, input_data: Any) -> OutputFinishTodo | Exception:
        """Reopen the todo and announce it.

        A failure to publish the event is handed back as the result rather
        than raised, since the todo has already been reopened.
        """
        if not isinstance(input_data, InputCompensateFinishTodo):
            raise TypeError(
                f"expected InputCompensateFinishTodo, got {type(input_data).__name__}"
            )
        todo = self.todo_repository.find_by_id(input_data.id)
        todo.undone()
        self.todo_repository.save(todo)
        try:
            self.compensate_event.publish(UNDONE_EVENT, todo)
        except Exception as exc:
            return exc
        return OutputFinishTodo(id=todo.id)