"""A numbered to-do list with a console menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

__all__ = ["MAX_TASKS", "MAX_LENGTH", "TodoFullError", "TodoList", "main"]

MAX_TASKS = 100
MAX_LENGTH = 100


class TodoFullError(Exception):
    """Raised when a task is added to a full list."""


class TodoList:
    """Tasks numbered from 1 in the order they were added."""

    def __init__(self, capacity: int = MAX_TASKS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._tasks: list[str] = []

    def add(self, task: str) -> str:
        """Add the first line of task, cut to fit; return what was stored."""
        if len(self._tasks) >= self.capacity:
            raise TodoFullError("Task list is full!")
        text = task.split("\n", 1)[0][: MAX_LENGTH - 1]
        self._tasks.append(text)
        return text

    def remove(self, number: int) -> str:
        """Remove and return the task with this 1-based number."""
        if not self._tasks:
            raise IndexError("No tasks to remove.")
        if not 1 <= number <= len(self._tasks):
            raise IndexError("Invalid task number.")
        return self._tasks.pop(number - 1)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)


def _read_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive to-do list."""
    parser = argparse.ArgumentParser(prog="algodeck-todo")
    parser.parse_args(argv)
    todo = TodoList()
    print("Welcome to Your To-Do List App")
    try:
        while True:
            print("\n===== MENU =====")
            print("1. Add Task")
            print("2. View All Tasks")
            print("3. Remove Task")
            print("4. Exit")
            choice = _read_int("Enter your choice: ")
            if choice == 1:
                if len(todo) >= todo.capacity:
                    print("Task list is full!")
                    continue
                todo.add(input("Enter task: "))
                print("Task added successfully!")
            elif choice == 2:
                print("\nYour To-Do List:")
                if not len(todo):
                    print("No tasks found.")
                for number, task in enumerate(todo, start=1):
                    print(f"{number}. {task}")
            elif choice == 3:
                if not len(todo):
                    print("No tasks to remove.")
                    continue
                number = _read_int("Enter task number to remove: ")
                try:
                    todo.remove(number if number is not None else 0)
                except IndexError as error:
                    print(error)
                else:
                    print("Task removed successfully!")
            elif choice == 4:
                print("Exiting... Have a productive day!")
                break
            else:
                print("Invalid choice. Try again.")
    except EOFError:
        print()
    return 0