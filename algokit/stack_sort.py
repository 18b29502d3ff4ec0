"""Sorting a stack using only stack operations.

A stack is a list whose last element is the top.
"""

from __future__ import annotations

from typing import Any, List

__all__ = ["sorted_insert", "sort_stack"]


def sorted_insert(stack: List[Any], value: Any) -> None:
    """Push ``value`` into an ascending stack so that it stays ascending toward the top.

    ``value`` goes beneath any elements equal to it.
    """
    held: List[Any] = []
    while stack and not value > stack[-1]:
        held.append(stack.pop())
    stack.append(value)
    while held:
        stack.append(held.pop())


def sort_stack(stack: List[Any]) -> None:
    """Sort the stack in place so that the largest element is on top."""
    items = list(stack)
    stack.clear()
    for value in items:
        sorted_insert(stack, value)