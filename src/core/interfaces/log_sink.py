"""Contrato del colaborador de logging `(tag, message)`."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Fire-and-forget sink; the core never reads anything back."""

    def println(self, tag: str, message: str) -> None:
        ...
