"""Server registry: the ordered universes offered on the landing page."""

from __future__ import annotations

from typing import Iterator

from core.domain.models import ServerEntry
from core.errors import RegistryIndexError


class ServerList:
    """Append-only list of `(name, link)` pairs in display order.

    Only the parser writes here (through `clear` + `add`); callers read by
    index. Negative indexes are out of bounds, unlike plain lists.
    """

    def __init__(self) -> None:
        self._entries: list[ServerEntry] = []

    def add(self, name: str, link: str) -> None:
        self._entries.append(ServerEntry(name=name, link=link))

    def clear(self) -> None:
        self._entries.clear()

    def count(self) -> int:
        return len(self._entries)

    def _entry(self, index: int) -> ServerEntry:
        if not isinstance(index, int) or isinstance(index, bool):
            raise RegistryIndexError(f"server index must be an int, got {type(index).__name__}")
        if not 0 <= index < len(self._entries):
            raise RegistryIndexError(
                f"server index {index} out of range (0..{len(self._entries) - 1})"
            )
        return self._entries[index]

    def get_link(self, index: int) -> str:
        return self._entry(index).link

    def get_name(self, index: int) -> str:
        return self._entry(index).name

    def entries(self) -> list[ServerEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ServerEntry]:
        return iter(list(self._entries))
