"""Write values into a tomlkit document along explicit key segments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional, Sequence

import tomlkit
from tomlkit import TOMLDocument
from tomlkit.container import OutOfOrderTableProxy
from tomlkit.items import Item, Null, Table, Whitespace

PROFILES_KEY = "profiles"


@dataclass(frozen=True)
class Override:
    segments: tuple[str, ...]
    value: Any


def scope_to_profile(segments: Sequence[str], profile: Optional[str]) -> tuple[str, ...]:
    """Prefix ``("profiles", profile)`` unless there is no profile or the path already starts there."""
    path = tuple(segments)
    if profile is None or (path and path[0] == PROFILES_KEY):
        return path
    return (PROFILES_KEY, profile) + path


def _is_table(item: Any) -> bool:
    # Inline tables and arrays of tables are replaced, only [table] nodes are descended into.
    return isinstance(item, (Table, OutOfOrderTableProxy))


def _implicit_table() -> Table:
    return tomlkit.table(is_super_table=True)


def _locate(body: list, target: Item) -> Optional[tuple[list, int]]:
    for index, (_, item) in enumerate(body):
        if item is target:
            return body, index
        if isinstance(item, Table):
            found = _locate(item.value.body, target)
            if found is not None:
                return found
    return None


def _trailing_blank(item: Item) -> Optional[list]:
    """Return the body whose last entry is the blank line rendered at the end of ``item``."""
    while isinstance(item, Table) and item.value.body:
        body = item.value.body
        last = body[-1][1]
        if isinstance(last, Whitespace):
            return body
        item = last
    return None


def _space_new_table(doc: TOMLDocument, table: Table) -> None:
    """Give a freshly inserted table the same blank-line layout a hand-written one would have.

    No blank line when it is the first entry of the file or its parent; one
    blank line before its header otherwise. When it lands right after a
    table that ended in a blank line, that blank line moves to the new table
    so the next header stays separated.
    """
    found = _locate(doc.body, table)
    if found is None:
        return
    body, index = found
    previous = [item for _, item in body[:index] if not isinstance(item, Null)]
    if not previous:
        table.trivia.indent = ""
        return
    last = previous[-1]
    if isinstance(last, Whitespace):
        table.trivia.indent = ""
        return
    table.trivia.indent = "\n"
    trailing = _trailing_blank(last)
    if trailing is not None:
        trailing[-1] = (None, Null())
        table.add(tomlkit.nl())


def apply_override(doc: TOMLDocument, segments: Sequence[str], value: Any) -> None:
    """Set ``value`` at ``segments``, creating or promoting intermediate tables.

    Each segment is a literal key, so names containing dots or spaces are
    addressed as a single key. An intermediate segment holding anything
    other than a table is replaced by a new implicit table and its old
    value is dropped. The leaf is always overwritten.
    """
    if not segments:
        return

    current: MutableMapping[str, Any] = doc
    for segment in segments[:-1]:
        if segment not in current or not _is_table(current[segment]):
            current[segment] = _implicit_table()
            _space_new_table(doc, current[segment])
        current = current[segment]

    current[segments[-1]] = value
