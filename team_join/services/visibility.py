# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Visibility policy, promoting or removing private blocks.
Pure computation over nested dict/list data, mutated in place.
"""

from typing import Any

from team_join.core.config import settings


def deep_merge(lhs: Any, rhs: Any) -> Any:
    """
    Merge ``rhs`` into ``lhs``. Dicts merge recursively, lists concatenate,
    anything else is replaced by ``rhs``. Returns the merged value.
    """
    if isinstance(lhs, dict) and isinstance(rhs, dict):
        for key, value in rhs.items():
            lhs[key] = deep_merge(lhs[key], value) if key in lhs else value
        return lhs
    if isinstance(lhs, list) and isinstance(rhs, list):
        lhs.extend(rhs)
        return lhs
    return rhs


def remove_data(collection: Any, key: str = settings.PRIVATE_KEY) -> None:
    """Delete ``key`` from every dict in ``collection``, at any depth."""
    if isinstance(collection, dict):
        collection.pop(key, None)
        for value in collection.values():
            remove_data(value, key)
    elif isinstance(collection, list):
        kept: list[Any] = []
        for item in collection:
            held_key = isinstance(item, dict) and key in item
            remove_data(item, key)
            # Entries that held nothing but a private block disappear.
            if not (held_key and not item):
                kept.append(item)
        collection[:] = kept


def promote_data(collection: Any, key: str = settings.PRIVATE_KEY) -> None:
    """Merge every ``key`` block into its parent, at any depth."""
    if isinstance(collection, dict):
        if key in collection:
            deep_merge(collection, collection.pop(key))
        for value in collection.values():
            promote_data(value, key)
    elif isinstance(collection, list):
        promoted: list[Any] = []
        for item in collection:
            if isinstance(item, dict) and list(item) == [key]:
                content = item[key]
                promote_data(content, key)
                if isinstance(content, list):
                    promoted.extend(content)
                else:
                    promoted.append(content)
            else:
                promote_data(item, key)
                promoted.append(item)
        collection[:] = promoted


def promote_or_remove_data(
    data: Any,
    public_mode: bool,
    key: str = settings.PRIVATE_KEY,
) -> None:
    """Public mode strips private blocks; private mode promotes them."""
    if public_mode:
        remove_data(data, key)
    else:
        promote_data(data, key)
