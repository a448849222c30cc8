"""Change tracking between proposal snapshots."""

from typing import Any


def flatten(data: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts and lists into dot-path keys.

    List items are keyed by index: {"a": [{"b": 1}]} -> {"a.0.b": 1}.
    Empty containers are kept as leaf values so their removal still shows up.
    """
    if isinstance(data, dict) and data:
        items = data.items()
    elif isinstance(data, list) and data:
        items = enumerate(data)
    else:
        return {prefix: data} if prefix else {}

    flat = {}
    for key, value in items:
        path = f"{prefix}.{key}" if prefix else str(key)
        flat.update(flatten(value, path))
    return flat


def compute_changes(
    old: dict[str, Any],
    new: dict[str, Any],
    exclude_fields: set[str] | None = None
) -> dict[str, dict[str, Any]]:
    """
    Compute changes between two snapshots.

    Args:
        old: Previous snapshot
        new: New snapshot
        exclude_fields: Top-level fields to ignore (defaults to {"updated_at"})

    Returns:
        Dict of {path: {"old": old_val, "new": new_val}} for changed leaves.
        Empty dict if nothing changed.
    """
    exclude = exclude_fields or {"updated_at"}
    old_flat = flatten({k: v for k, v in old.items() if k not in exclude})
    new_flat = flatten({k: v for k, v in new.items() if k not in exclude})

    changes = {}
    for path in sorted(set(old_flat) | set(new_flat)):
        old_val = old_flat.get(path)
        new_val = new_flat.get(path)
        if old_val != new_val:
            changes[path] = {"old": old_val, "new": new_val}

    return changes
