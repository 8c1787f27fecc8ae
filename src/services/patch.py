"""Partial update helpers.

A patch maps field names to a tagged ``FieldPatch``. Fields the client did not
send are UNSET and never appear in the mapping, an explicit null becomes CLEAR,
anything else is SET.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class PatchOp(str, Enum):
    """What to do with a single field."""

    UNSET = "unset"
    CLEAR = "clear"
    SET = "set"


@dataclass(frozen=True)
class FieldPatch:
    """A single field change."""

    op: PatchOp
    value: Any = None

    @classmethod
    def set(cls, value: Any) -> "FieldPatch":
        return cls(PatchOp.SET, value)

    @classmethod
    def clear(cls) -> "FieldPatch":
        return cls(PatchOp.CLEAR)


Patch = dict[str, FieldPatch]


def patch_from_model(model: BaseModel) -> Patch:
    """Build a patch from the fields explicitly present in a request body."""
    patch: Patch = {}
    for name in model.model_fields_set:
        value = getattr(model, name)
        patch[name] = FieldPatch.clear() if value is None else FieldPatch.set(value)
    return patch


def apply_patch(obj: Any, patch: Patch, allowed: frozenset[str]) -> list[str]:
    """Apply a patch to an ORM object and return the names of changed fields.

    Raises:
        ValueError: If the patch names a field outside ``allowed``.
    """
    unknown = set(patch) - allowed
    if unknown:
        raise ValueError(f"Fields cannot be patched: {', '.join(sorted(unknown))}")

    changed = []
    for name, change in patch.items():
        if change.op is PatchOp.UNSET:
            continue
        new_value = None if change.op is PatchOp.CLEAR else change.value
        if getattr(obj, name) != new_value:
            setattr(obj, name, new_value)
            changed.append(name)
    return changed
