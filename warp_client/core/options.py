from __future__ import annotations
from dataclasses import fields
from typing import Any, Optional, TypeVar

from warp_client.core.types import RunOptions, ProfileListOptions

T = TypeVar("T")

def merge_options(base: Optional[Any], override: T) -> T:
    """
    Layers `override` on top of `base`, field by field.

    A field of the override wins when it is not None; otherwise the value of the
    same-named field of `base` is used. Lists are replaced, never concatenated.
    The result has the type of `override`; fields of `base` that the override's
    type does not declare are dropped.

    Args:
        base: The default layer (may be None or of a different option type).
        override: The call-level layer.

    Returns:
        A new option record of the same type as `override`.
    """
    merged: dict[str, Any] = {}
    for field in fields(override):
        value = getattr(override, field.name)
        if value is None and base is not None:
            value = getattr(base, field.name, None)
        merged[field.name] = value
    return type(override)(**merged)

def profile_list_defaults(defaults: Optional[RunOptions]) -> ProfileListOptions:
    """Projects client defaults onto the options `agent profile list` understands."""
    if defaults is None:
        return ProfileListOptions()
    return merge_options(defaults, ProfileListOptions())
