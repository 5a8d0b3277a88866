"""
Results of caller-supplied override hooks.

A hook decides one of three outcomes for its node:
  SKIP        → the node and its subtree render as nothing
  USE_DEFAULT → the default output is built
  Replace(v)  → v is used as the output as-is

Hooks may also return plain values: None means USE_DEFAULT and anything
else is wrapped in Replace.
"""

from dataclasses import dataclass
from typing import Any, Union


class Skip:
    """Render nothing for this node."""

    def __repr__(self) -> str:
        return "SKIP"


class UseDefault:
    """Fall back to default construction."""

    def __repr__(self) -> str:
        return "USE_DEFAULT"


@dataclass(frozen=True)
class Replace:
    """Use `value` verbatim as the node's output."""
    value: Any


SKIP = Skip()
USE_DEFAULT = UseDefault()

HookResult = Union[Skip, UseDefault, Replace]


def resolve_hook_result(raw: Any) -> HookResult:
    """Normalize whatever a hook returned into one of the three outcomes."""
    if raw is None:
        return USE_DEFAULT
    if isinstance(raw, (Skip, UseDefault, Replace)):
        return raw
    return Replace(raw)
