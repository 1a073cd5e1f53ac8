# hbhelpers/core/templating/context_builder.py
"""
Builds the derived rendering contexts block helpers render under.

A context is layered: a ``pybars.Scope`` whose ``overrides`` mapping holds the
names bound by helpers such as ``with``, on top of the active value (``this``).
Deriving always creates a new layer; the parent is never mutated, so one
context can be reused for every sibling render of a loop.
"""
from typing import Any, Dict

from pybars import Scope  # type: ignore


def active_value(context: Any) -> Any:
    """The value ``{{this}}`` resolves to in the given context."""
    if isinstance(context, Scope):
        return context.context
    return context


def bindings_of(context: Any) -> Dict[str, Any]:
    if isinstance(context, Scope):
        return dict(getattr(context, "overrides", None) or {})
    return {}


def derive(context: Any, name: str, value: Any, root: Any = None) -> Scope:
    """Same active value, plus one binding ``name -> value`` shadowing the parent's."""
    bindings = bindings_of(context)
    bindings[name] = value
    return Scope(active_value(context), context, root, overrides=bindings)


def rebind(context: Any, value: Any, root: Any = None, **positions: Any) -> Scope:
    """
    ``value`` becomes ``this``; names bound by enclosing helpers stay visible.
    ``positions`` are the loop data pybars exposes as ``@index``, ``@key``,
    ``@first`` and ``@last``.
    """
    return Scope(value, context, root, overrides=bindings_of(context), **positions)
