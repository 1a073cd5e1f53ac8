# hbhelpers/core/templating/blocks.py
"""
Calling convention between pybars and the helpers.

pybars calls a helper as ``helper(this, *args)`` for ``{{name args}}`` and as
``helper(this, options, *args)`` for ``{{#name args}}...{{/name}}``, where
``options`` is a mapping holding the compiled block (``fn``), its ``{{else}}``
branch (``inverse``) and the root context. ``Block`` wraps that mapping so
helpers only ever see ``render(context)``.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import pybars  # type: ignore

from hbhelpers.util import to_text


def _joined(rendered: Any) -> str:
    # pybars returns a strlist (list of chunks) from compiled blocks
    if rendered is None:
        return ""
    if isinstance(rendered, str):
        return rendered
    return "".join(rendered)


class Block:
    """A compiled nested template fragment handed to a block helper."""

    def __init__(self, options: Mapping[str, Any]):
        self._options = options

    @staticmethod
    def is_block_options(candidate: Any) -> bool:
        return isinstance(candidate, Mapping) and callable(candidate.get("fn"))

    @property
    def root(self) -> Any:
        return self._options.get("root")

    @property
    def has_inverse(self) -> bool:
        return callable(self._options.get("inverse"))

    def render(self, context: Any) -> str:
        return _joined(self._options["fn"](context))

    def render_inverse(self, context: Any) -> str:
        if not self.has_inverse:
            return ""
        return _joined(self._options["inverse"](context))


def split_block(args: Sequence[Any]) -> Tuple[Optional[Block], Tuple[Any, ...]]:
    """Separates the pybars options mapping (block mode) from the resolved arguments."""
    if args and Block.is_block_options(args[0]):
        return Block(args[0]), tuple(args[1:])
    return None, tuple(args)


@dataclass(frozen=True)
class ValueMode:
    value: Any

    @property
    def is_absent(self) -> bool:
        return self.value is None

    @property
    def text(self) -> str:
        return to_text(self.value)


@dataclass(frozen=True)
class BlockMode:
    text: str

    is_absent = False


Invocation = Union[ValueMode, BlockMode]


def invocation_for(context: Any, args: Sequence[Any], block: Optional[Block]) -> Invocation:
    # block mode renders the block in place; value mode operates on the last argument
    if block is not None:
        return BlockMode(block.render(context))
    return ValueMode(args[-1] if args else None)


def helper_options(args: Sequence[Any], block: Optional[Block]) -> Tuple[Any, ...]:
    # leading arguments configure the helper; in value mode the last one is the text itself
    if block is not None:
        return tuple(args)
    return tuple(args[:-1])


def as_output(result: Any) -> "pybars.strlist":
    # strlist output is inserted verbatim by pybars, generated code must not be HTML-escaped
    return pybars.strlist([to_text(result)])
