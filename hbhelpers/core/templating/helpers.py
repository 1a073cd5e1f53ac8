# hbhelpers/core/templating/helpers.py
"""
Custom Handlebars helpers for code-generation templates.

Helpers are methods of ``HandlebarsHelpers``. Each one is called as
``method(context, *args, block=None)``: ``context`` is the pybars ``this``,
``args`` are the resolved template arguments and ``block`` is a ``Block`` when
the helper is used as ``{{#name}}...{{/name}}``. Subclasses add helpers with
``@template_helper`` (or, the legacy way, by naming a method ``hh_<name>``).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union

from hbhelpers.config.settings import HelperConfig, DEFAULT_INDENTATION
from hbhelpers.core import text as text_utils
from hbhelpers.exceptions import HelperArgumentError, HelperIndexError
from hbhelpers.logging_setup import get_logger
from hbhelpers.util import to_text, expand_tab

from .blocks import Block, invocation_for, helper_options
from .context_builder import active_value, bindings_of, derive, rebind

log = get_logger(__name__)

HELPER_MARKER = "hh_"


class HelperMode(Enum):
    # which calling shapes a helper accepts.
    VALUE = "value"
    BLOCK = "block"
    EITHER = "either"

    def accepts(self, has_block: bool) -> bool:
        if self is HelperMode.EITHER:
            return True
        return has_block == (self is HelperMode.BLOCK)


@dataclass(frozen=True)
class HelperSpec:
    name: Optional[str]
    mode: HelperMode


def external_name(attribute: str) -> str:
    if attribute.startswith(HELPER_MARKER):
        return attribute[len(HELPER_MARKER):]
    return attribute


def template_helper(name: Optional[str] = None, mode: HelperMode = HelperMode.EITHER):
    """Marks a provider method as a template helper; the name defaults to the method name minus 'hh_'."""
    def mark(method):
        method.__helper_spec__ = HelperSpec(name=name, mode=mode)
        return method
    return mark


class HandlebarsHelpers:
    """Helper provider: the helper methods plus a read-only configuration."""

    def __init__(self, configuration: Union[HelperConfig, Mapping[str, Any], None] = None):
        self.config = HelperConfig.coerce(configuration)

    def _transform(self, context: Any, args: Sequence[Any], block: Optional[Block], transform) -> str:
        invocation = invocation_for(context, args, block)
        if invocation.is_absent:
            return ""
        return transform(invocation.text)

    @template_helper(mode=HelperMode.VALUE)
    def hh_to_string(self, context, *args, block=None):
        return to_text(args[-1] if args else None)

    @template_helper()
    def hh_join(self, context, *args, block=None):
        # a missing list renders like an empty one
        items = self._items("join", args[0] if args and args[0] is not None else [])
        joiner = expand_tab(to_text(args[1])) if len(args) > 1 else ""

        if block is None:
            return joiner.join(to_text(item) for item in items)
        if not items:
            return block.render_inverse(context)
        return joiner.join(block.render(rebind(context, item, block.root)) for item in items)

    @template_helper()
    def hh_indent(self, context, *args, block=None):
        options = helper_options(args, block)
        indentation = options[0] if options and options[0] is not None else self.config.indentation
        indentation = expand_tab(to_text(indentation)) or DEFAULT_INDENTATION
        return self._transform(context, args, block, lambda text: text_utils.indent(text, indentation))

    @template_helper()
    def hh_clear_empty_lines(self, context, *args, block=None):
        return self._transform(context, args, block, text_utils.clear_empty_lines)

    @template_helper()
    def hh_remove_double_quotes(self, context, *args, block=None):
        return self._transform(
            context, args, block, lambda text: text_utils.remove_quotes(text, text_utils.DOUBLE_QUOTE)
        )

    @template_helper()
    def hh_remove_single_quotes(self, context, *args, block=None):
        return self._transform(
            context, args, block, lambda text: text_utils.remove_quotes(text, text_utils.SINGLE_QUOTE)
        )

    @template_helper()
    def hh_remove_quotes(self, context, *args, block=None):
        # legacy name of remove_double_quotes
        return self.hh_remove_double_quotes(context, *args, block=block)

    @template_helper()
    def hh_escape_double_quotes(self, context, *args, block=None):
        return self._transform(
            context, args, block, lambda text: text_utils.escape_quotes(text, text_utils.DOUBLE_QUOTE)
        )

    @template_helper()
    def hh_escape_single_quotes(self, context, *args, block=None):
        return self._transform(
            context, args, block, lambda text: text_utils.escape_quotes(text, text_utils.SINGLE_QUOTE)
        )

    @template_helper()
    def hh_escape_quotes(self, context, *args, block=None):
        # legacy name of escape_double_quotes
        return self.hh_escape_double_quotes(context, *args, block=block)

    @template_helper()
    def hh_comment(self, context, *args, block=None):
        options = helper_options(args, block)
        if not options:
            raise HelperArgumentError("comment", "a commenter string before the text")
        commenter = to_text(options[0])
        return self._transform(context, args, block, lambda text: text_utils.comment(text, commenter))

    @template_helper()
    def hh_curly(self, context, *args, block=None):
        return self._transform(context, args, block, text_utils.curly)

    @template_helper(mode=HelperMode.VALUE)
    def hh_open_curly(self, context, *args, block=None):
        return "{"

    @template_helper(mode=HelperMode.VALUE)
    def hh_close_curly(self, context, *args, block=None):
        return "}"

    @template_helper(mode=HelperMode.VALUE)
    def hh_tab(self, context, *args, block=None):
        return "\t"

    @template_helper()
    def hh_strip_regexp_delimiters(self, context, *args, block=None):
        return self._transform(context, args, block, text_utils.strip_regexp_delimiters)

    @template_helper()
    def hh_escape_new_line(self, context, *args, block=None):
        return self._transform(context, args, block, text_utils.escape_new_line)

    @template_helper()
    def hh_remove_surrounding_quotes(self, context, *args, block=None):
        return self._transform(context, args, block, text_utils.remove_surrounding_quotes)

    @template_helper()
    def hh_debug(self, context, *args, block=None):
        log.info(
            "template_debug",
            this=active_value(context),
            bindings=bindings_of(context),
            args=list(args),
        )
        return ""

    @template_helper(mode=HelperMode.BLOCK)
    def hh_with(self, context, *args, block=None):
        """
        {{#with value "name"}} binds value to name for the block, keeping the
        current 'this' so outer names stay reachable in nested loops.
        {{#with value}} behaves like the Handlebars built-in and makes value 'this'.
        """
        if not args:
            raise HelperArgumentError("with", "a value and an optional binding name")
        if len(args) == 1:
            return block.render(rebind(context, args[0], block.root))
        return block.render(derive(context, to_text(args[1]), args[0], block.root))

    @template_helper(mode=HelperMode.BLOCK)
    def hh_each(self, context, *args, block=None):
        """
        Handlebars' built-in each (``@index``, ``@key``, ``@first``, ``@last``
        and the ``{{else}}`` branch), except that names bound by enclosing
        helpers such as ``with`` stay reachable inside the loop.
        """
        items = args[0] if args else None
        try:
            last_index = len(items) - 1
        except TypeError:
            last_index = -1
        if last_index < 0:
            return block.render_inverse(context)

        has_keys = hasattr(items, "keys")
        rendered = []
        for index, item in enumerate(items):
            positions = {"index": index, "first": index == 0, "last": index == last_index}
            if has_keys:
                positions["key"] = item
                item = items[item]
            rendered.append(block.render(rebind(context, item, block.root, **positions)))
        return "".join(rendered)

    @template_helper(mode=HelperMode.BLOCK)
    def hh_index(self, context, *args, block=None):
        if len(args) < 2:
            raise HelperArgumentError("index", "a list and an explicit index")
        return self._render_item("index", context, args[0], args[1], block)

    @template_helper(mode=HelperMode.BLOCK)
    def hh_first(self, context, *args, block=None):
        if not args:
            raise HelperArgumentError("first", "a list")
        return self._render_item("first", context, args[0], 0, block)

    @template_helper(mode=HelperMode.BLOCK)
    def hh_last(self, context, *args, block=None):
        if not args:
            raise HelperArgumentError("last", "a list")
        items = self._items("last", args[0])
        return self._render_item("last", context, items, len(items) - 1, block)

    def _items(self, helper: str, items: Any) -> Sequence[Any]:
        if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Sequence):
            raise HelperArgumentError(helper, "a list of items", items)
        return items

    def _render_item(self, helper: str, context: Any, items: Any, index: Any, block: Block) -> str:
        items = self._items(helper, items)
        try:
            position = int(index)
        except (TypeError, ValueError) as e:
            raise HelperArgumentError(helper, "an integer index", index) from e
        if not 0 <= position < len(items):
            raise HelperIndexError(helper, position, len(items))
        return block.render(rebind(context, items[position], block.root))
