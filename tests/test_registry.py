"""Tests for helper discovery and registration."""

import pytest

from hbhelpers.core.templating import (
    HandlebarsHelpers,
    HelperMode,
    helper_table,
    register_custom_helpers,
    register_helpers,
    register_string_helpers,
    template_helper,
)
from hbhelpers.exceptions import HelperArgumentError, RegistrationError

from .conftest import FakeEngine


def block_options(text="-", inverse=None):
    # the shape pybars hands to a block helper
    return {"fn": lambda this: text, "inverse": inverse, "helpers": {}, "partials": {}, "root": {}}


def call(engine, name, *args):
    return "".join(engine.helpers[name](*args))


class CustomHelper(HandlebarsHelpers):
    def hh_do_something(self, context, *args, block=None):
        return "done"

    @template_helper(name="shout", mode=HelperMode.VALUE)
    def loud(self, context, *args, block=None):
        return str(args[-1]).upper()

    def hh_indent(self, context, *args, block=None):
        return "custom indent"


class TestRegisterHelpers:
    def test_registers_the_helpers_needed_for_the_application(self, engine):
        provider = register_helpers(engine, {})
        assert isinstance(provider, HandlebarsHelpers)
        assert engine.helpers

    def test_provider_receives_the_configuration(self, engine):
        provider = register_helpers(engine, {"indentation": "\t"})
        assert provider.config.indentation == "\t"

    def test_registering_twice_replaces_previous_handlers(self, engine):
        register_helpers(engine, {})
        first = engine.helpers["indent"]
        register_helpers(engine, {"indentation": "----"})
        assert engine.helpers["indent"] is not first
        assert call(engine, "indent", {}, block_options("La")) == "----La"

    def test_custom_provider_class(self, engine):
        register_helpers(engine, {}, provider_class=CustomHelper)
        assert "do_something" in engine.helpers


class TestRegisterStringHelpers:
    def test_registers_the_custom_string_methods(self, helpers, engine):
        register_string_helpers(helpers, engine)
        assert set(engine.helpers) >= {
            "literate",
            "normalize",
            "normalize_lower",
            "underscore",
            "camelize",
            "camelize_lower",
            "clear_extension",
        }

    def test_string_helpers_are_value_only(self, helpers, engine):
        register_string_helpers(helpers, engine)
        assert call(engine, "underscore", {}, "HelloWorld") == "hello_world"
        assert call(engine, "camelize", {}, None) == ""
        assert call(engine, "clear_extension", {}, False) == "false"
        with pytest.raises(HelperArgumentError):
            engine.helpers["underscore"]({}, block_options())


class TestRegisterCustomHelpers:
    def test_registers_the_helpers(self, helpers, engine):
        register_custom_helpers(helpers, engine)
        assert set(engine.helpers) >= {
            "to_string",
            "join",
            "indent",
            "clear_empty_lines",
            "remove_double_quotes",
            "remove_single_quotes",
            "remove_quotes",
            "escape_double_quotes",
            "escape_single_quotes",
            "escape_quotes",
            "comment",
            "curly",
            "open_curly",
            "close_curly",
            "tab",
            "strip_regexp_delimiters",
            "escape_new_line",
            "remove_surrounding_quotes",
            "with",
            "index",
            "first",
            "last",
            "debug",
        }

    def test_hh_methods_of_subclasses_are_registered(self, engine):
        register_custom_helpers(CustomHelper({}), engine)
        assert "do_something" in engine.helpers
        assert call(engine, "do_something", {}) == "done"

    def test_decorated_methods_use_their_explicit_name(self, engine):
        register_custom_helpers(CustomHelper({}), engine)
        assert "shout" in engine.helpers
        assert "loud" not in engine.helpers
        assert call(engine, "shout", {}, "hey") == "HEY"

    def test_subclass_overrides_keep_the_inherited_mode(self):
        table = helper_table(CustomHelper)
        assert table["indent"].attribute == "hh_indent"
        assert table["indent"].owner == "CustomHelper"
        assert table["indent"].mode is HelperMode.EITHER
        assert helper_table(HandlebarsHelpers)["with"].mode is HelperMode.BLOCK

    def test_subclass_helpers_do_not_leak_into_the_base_class(self):
        helper_table(CustomHelper)
        assert "do_something" not in helper_table(HandlebarsHelpers)

    def test_overridden_helper_is_the_one_called(self, engine):
        register_custom_helpers(CustomHelper({}), engine)
        assert call(engine, "indent", {}, block_options("La")) == "custom indent"

    def test_names_are_unique_and_order_independent(self, helpers):
        first = FakeEngine()
        second = FakeEngine()
        register_custom_helpers(helpers, first)
        register_custom_helpers(helpers, second)
        assert len(first.registration_order) == len(set(first.registration_order))
        assert set(first.helpers) == set(second.helpers)

    def test_helper_without_context_parameter_fails_fast(self, engine):
        class BrokenHelper(HandlebarsHelpers):
            def hh_broken(self):
                return ""

        with pytest.raises(RegistrationError, match="broken"):
            register_custom_helpers(BrokenHelper({}), engine)
        assert engine.helpers == {}

    def test_helper_without_block_keyword_fails_fast(self, engine):
        class NoBlockHelper(HandlebarsHelpers):
            def hh_no_block(self, context, value):
                return value

        with pytest.raises(RegistrationError, match="block"):
            register_custom_helpers(NoBlockHelper({}), engine)


class TestDispatch:
    def test_value_mode_call(self, helpers, engine):
        register_custom_helpers(helpers, engine)
        assert call(engine, "curly", {}, "x") == "{x}"

    def test_block_mode_call(self, helpers, engine):
        register_custom_helpers(helpers, engine)
        assert call(engine, "curly", {}, block_options("x")) == "{x}"

    def test_block_only_helper_without_block(self, helpers, engine):
        register_custom_helpers(helpers, engine)
        with pytest.raises(HelperArgumentError, match="with"):
            engine.helpers["with"]({}, "value", "name")

    def test_value_only_helper_with_block(self, helpers, engine):
        register_custom_helpers(helpers, engine)
        with pytest.raises(HelperArgumentError, match="tab"):
            engine.helpers["tab"]({}, block_options())

    def test_else_branch_reaches_the_helper(self, helpers, engine):
        register_custom_helpers(helpers, engine)
        options = block_options("item", inverse=lambda this: "No items")
        assert call(engine, "join", {}, options, [], "-") == "No items"

    def test_plain_dict_argument_is_not_mistaken_for_a_block(self, helpers, engine):
        register_custom_helpers(helpers, engine)
        assert call(engine, "to_string", {}, {"fn": "not callable"}) == "{'fn': 'not callable'}"
