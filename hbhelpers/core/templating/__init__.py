# hbhelpers/core/templating/__init__.py
"""
Templating module for hbhelpers.

Provides the HandlebarsHelpers provider, the registration functions that
expose it to a template engine, and the pybars-backed TemplateRenderer.
"""
from .blocks import Block, BlockMode, Invocation, ValueMode
from .helpers import HandlebarsHelpers, HelperMode, template_helper
from .registry import (
    HelperDescriptor,
    helper_table,
    register_custom_helpers,
    register_helpers,
    register_string_helpers,
)
from .renderer import TemplateRenderer

__all__ = [
    "Block",
    "BlockMode",
    "Invocation",
    "ValueMode",
    "HandlebarsHelpers",
    "HelperMode",
    "template_helper",
    "HelperDescriptor",
    "helper_table",
    "register_custom_helpers",
    "register_helpers",
    "register_string_helpers",
    "TemplateRenderer",
]
