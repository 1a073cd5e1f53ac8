"""Handlebars helpers for code-generation templates."""
from hbhelpers.config import HelperConfig, load_helper_config
from hbhelpers.core.templating import (
    HandlebarsHelpers,
    TemplateRenderer,
    register_helpers,
    template_helper,
)
from hbhelpers.exceptions import (
    ConfigError,
    HbHelpersError,
    HelperArgumentError,
    HelperIndexError,
    RegistrationError,
    TemplateError,
)

__version__ = "0.1.0"

__all__ = [
    "HelperConfig",
    "load_helper_config",
    "HandlebarsHelpers",
    "TemplateRenderer",
    "register_helpers",
    "template_helper",
    "ConfigError",
    "HbHelpersError",
    "HelperArgumentError",
    "HelperIndexError",
    "RegistrationError",
    "TemplateError",
]
