# hbhelpers/core/templating/renderer.py
"""
Contains the TemplateRenderer class: the pybars-backed template engine the
helpers are registered with. It compiles Handlebars sources (with a cache)
and renders them with every registered helper available.
"""
from typing import Any, Callable, Dict, Mapping, Optional, Type, Union
import pybars  # type: ignore

from hbhelpers.config.settings import HelperConfig
from hbhelpers.exceptions import HbHelpersError, TemplateError
from hbhelpers.logging_setup import get_logger

from .helpers import HandlebarsHelpers
from .registry import register_helpers

log = get_logger(__name__)

class TemplateRenderer:
    """Manages compilation and rendering of Handlebars templates with the code-generation helpers."""
    def __init__(
        self,
        configuration: Union[HelperConfig, Mapping[str, Any], None] = None,
        provider_class: Optional[Type[HandlebarsHelpers]] = HandlebarsHelpers,
    ):
        self.handlebars_compiler = pybars.Compiler()
        self.registered_helpers: Dict[str, Callable[..., Any]] = {}
        self._compiled_templates: Dict[str, Callable[..., Any]] = {}
        self.provider: Optional[HandlebarsHelpers] = None
        if provider_class is not None:
            self.provider = register_helpers(self, configuration, provider_class=provider_class)

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        if name in self.registered_helpers:
            log.debug("helper_replaced", helper=name)
        self.registered_helpers[name] = handler

    def compile(self, template_source: str) -> Callable[..., Any]:
        compiled = self._compiled_templates.get(template_source)
        if compiled is not None:
            return compiled
        try:
            compiled = self.handlebars_compiler.compile(template_source)
        except Exception as e:
            log.error("template_compilation_failed", error=str(e))
            raise TemplateError(f"Failed to compile template: {e}") from e
        log.debug("template_compiled", length=len(template_source))
        self._compiled_templates[template_source] = compiled
        return compiled

    def render(self, template_source: str, template_context_data: Any = None) -> str:
        """Renders a Handlebars source with the given context data."""
        compiled_template_function = self.compile(template_source)
        try:
            rendered = compiled_template_function(
                template_context_data if template_context_data is not None else {},
                helpers=self.registered_helpers,
            )
        except HbHelpersError:
            # helper errors already name the helper and the expected shape
            log.error("template_render_failed", exc_info=True)
            raise
        except Exception as e:
            log.error("template_render_failed", error=str(e), exc_info=True)
            raise TemplateError(f"Render failed: {e}") from e
        return rendered if isinstance(rendered, str) else "".join(rendered)
