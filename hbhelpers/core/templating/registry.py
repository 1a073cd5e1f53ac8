# hbhelpers/core/templating/registry.py
"""
Turns a helper provider into directives of a template engine.

The helper table of a provider class is built once per class from its MRO:
methods marked with ``@template_helper`` and legacy ``hh_*`` methods. A
subclass entry with the same external name replaces the inherited one.
Any object with ``register(name, handler)`` can act as the engine.
"""
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Type, Union

from hbhelpers.config.settings import HelperConfig
from hbhelpers.core.strings import STRING_TRANSFORMS
from hbhelpers.exceptions import HelperArgumentError, RegistrationError
from hbhelpers.logging_setup import get_logger
from hbhelpers.util import to_text

from .blocks import as_output, split_block
from .helpers import HELPER_MARKER, HandlebarsHelpers, HelperMode, HelperSpec, external_name

log = get_logger(__name__)


class HelperEngine(Protocol):
    def register(self, name: str, handler: Callable[..., Any]) -> None:
        ...


@dataclass(frozen=True)
class HelperDescriptor:
    name: str
    attribute: str
    mode: HelperMode
    owner: str


def _helper_spec(attribute: str, member: Any) -> Optional[HelperSpec]:
    spec = getattr(member, "__helper_spec__", None)
    if spec is not None:
        return spec
    if attribute.startswith(HELPER_MARKER) and callable(member):
        return HelperSpec(name=None, mode=HelperMode.EITHER)
    return None


def helper_table(provider_class: Type[HandlebarsHelpers]) -> Dict[str, HelperDescriptor]:
    """External name -> descriptor for every helper the class defines or inherits."""
    cached = provider_class.__dict__.get("_helper_table")
    if cached is not None:
        return cached
    table: Dict[str, HelperDescriptor] = {}
    for klass in reversed(provider_class.__mro__):
        for attribute, member in vars(klass).items():
            spec = _helper_spec(attribute, member)
            if spec is None:
                continue
            inherited = next((d for d in table.values() if d.attribute == attribute), None)
            if inherited is not None:
                del table[inherited.name]
                if not hasattr(member, "__helper_spec__"):
                    # plain override of an inherited helper keeps its name and mode
                    spec = HelperSpec(name=inherited.name, mode=inherited.mode)
            name = spec.name or external_name(attribute)
            table[name] = HelperDescriptor(name, attribute, spec.mode, klass.__name__)
    provider_class._helper_table = table
    return table


def _validate_signature(descriptor: HelperDescriptor, method: Callable[..., Any]) -> None:
    where = f"{descriptor.owner}.{descriptor.attribute}"
    try:
        signature = inspect.signature(method)
    except (TypeError, ValueError) as e:
        raise RegistrationError(f"Helper '{descriptor.name}' ({where}) has no inspectable signature: {e}") from e

    params = list(signature.parameters.values())
    positional = [
        p for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.VAR_POSITIONAL)
    ]
    if not positional:
        raise RegistrationError(
            f"Helper '{descriptor.name}' ({where}) must accept the rendering context as its first parameter."
        )
    accepts_block = any(
        p.kind == inspect.Parameter.VAR_KEYWORD
        or (p.name == "block" and p.kind != inspect.Parameter.POSITIONAL_ONLY)
        for p in params
    )
    if not accepts_block:
        raise RegistrationError(f"Helper '{descriptor.name}' ({where}) must accept a 'block' keyword argument.")


def _dispatcher(descriptor: HelperDescriptor, method: Callable[..., Any]) -> Callable[..., Any]:
    def dispatch(this, *args):
        block, values = split_block(args)
        if not descriptor.mode.accepts(block is not None):
            expected = "a block ({{#%s}}...{{/%s}})" % (descriptor.name, descriptor.name)
            if block is not None:
                expected = "to be used without a block ({{%s ...}})" % descriptor.name
            raise HelperArgumentError(descriptor.name, expected)
        return as_output(method(this, *values, block=block))

    dispatch.__name__ = f"helper_{descriptor.name}"
    dispatch.descriptor = descriptor
    return dispatch


def _string_dispatcher(name: str, transform: Callable[[str], str]) -> Callable[..., Any]:
    def dispatch(this, *args):
        block, values = split_block(args)
        if block is not None:
            raise HelperArgumentError(name, "to be used without a block ({{%s value}})" % name)
        if not values or values[-1] is None:
            return as_output("")
        return as_output(transform(to_text(values[-1])))

    dispatch.__name__ = f"helper_{name}"
    return dispatch


def register_string_helpers(provider: HandlebarsHelpers, engine: HelperEngine) -> None:
    for name, transform in STRING_TRANSFORMS.items():
        engine.register(name, _string_dispatcher(name, transform))
        log.debug("helper_registered", helper=name, kind="string")


def register_custom_helpers(provider: HandlebarsHelpers, engine: HelperEngine) -> None:
    table = helper_table(type(provider))
    handlers = {}
    # validate everything before touching the engine so a bad subclass registers nothing
    for name, descriptor in table.items():
        method = getattr(provider, descriptor.attribute)
        _validate_signature(descriptor, method)
        handlers[name] = _dispatcher(descriptor, method)
    for name, handler in handlers.items():
        engine.register(name, handler)
        log.debug("helper_registered", helper=name, kind="custom", mode=table[name].mode.value)


def register_helpers(
    engine: HelperEngine,
    configuration: Union[HelperConfig, Mapping[str, Any], None] = None,
    provider_class: Type[HandlebarsHelpers] = HandlebarsHelpers,
) -> HandlebarsHelpers:
    provider = provider_class(configuration)
    register_string_helpers(provider, engine)
    register_custom_helpers(provider, engine)
    log.info(
        "helpers_registered",
        provider=provider_class.__name__,
        count=len(STRING_TRANSFORMS) + len(helper_table(provider_class)),
    )
    return provider
