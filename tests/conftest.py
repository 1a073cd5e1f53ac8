import pytest
import structlog
from pybars import Scope

from hbhelpers.core.templating import HandlebarsHelpers, TemplateRenderer
from hbhelpers.core.templating.context_builder import active_value, bindings_of


def lookup(context, name, default=None):
    """Resolves a name the way a template sees it: bindings first, then the active value."""
    bindings = bindings_of(context)
    if name in bindings:
        return bindings[name]
    value = active_value(context)
    if isinstance(value, Scope):
        return lookup(value, name, default)
    if isinstance(value, dict):
        return value.get(name, default)
    return getattr(value, name, default)


class FakeBlock:
    """Stands in for a compiled pybars block: renders fixed text or a callable of the context."""

    def __init__(self, content, inverse=None):
        self._content = content
        self._inverse = inverse
        self.root = None
        self.rendered_contexts = []

    @property
    def has_inverse(self):
        return self._inverse is not None

    def render(self, context):
        self.rendered_contexts.append(context)
        if callable(self._content):
            return self._content(context)
        return self._content

    def render_inverse(self, context):
        return self._inverse or ""


class FakeEngine:
    """Records what gets registered, like a template engine would."""

    def __init__(self):
        self.helpers = {}
        self.registration_order = []

    def register(self, name, handler):
        self.helpers[name] = handler
        self.registration_order.append(name)


MULTILINE_TEXT = "\n".join([
    "A single line",
    "Two\nLines",
    "Three\n  indented\n    lines",
])


@pytest.fixture
def helpers():
    return HandlebarsHelpers({})


@pytest.fixture
def block():
    return FakeBlock(MULTILINE_TEXT)


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def renderer():
    return TemplateRenderer({})


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
