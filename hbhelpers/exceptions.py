class HbHelpersError(Exception):
    # base exception for all package-specific errors.
    pass

class ConfigError(HbHelpersError):
    # errors related to configuration.
    pass

class RegistrationError(HbHelpersError):
    # a helper cannot be registered with the template engine.
    pass

class TemplateError(HbHelpersError):
    # errors related to template compilation or rendering.
    pass

class HelperArgumentError(HbHelpersError, TypeError):
    # a helper received an argument (or block) of the wrong shape.
    def __init__(self, helper: str, expected: str, got: object = None):
        self.helper = helper
        self.expected = expected
        self.got = got
        message = f"helper '{helper}' expects {expected}"
        if got is not None:
            message += f", got {type(got).__name__}: {got!r}"
        super().__init__(message)

class HelperIndexError(HelperArgumentError, IndexError):
    # index/first/last pointed outside the list.
    def __init__(self, helper: str, index: int, length: int):
        self.index = index
        self.length = length
        expected = f"an index between 0 and {length - 1}" if length else "a non-empty list"
        super().__init__(helper, expected, index)
