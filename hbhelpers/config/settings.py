from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from hbhelpers.exceptions import ConfigError
from hbhelpers.logging_setup import get_logger

log = get_logger(__name__)

DEFAULT_INDENTATION = "  "

@dataclass(frozen=True)
class HelperConfig:
    # read-only options shared by every helper of one provider.
    indentation: str = DEFAULT_INDENTATION

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "HelperConfig":
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in options.items():
            if key not in known:
                log.warning("unknown_helper_option_ignored", option=key)
                continue
            values[key] = value
        indentation = values.get("indentation", DEFAULT_INDENTATION)
        if indentation is None:
            values["indentation"] = DEFAULT_INDENTATION
        elif not isinstance(indentation, str):
            raise ConfigError(
                f"Option 'indentation' must be a string, got {type(indentation).__name__}."
            )
        return cls(**values)

    @classmethod
    def coerce(cls, configuration: Union["HelperConfig", Mapping[str, Any], None]) -> "HelperConfig":
        if isinstance(configuration, cls):
            return configuration
        if configuration is not None and not isinstance(configuration, Mapping):
            raise ConfigError(
                f"Helper configuration must be a mapping, got {type(configuration).__name__}."
            )
        return cls.from_mapping(configuration)
