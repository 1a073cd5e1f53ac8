from typing import Any

LITERAL_TAB = "\\t"

def to_text(value: Any) -> str:
    # canonical text form of a template value: None -> "", booleans lowercased.
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return str(value)

def expand_tab(value: str) -> str:
    # templates cannot embed a real tab easily, so the two characters '\t' stand for one.
    return value.replace(LITERAL_TAB, "\t")
