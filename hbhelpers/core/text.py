# hbhelpers/core/text.py
"""
Line-oriented text transforms used by the block helpers.
All functions are pure: text in, text out. Lines are split on '\\n' only
and joined back with '\\n', so a trailing newline survives as an empty last line.
"""
from hbhelpers.config.settings import DEFAULT_INDENTATION

DOUBLE_QUOTE = '"'
SINGLE_QUOTE = "'"

def _lines(text: str):
    return text.split("\n")

def indent(text: str, indentation: str = DEFAULT_INDENTATION) -> str:
    """Prefixes every non-empty line; empty lines are kept byte-identical."""
    return "\n".join(
        line if line == "" else f"{indentation}{line}" for line in _lines(text)
    )

def comment(text: str, commenter: str) -> str:
    """Prefixes every line, blank ones included, with '<commenter> '."""
    return "\n".join(f"{commenter} {line}" for line in _lines(text))

def curly(text: str) -> str:
    # one pair around the whole content: '{' opens the first line, '}' closes the last.
    return "{" + text + "}"

def clear_empty_lines(text: str) -> str:
    return "\n".join(line for line in _lines(text) if line.strip())

def remove_quotes(text: str, quote: str = DOUBLE_QUOTE) -> str:
    return text.replace(quote, "")

def escape_quotes(text: str, quote: str = DOUBLE_QUOTE) -> str:
    return text.replace(quote, "\\" + quote)

def strip_regexp_delimiters(text: str) -> str:
    """Drops the '^' anchor at the start and the '$' anchor at the end of a pattern."""
    return text.lstrip("^").rstrip("$")

def escape_new_line(text: str) -> str:
    return text.replace("\n", "\\n")

def remove_surrounding_quotes(text: str) -> str:
    """
    Removes one matching pair of outer quotes ('"x"' or "'x'").
    Inner quotes, mismatched pairs and one-sided quotes are left alone,
    so a value quoted three times loses exactly one layer per call.
    """
    if len(text) >= 2 and text[0] == text[-1] and text[0] in (DOUBLE_QUOTE, SINGLE_QUOTE):
        return text[1:-1]
    return text
