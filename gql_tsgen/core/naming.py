"""Name conversion for generated identifiers.

    operation_identifier("getUsers", "query", config)  -> "GetUsersQuery"
    factory_key("GetUsersQuery")                      -> "getUsers"
"""

import re

from .config import PluginConfig

# Word boundaries: lower->Upper, ACRONYMWord, letter->digit is kept together
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

FACTORY_KEY_SUFFIXES = ("Query", "Mutation")


def pascal_case(text: str) -> str:
    """Convert any casing to PascalCase: ``get_users`` and ``getUsers`` -> ``GetUsers``."""
    return "".join(word[0].upper() + word[1:].lower() for word in _WORD_RE.findall(text))


def lower_case_first_letter(text: str) -> str:
    return text[:1].lower() + text[1:]


def convert_name(
    name: str,
    config: PluginConfig,
    *,
    prefix: str = "",
    suffix: str = "",
    use_types_prefix: bool = True,
    use_types_suffix: bool = True,
) -> str:
    """Convert a GraphQL name into a TypeScript identifier.

    Args:
        name: Raw name from the document, possibly empty
        config: Plugin config (naming convention, types prefix/suffix)
        prefix: Added before the converted name
        suffix: Added after the converted name, e.g. "Query" or "Document"
        use_types_prefix: Whether to apply config.types_prefix
        use_types_suffix: Whether to apply config.types_suffix
    """
    if config.naming_convention == "keep":
        converted = name
    elif config.transform_underscore:
        converted = pascal_case(name)
    else:
        # Underscores are part of the name unless told otherwise
        converted = "_".join(pascal_case(part) for part in name.split("_"))

    types_prefix = config.types_prefix if use_types_prefix else ""
    types_suffix = config.types_suffix if use_types_suffix else ""
    return f"{types_prefix}{prefix}{converted}{suffix}{types_suffix}"


def operation_identifier(raw_name: str, kind: str, config: PluginConfig) -> str:
    """Return the emission identifier, e.g. ``GetUsersQuery``.

    An anonymous operation yields the bare kind word (``Query``).
    """
    return convert_name(
        raw_name,
        config,
        suffix=pascal_case(kind),
        use_types_prefix=False,
        use_types_suffix=False,
    )


def factory_key(identifier: str) -> str:
    """Return the factory key for an emission identifier.

    The first letter is lower-cased, then a trailing "Query" and a trailing
    "Mutation" are stripped in that order.
    """
    key = lower_case_first_letter(identifier)
    for word in FACTORY_KEY_SUFFIXES:
        if key.endswith(word):
            key = key[: -len(word)]
    return key
