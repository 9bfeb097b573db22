"""
Compact JSON formatter that keeps flat records on single lines.

Layouts hold hundreds of small tile records; writing each one on a single
line keeps exported files readable and diffable.
"""

import json


def _is_primitive(value):
    return value is None or isinstance(value, (bool, int, float, str))


def _is_flat(value):
    """Lists of primitives and dicts whose values are all primitives."""
    if isinstance(value, list):
        return all(_is_primitive(item) for item in value)
    if isinstance(value, dict):
        return all(_is_primitive(item) for item in value.values())
    return False


def dumps(obj, indent=2):
    """
    Serialize obj to a JSON formatted string.

    Flat lists and flat dicts are written on a single line.
    Nested structures are indented normally.

    Args:
        obj: The object to serialize
        indent: Number of spaces for indentation (default: 2)

    Returns:
        A formatted JSON string
    """

    def format_value(value, level):
        pad = " " * (indent * level)
        child_pad = " " * (indent * (level + 1))

        if _is_primitive(value) or (_is_flat(value) and level > 0):
            return json.dumps(value)

        if isinstance(value, list):
            if not value:
                return "[]"
            items = [format_value(item, level + 1) for item in value]
            return "[\n" + ",\n".join(child_pad + item for item in items) + "\n" + pad + "]"

        if isinstance(value, dict):
            if not value:
                return "{}"
            items = [
                f"{json.dumps(key)}: {format_value(item, level + 1)}"
                for key, item in value.items()
            ]
            return "{\n" + ",\n".join(child_pad + item for item in items) + "\n" + pad + "}"

        return json.dumps(value)

    return format_value(obj, 0)


def dump(obj, fp, indent=2):
    """Serialize obj to a JSON formatted stream."""
    fp.write(dumps(obj, indent))
    fp.write("\n")


# Raised by load() and loads() on malformed input
JSONDecodeError = json.JSONDecodeError


def loads(text):
    return json.loads(text)


def load(fp):
    return json.load(fp)
