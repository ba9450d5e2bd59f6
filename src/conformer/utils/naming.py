"""
Identifier case conversion utilities.

Every emitter derives storage identifiers through these two functions so the
serialization keys, the table definition and the relationship metadata can
never disagree on a column's storage name.

Round-trip fidelity is only guaranteed for ordinary identifiers: letters and
digits, no leading underscore or digit, no consecutive upper-case runs.
"""


def camel_to_snake(name: str) -> str:
    """
    Convert a camelCase identifier to snake_case.

    An underscore is inserted before every upper-case letter, which is then
    lower-cased. The first character is never prefixed.

    Examples:
        >>> camel_to_snake("createdAt")
        'created_at'
        >>> camel_to_snake("BlankThing")
        'blank_thing'
        >>> camel_to_snake("blank_thing_id")
        'blank_thing_id'
    """
    chars = []
    for index, char in enumerate(name):
        if char.isupper():
            if index > 0:
                chars.append("_")
            chars.append(char.lower())
        else:
            chars.append(char)
    return "".join(chars)


def snake_to_camel(name: str) -> str:
    """
    Convert a snake_case identifier to camelCase.

    Each underscore is dropped and the character following it is upper-cased.

    Examples:
        >>> snake_to_camel("created_at")
        'createdAt'
        >>> snake_to_camel("is_deleted")
        'isDeleted'
    """
    chars = []
    capitalize_next = False
    for char in name:
        if char == "_":
            capitalize_next = True
        elif capitalize_next:
            chars.append(char.upper())
            capitalize_next = False
        else:
            chars.append(char)
    return "".join(chars)


__all__ = ["camel_to_snake", "snake_to_camel"]
