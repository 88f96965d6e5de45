"""
Naming rules for generated GraphQL types and query fields.

All functions are pure string transforms. Singularization and
pluralization are naive suffix rules, not linguistic analysis:
"categories" becomes the type "Categorie" and that is the expected output.
"""

import re
from typing import Callable, List, Tuple

_UPPERCASE_LETTER = re.compile(r"[A-Z]")

VOWELS = ("a", "e", "i", "o", "u")


def capitalize_first(name: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return name[:1].upper() + name[1:]


def type_name_for_collection(collection_name: str) -> str:
    """
    Derive the GraphQL type name for a collection.

    The first character is upper-cased and a single trailing "s" is
    stripped from the remainder ("users" -> "User", "cats" -> "Cat").

    Args:
        collection_name: Collection name as stored in the database

    Returns:
        Type name
    """
    head, rest = collection_name[:1], collection_name[1:]
    if rest.endswith("s"):
        rest = rest[:-1]
    return head.upper() + rest


def nested_type_name(owner_type_name: str, field_name: str) -> str:
    """Name for an object shape found under ``field_name`` of ``owner_type_name``."""
    return owner_type_name + capitalize_first(field_name)


def to_snake_case(type_name: str) -> str:
    """
    Convert a PascalCase type name to a lower-case field name.

    Every upper-case letter after the first character gets a "_" prefix
    ("BlogPost" -> "blog_post").
    """
    converted = _UPPERCASE_LETTER.sub(
        lambda match: match.group(0).lower() if match.start() == 0 else "_" + match.group(0).lower(),
        type_name,
    )
    return converted.lower()


def _ends_with_sibilant(word: str) -> bool:
    return word.endswith(("x", "s", "sh", "ch"))


def _ends_with_consonant_y(word: str) -> bool:
    return word.endswith("y") and word[-2:-1] not in VOWELS


# Ordered rule table: (matches, transform). First match wins.
PLURAL_RULES: List[Tuple[Callable[[str], bool], Callable[[str], str]]] = [
    (_ends_with_sibilant, lambda word: word + "es"),
    (_ends_with_consonant_y, lambda word: word[:-1] + "ies"),
    (lambda word: True, lambda word: word + "s"),
]


def pluralize(word: str) -> str:
    """
    Pluralize a singular field name with English suffix heuristics.

    - ends with x, s, sh or ch: append "es" ("box" -> "boxes")
    - ends with a consonant followed by y: "y" -> "ies" ("city" -> "cities")
    - otherwise: append "s" ("post" -> "posts")
    """
    for matches, transform in PLURAL_RULES:
        if matches(word):
            return transform(word)
    return word
