"""Built-in recursive generator families.

Each family is built with letrec() and exposed through get_family(), which
the CLI uses for `entwine sample`. The first alternative of every recursive
one_of() is the terminating one, so max_depth bounds the nesting.
"""

from typing import Callable

from .generators import (
    Generator,
    array_of,
    constant,
    letrec,
    nat,
    one_of,
    tuple_of,
)


def build_tree(max_depth: int) -> dict[str, Generator]:
    """Binary trees: a leaf is a natural number, a node is a pair of trees."""
    return letrec(lambda tie: {
        "tree": one_of(tie("leaf"), tie("node"), max_depth=max_depth),
        "node": tuple_of(tie("tree"), tie("tree")),
        "leaf": nat(100),
    })


def _render_binary(parts: tuple) -> str:
    left, operator, right = parts
    return f"({left} {operator} {right})"


def build_expression(max_depth: int) -> dict[str, Generator]:
    """Arithmetic expressions over single digits, rendered as strings."""
    return letrec(lambda tie: {
        "expression": one_of(
            tie("number"), tie("binary"), depth_factor=0.5, max_depth=max_depth
        ),
        "number": nat(9).map(str),
        "binary": tuple_of(tie("expression"), tie("operator"), tie("expression")).map(
            _render_binary
        ),
        "operator": one_of(constant("+"), constant("-"), constant("*")),
    })


def build_forest(max_depth: int) -> dict[str, Generator]:
    """Labelled n-ary trees: each node carries a value and a list of children."""
    return letrec(lambda tie: {
        "node": tuple_of(nat(100), tie("children")).map(
            lambda parts: {"value": parts[0], "children": parts[1]}
        ),
        "children": one_of(
            constant(()).map(list),
            array_of(tie("node"), min_length=1, max_length=3),
            depth_factor=0.5,
            max_depth=max_depth,
        ),
    })


# family name -> (builder, entry point)
FAMILIES: dict[str, tuple[Callable[[int], dict[str, Generator]], str]] = {
    "tree": (build_tree, "tree"),
    "expression": (build_expression, "expression"),
    "forest": (build_forest, "node"),
}

FAMILY_NAMES = tuple(FAMILIES)


def get_family(name: str, max_depth: int = 8) -> Generator:
    """Build a family and return its entry-point generator.

    Raises:
        ValueError: If the family name is unknown
    """
    if name not in FAMILIES:
        raise ValueError(f"Unknown family: {name} (available: {', '.join(FAMILY_NAMES)})")
    builder, entry = FAMILIES[name]
    return builder(max_depth)[entry]
