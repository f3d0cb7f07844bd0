"""Doc comment generation from nested arrays."""

from __future__ import annotations

import random

import pytest

from docblock.lib.config.settings import FormatterConfig
from docblock.lib.generator import DocblockGenerator, render_document

_LETTERS = "abcdefghijklmnopqrstuvwxyz"

EXAMPLE_ONE = [
    [["Example document description."]],
    [
        ["@author", "Example Author Name"],
        ["@copyright", "2025 Example Author Name"],
    ],
]
EXAMPLE_ONE_EXPECTED = (
    "/**\n"
    " * Example document description.\n"
    " *\n"
    " * @author    Example Author Name\n"
    " * @copyright 2025 Example Author Name\n"
    " */"
)

EXAMPLE_TWO = [
    "Example method description.",
    [
        ["@param", "string", "$name", "Name param description."],
        ["@param", "array", "$longger", "Longger param description"],
    ],
    [["@return", "string", "Return value description."]],
]
EXAMPLE_TWO_EXPECTED = (
    "/**\n"
    " * Example method description.\n"
    " *\n"
    " * @param string $name    Name param description.\n"
    " * @param array  $longger Longger param description\n"
    " *\n"
    " * @return string Return value description.\n"
    " */"
)


def _indent(indentation: int, comment: str) -> str:
    pad = " " * indentation
    return pad + comment.replace("\n", "\n" + pad)


def _exact_line(width: int, rng: random.Random) -> str:
    """Random words joined by single spaces, exactly ``width`` characters long."""

    words: list[str] = []
    remaining = width
    while remaining > 0:
        size = remaining if remaining <= 13 else rng.randint(1, 12)
        words.append("".join(rng.choice(_LETTERS) for _ in range(size)))
        remaining -= size + 1
    return " ".join(words)


def _paragraph(width: int, rng: random.Random) -> list[str]:
    """Lines a wrap at ``width`` must reproduce: two full lines and a short one."""

    return [_exact_line(width, rng), _exact_line(width, rng), _exact_line(width // 2, rng)]


def _lines(first_prefix: str, continuation_prefix: str, paragraph: list[str]) -> list[str]:
    return [
        first_prefix + paragraph[0],
        *(continuation_prefix + line for line in paragraph[1:]),
    ]


def test_creates_comment_from_an_array() -> None:
    assert DocblockGenerator().from_array(EXAMPLE_ONE) == EXAMPLE_ONE_EXPECTED


def test_single_row_and_column_table_can_be_a_string() -> None:
    document = ["Example document description.", EXAMPLE_ONE[1]]

    assert DocblockGenerator().from_array(document) == EXAMPLE_ONE_EXPECTED


def test_mapping_keys_do_not_matter() -> None:
    document = {
        "a": {"b": {"c": "Example document description."}},
        "d": {
            "e": {"f": "@author", "g": "Example Author Name"},
            "h": {"i": "@copyright", "j": "2025 Example Author Name"},
        },
    }

    assert DocblockGenerator().from_array(document) == EXAMPLE_ONE_EXPECTED


def test_an_indentation_can_be_set() -> None:
    generator = DocblockGenerator().set_indentation(6)

    assert generator.get_indentation() == 6
    assert generator.from_array(EXAMPLE_TWO) == _indent(6, EXAMPLE_TWO_EXPECTED)


def test_last_column_of_a_row_can_be_omitted() -> None:
    document = [
        EXAMPLE_TWO[0],
        [EXAMPLE_TWO[1][0], EXAMPLE_TWO[1][1][:3]],
        EXAMPLE_TWO[2],
    ]
    expected = EXAMPLE_TWO_EXPECTED.replace(" Longger param description", "")

    actual = DocblockGenerator().set_indentation(4).from_array(document)

    assert actual == _indent(4, expected)


def test_trailing_absent_cell_matches_a_shorter_row() -> None:
    shorter = [[["@param", "array", "$longger"], ["@param", "string", "$name", "Name."]]]
    absent = [[["@param", "array", "$longger", None], ["@param", "string", "$name", "Name."]]]

    assert render_document(absent) == render_document(shorter)
    assert render_document(shorter) == (
        "/**\n * @param array  $longger\n * @param string $name    Name.\n */"
    )


@pytest.mark.parametrize(("indentation", "max_line_length"), [(4, 80), (6, 120)])
def test_last_column_is_wrapped(indentation: int, max_line_length: int) -> None:
    generator = DocblockGenerator().set_indentation(indentation)
    generator.set_max_line_length(max_line_length)
    assert generator.get_max_line_length() == max_line_length

    rng = random.Random(indentation * max_line_length)
    # bullet is 3 columns; @param table columns take 23, @return table 15.
    summary = _paragraph(max_line_length - indentation - 3, rng)
    first = _paragraph(max_line_length - indentation - 3 - 23, rng)
    second = _paragraph(max_line_length - indentation - 3 - 23, rng)
    returns = _paragraph(max_line_length - indentation - 3 - 15, rng)
    document = [
        " ".join(summary),
        [
            ["@param", "string", "$name", " ".join(first)],
            ["@param", "array", "$longger", " ".join(second)],
        ],
        [["@return", "string", " ".join(returns)]],
    ]
    pad = " " * indentation
    expected = "\n".join(
        [
            f"{pad}/**",
            *_lines(f"{pad} * ", f"{pad} * ", summary),
            f"{pad} *",
            *_lines(f"{pad} * @param string $name    ", f"{pad} * " + " " * 23, first),
            *_lines(f"{pad} * @param array  $longger ", f"{pad} * " + " " * 23, second),
            f"{pad} *",
            *_lines(f"{pad} * @return string ", f"{pad} * " + " " * 15, returns),
            f"{pad} */",
        ]
    )

    assert generator.from_array(document) == expected


@pytest.mark.parametrize("min_last_column_width", [None, 25])
def test_last_column_has_a_minimum_width(min_last_column_width: int | None) -> None:
    generator = DocblockGenerator().set_indentation(4)
    if min_last_column_width is not None:
        generator.set_min_last_column_width(min_last_column_width)
    width = generator.get_min_last_column_width()
    assert width == (min_last_column_width or 20)

    columns = [
        "@param",
        "null|int|float|array|Countable",
        "$thisWillLeaveVeryLittleSpaceForTheLastColumn",
    ]
    description = _paragraph(width, random.Random(width))
    document = [[[*columns, " ".join(description)]]]
    preceding = " ".join(columns) + " "
    expected = "\n".join(
        [
            "    /**",
            *_lines(f"     * {preceding}", "     * " + " " * len(preceding), description),
            "     */",
        ]
    )

    assert generator.from_array(document) == expected


def test_short_single_table_renders_on_one_line() -> None:
    document = [["@var", "int", "Very short description."]]

    assert DocblockGenerator().from_array(document) == "/** @var int Very short description. */"
    assert DocblockGenerator().from_array([document]) == "/** @var int Very short description. */"


def test_tab_indentation_is_a_single_tab() -> None:
    generator = DocblockGenerator().set_indentation(4).set_use_tab(True)

    assert generator.get_use_tab() is True
    assert generator.from_array(EXAMPLE_TWO) == (
        "\t" + EXAMPLE_TWO_EXPECTED.replace("\n", "\n\t")
    )


def test_setters_do_not_change_a_captured_config() -> None:
    generator = DocblockGenerator(FormatterConfig(max_line_length=100))
    snapshot = generator.config

    generator.set_max_line_length(40).set_indentation(2)

    assert snapshot == FormatterConfig(max_line_length=100)
    assert generator.config == FormatterConfig(indent_width=2, max_line_length=40)


def test_render_document_uses_defaults_without_config() -> None:
    assert render_document(EXAMPLE_ONE) == EXAMPLE_ONE_EXPECTED
