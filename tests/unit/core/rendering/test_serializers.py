from __future__ import annotations

"""
Unit tests for the Structured Serializers.

Verifies the shape of every notation, the syntactic validity of JSON and
XML output, escaping rules and the missing-structure guard.
"""

import json
import xml.etree.ElementTree as ET

import pytest

from treetext.core.parsing.input_parser import parse_input
from treetext.core.rendering.serializers import (
    format_array_json,
    format_dot,
    format_flat_json,
    format_markdown,
    format_nested_json,
    format_xml,
    format_yaml,
)
from treetext.domain.errors import MissingStructureError

ALL_SERIALIZERS = [
    format_nested_json,
    format_array_json,
    format_flat_json,
    format_yaml,
    format_xml,
    format_dot,
    format_markdown,
]


@pytest.mark.parametrize("serializer", ALL_SERIALIZERS)
def test_missing_structure_is_rejected(serializer):
    with pytest.raises(MissingStructureError, match="Structure is required"):
        serializer(None)

# -----------------------------------------------------------------------------
# JSON FAMILY
# -----------------------------------------------------------------------------

def test_nested_json_shape(basic_tree):
    parsed = json.loads(format_nested_json(basic_tree))

    assert parsed == {
        ".": {
            "app": {
                "src": {"index.js": None},
                "package.json": None,
            }
        }
    }


def test_nested_json_empty_directory_marker():
    tree = parse_input("app\n  file.txt\n  assets/\n  empty-dir")

    app = json.loads(format_nested_json(tree))["."]["app"]

    assert app["file.txt"] is None
    assert app["assets/"] == {}
    # Without the trailing slash a childless entry is a file
    assert app["empty-dir"] is None


def test_nested_json_preserves_non_ascii_names():
    tree = parse_input("docs\n  résumé.md")

    text = format_nested_json(tree)

    assert "résumé.md" in text
    assert json.loads(text)["."]["docs"] == {"résumé.md": None}


def test_array_json_shape(basic_tree):
    parsed = json.loads(format_array_json(basic_tree))

    assert parsed["name"] == "root"
    assert parsed["type"] == "directory"
    assert len(parsed["children"]) == 1

    app = parsed["children"][0]
    assert app["name"] == "app"
    assert app["type"] == "directory"
    assert [c["name"] for c in app["children"]] == ["src", "package.json"]

    index_js = app["children"][0]["children"][0]
    assert index_js == {"name": "index.js", "type": "file"}
    assert "children" not in index_js


def test_array_json_empty_root_is_a_file_record():
    parsed = json.loads(format_array_json(parse_input(" ")))

    assert parsed == {"name": "root", "type": "file"}


def test_flat_json_shape(basic_tree):
    parsed = json.loads(format_flat_json(basic_tree))

    assert parsed == {
        "files": [
            {"path": "app/src/index.js", "type": "file"},
            {"path": "app/package.json", "type": "file"},
        ],
        "directories": [
            {"path": "app"},
            {"path": "app/src"},
        ],
    }


def test_flat_json_lists_are_ordered_files_then_directories(basic_tree):
    text = format_flat_json(basic_tree)

    assert list(json.loads(text).keys()) == ["files", "directories"]

# -----------------------------------------------------------------------------
# MARKUP FORMATS
# -----------------------------------------------------------------------------

def test_yaml_output(basic_tree):
    expected = (
        "root:\n"
        "  app:\n"
        "    src:\n"
        "      index.js: null\n"
        "    package.json: null\n"
    )

    assert format_yaml(basic_tree) == expected


def test_yaml_keys_are_written_verbatim():
    tree = parse_input("a: b\n  c#d")

    assert format_yaml(tree) == "root:\n  a: b:\n    c#d: null\n"


def test_yaml_empty_directory_has_no_children():
    assert format_yaml(parse_input("assets/")) == "root:\n  assets/:\n"


def test_xml_output(basic_tree):
    expected = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<directory name="root">\n'
        '  <directory name="app">\n'
        '    <directory name="src">\n'
        '      <file name="index.js" />\n'
        '    </directory>\n'
        '    <file name="package.json" />\n'
        '  </directory>\n'
        '</directory>\n'
    )

    assert format_xml(basic_tree) == expected


def test_xml_escapes_special_characters():
    tree = parse_input("app\n  file&.txt\n  <special>.js\n  it's \"quoted\"")

    result = format_xml(tree)

    assert '<file name="file&amp;.txt" />' in result
    assert '<file name="&lt;special&gt;.js" />' in result
    assert '<file name="it&apos;s &quot;quoted&quot;" />' in result


def test_xml_is_well_formed():
    tree = parse_input("app\n  file&.txt\n  <special>.js\n  nested\n    deep.txt")

    element = ET.fromstring(format_xml(tree).encode("utf-8"))

    assert element.tag == "directory"
    assert element.get("name") == "root"
    app = element.find("directory")
    assert [child.get("name") for child in app] == ["file&.txt", "<special>.js", "nested"]


def test_xml_root_without_children_is_a_file():
    assert format_xml(parse_input(" ")).endswith('<file name="root" />\n')


def test_dot_output_is_sorted(basic_tree):
    result = format_dot(basic_tree)

    assert result.split("\n") == [
        "app",
        "app/package.json",
        "app/src",
        "app/src/index.js",
    ]


def test_dot_line_count_excludes_root():
    tree = parse_input("zeta\n  b\nalpha\n  c\n    d")

    lines = format_dot(tree).split("\n")

    assert len(lines) == tree.count_nodes() - 1
    assert lines == sorted(lines)


def test_markdown_output(basic_tree):
    expected = (
        "* app/\n"
        "  * src/\n"
        "    * index.js\n"
        "  * package.json\n"
    )

    assert format_markdown(basic_tree) == expected


def test_markdown_multiple_top_level_entries_start_unindented():
    tree = parse_input("a\nb\n  c")

    assert format_markdown(tree) == "* a\n* b/\n  * c\n"


def test_empty_tree_serializations():
    tree = parse_input("\n  \n")

    assert json.loads(format_nested_json(tree)) == {".": None}
    assert json.loads(format_flat_json(tree)) == {"files": [], "directories": []}
    assert format_yaml(tree) == "root: null\n"
    assert format_dot(tree) == ""
    assert format_markdown(tree) == ""


def test_json_layout_matches_standard_encoder():
    tree = parse_input('app\n  src\n    "main".py\n  assets/\n  café.txt\n  docs\n    guide.md')

    for serializer in (format_nested_json, format_array_json, format_flat_json):
        text = serializer(tree)
        assert text == json.dumps(json.loads(text), indent=2, ensure_ascii=False)


DEPTH = 1500


@pytest.fixture(scope="module")
def deep_tree():
    return parse_input("\n".join("  " * i + f"d{i}" for i in range(DEPTH)))


def test_deep_tree_nested_json(deep_tree):
    result = format_nested_json(deep_tree)

    assert result.startswith('{\n  ".": {\n    "d0": {\n')
    assert f'\n{" " * (2 * (DEPTH + 1))}"d{DEPTH - 1}": null\n' in result
    assert result.count("{") == result.count("}") == DEPTH + 1


def test_deep_tree_array_json(deep_tree):
    result = format_array_json(deep_tree)

    assert result.count('"type": "directory"') == DEPTH
    assert result.count('"type": "file"') == 1
    assert result.endswith("}")


def test_deep_tree_yaml(deep_tree):
    lines = format_yaml(deep_tree).splitlines()

    assert len(lines) == DEPTH + 1
    assert lines[1] == "  d0:"
    assert lines[-1] == " " * (2 * DEPTH) + f"d{DEPTH - 1}: null"


def test_deep_tree_xml(deep_tree):
    result = format_xml(deep_tree)

    assert f'{" " * (2 * DEPTH)}<file name="d{DEPTH - 1}" />\n' in result
    assert result.count("</directory>") == DEPTH
    assert result.endswith("</directory>\n")


def test_deep_tree_markdown(deep_tree):
    lines = format_markdown(deep_tree).splitlines()

    assert len(lines) == DEPTH
    assert lines[-1] == " " * (2 * (DEPTH - 1)) + f"* d{DEPTH - 1}"


def test_deep_tree_flat_formats(deep_tree):
    assert len(format_dot(deep_tree).splitlines()) == DEPTH
    assert format_flat_json(deep_tree).count('"type": "file"') == 1


def test_markdown_of_a_subtree_includes_that_entry():
    tree = parse_input("app\n  src\n    index.js")

    assert format_markdown(tree.children[0].children[0]) == "* src/\n  * index.js\n"
