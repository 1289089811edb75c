from moduledocs.manifest import extract_module_groups
from moduledocs.renderer import DiagramDocument, render_diagram

HEADER = ["@startwbs ", " ", "!theme blueprint"]


def test_empty_groups_render_header_root_and_footer() -> None:
    doc = render_diagram("MyApp", extract_module_groups([]))
    assert list(doc.lines) == HEADER + ["* MyApp", "@endwbs"]


def test_example_project() -> None:
    groups = extract_module_groups(
        [
            'include(":app:feature-a")',
            'include(":app:feature-b")',
            'include(":core")',
        ]
    )
    doc = render_diagram("MyApp", groups)
    assert doc.text == (
        "@startwbs \n"
        " \n"
        "!theme blueprint\n"
        "* MyApp\n"
        "** app\n"
        "*** feature-a\n"
        "*** feature-b\n"
        "** core\n"
        "@endwbs\n"
    )


def test_merged_key_renders_one_topic_with_ordered_children() -> None:
    doc = render_diagram("P", extract_module_groups(['include("a:b")', 'include("a:c")']))
    body = list(doc.lines[4:-1])
    assert body == ["** a", "*** b", "*** c"]


def test_key_without_children() -> None:
    doc = render_diagram("P", extract_module_groups(['include("x")']))
    assert list(doc.lines[4:]) == ["** x", "@endwbs"]


def test_values_are_not_template_source() -> None:
    doc = render_diagram("{{ boom }}", extract_module_groups(['include("{% if %}:<b>")']))
    assert "* {{ boom }}" in doc.lines
    assert "** {% if %}" in doc.lines
    assert "*** <b>" in doc.lines


def test_rendering_is_deterministic() -> None:
    lines = ['include(":z:y")', 'include(":a")', 'include(":z:x")']
    first = render_diagram("P", extract_module_groups(lines))
    second = render_diagram("P", extract_module_groups(lines))
    assert first == second
    assert first.text == second.text
    assert list(first.lines[4:-1]) == ["** z", "*** y", "*** x", "** a"]


def test_document_text_joins_lines() -> None:
    assert DiagramDocument(lines=("a", "b")).text == "a\nb\n"
