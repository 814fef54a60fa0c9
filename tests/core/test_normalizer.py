# tests/core/test_normalizer.py
import copy

import pytest
from pydantic import ValidationError

from inspector.errors import MalformedTreeError
from inspector.hierarchy.normalizer import HierarchyNormalizer
from inspector.hierarchy.registry import detect
from inspector.model import Backend


@pytest.fixture
def selendroid():
    return HierarchyNormalizer.for_backend(Backend.SELENDROID)


@pytest.fixture
def uiautomator():
    return HierarchyNormalizer(detect(Backend.UIAUTOMATOR))


SELENDROID_TREE = {
    "type": "android.widget.FrameLayout",
    "shown": True,
    "children": [
        {
            "name": "id/title",
            "value": "Welcome",
            "label": "null",
            "type": "android.widget.TextView",
            "shown": True,
            "children": [
                {"name": "id/nested", "value": "Inner", "type": "android.widget.TextView", "shown": True},
            ],
        },
        {"type": "android.widget.LinearLayout", "shown": True},
        {"name": "id/hidden", "label": "Hidden", "shown": False},
    ],
}


def test_selendroid_fields(selendroid):
    """Test of name/value/label/type/shown op id/text/name/class/visible worden gezet."""
    [element] = selendroid.normalize(
        {"name": "n1", "value": "hello", "label": "hello", "type": "android.widget.Button", "shown": True}
    )
    assert element.id == "n1"
    assert element.text == "hello"
    assert element.name == "hello"
    assert element.class_name == "android.widget.Button"
    assert element.visible is True
    assert element.source is Backend.SELENDROID
    assert element.model_dump(by_alias=True, exclude_none=True, exclude={"source"}) == {
        "id": "n1", "text": "hello", "name": "hello", "class": "android.widget.Button", "visible": True,
    }


def test_selendroid_preorder(selendroid):
    """Ouders komen voor hun kinderen, broers in documentvolgorde."""
    elements = selendroid.normalize(SELENDROID_TREE)
    assert [e.id for e in elements] == ["id/title", "id/nested", "id/hidden"]


def test_selendroid_missing_shown_is_not_visible(selendroid):
    [element] = selendroid.normalize({"value": "x"})
    assert element.visible is False


def test_selendroid_string_flags(selendroid):
    elements = selendroid.normalize([
        {"value": "a", "shown": "true"},
        {"value": "b", "shown": "false"},
    ])
    assert [e.visible for e in elements] == [True, False]


def test_empty_values_are_absent(selendroid):
    """Lege attributen tellen als niet aanwezig."""
    [element] = selendroid.normalize({"name": "", "value": "Go", "label": "", "type": "t", "shown": True})
    assert element.id is None
    assert element.name is None
    assert element.text == "Go"


def test_non_string_values_are_stringified(selendroid):
    [element] = selendroid.normalize({"value": 42, "shown": True})
    assert element.text == "42"


def test_class_alone_yields_nothing(selendroid, uiautomator):
    """Een node met alleen een klasse levert geen descriptor op."""
    assert selendroid.normalize({"type": "android.widget.Button", "shown": True}) == []
    assert uiautomator.normalize({"@class": "android.widget.Button", "@text": ""}) == []


def test_unrecognized_node_still_follows_children(selendroid, uiautomator):
    assert [e.text for e in selendroid.normalize({"foo": 1, "children": [{"value": "kid"}]})] == ["kid"]
    assert [e.text for e in uiautomator.normalize({"@bounds": "[0,0][1,1]", "node": {"@text": "kid"}})] == ["kid"]


def test_empty_inputs(selendroid):
    assert selendroid.normalize({}) == []
    assert selendroid.normalize([]) == []
    assert selendroid.normalize([{}, [], [[{}]]]) == []


def test_nested_sequences_are_flattened(selendroid):
    elements = selendroid.normalize([[{"value": "a"}], {"value": "b"}, [[{"value": "c"}]]])
    assert [e.text for e in elements] == ["a", "b", "c"]


def test_uiautomator_fields(uiautomator):
    """content-desc wordt de naam, text de tekst, zonder zichtbaarheidsvlag."""
    [element] = uiautomator.normalize({
        "node": {"@text": "Login", "@content-desc": "Sign in", "@class": "android.widget.Button"}
    })
    assert element.text == "Login"
    assert element.name == "Sign in"
    assert element.class_name == "android.widget.Button"
    assert element.id is None
    assert element.visible is True
    assert element.source is Backend.UIAUTOMATOR


def test_uiautomator_ignores_selendroid_keys(uiautomator):
    assert uiautomator.normalize({"value": "x", "label": "y", "children": [{"@text": "z"}]}) == []


def test_uiautomator_single_and_list_children(uiautomator):
    tree = {
        "@text": "root",
        "node": [
            {"@content-desc": "first", "node": {"@text": "grandchild"}},
            {"@text": "second"},
        ],
    }
    elements = uiautomator.normalize(tree)
    assert [(e.text, e.name) for e in elements] == [
        ("root", None), (None, "first"), ("grandchild", None), ("second", None),
    ]


def test_normalize_is_deterministic_and_does_not_mutate(selendroid):
    tree = copy.deepcopy(SELENDROID_TREE)
    first = selendroid.normalize(tree)
    second = selendroid.normalize(tree)
    assert first == second
    assert tree == SELENDROID_TREE


@pytest.mark.parametrize("tree, path", [
    (42, "$"),
    ("hierarchy", "$"),
    (None, "$"),
    ({"children": "oops"}, "$.children"),
    ({"children": [{"value": "ok"}, None]}, "$.children[1]"),
    ({"children": [{"children": [3.5]}]}, "$.children[0].children[0]"),
])
def test_malformed_nodes(selendroid, tree, path):
    """Nodes die geen mapping of lijst zijn geven een MalformedTreeError met het pad."""
    with pytest.raises(MalformedTreeError) as excinfo:
        selendroid.normalize(tree)
    assert excinfo.value.path == path


def test_malformed_node_type_is_reported(uiautomator):
    with pytest.raises(MalformedTreeError) as excinfo:
        uiautomator.normalize({"node": 7})
    assert excinfo.value.node_type == "int"
    assert "$.node" in str(excinfo.value)


def test_descriptors_are_frozen(selendroid):
    [element] = selendroid.normalize({"value": "x"})
    with pytest.raises(ValidationError):
        element.text = "changed"
