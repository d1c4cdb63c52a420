"""Tests for cache key derivation and slot selection."""

import pytest
from hypothesis import given, strategies as st

from keepalive import ComponentDefinition, ComponentOptions, VNode
from keepalive.identity import component_name, first_component_child, resolve_key


@pytest.mark.unit
def test_explicit_key_returned_verbatim(make_vnode):
    vnode = make_vnode(1, name="Panel", tag="panel", key="settings-panel")
    assert resolve_key(vnode) == "settings-panel"


@pytest.mark.unit
def test_integer_key_is_stringified(make_vnode):
    assert resolve_key(make_vnode(1, name="Panel", key=7)) == "7"


@pytest.mark.unit
def test_constructor_id_without_tag(make_vnode):
    assert resolve_key(make_vnode(3, name="Panel")) == "3"


@pytest.mark.unit
def test_constructor_id_with_tag(make_vnode):
    assert resolve_key(make_vnode(3, name="Panel", tag="side-panel")) == "3::side-panel"


@pytest.mark.unit
def test_same_constructor_different_tags_are_distinct(make_vnode):
    """One constructor registered under two local names gets two slots."""
    left = make_vnode(3, tag="left-panel")
    right = make_vnode(3, tag="right-panel")

    assert resolve_key(left) != resolve_key(right)


@pytest.mark.unit
def test_non_component_node_has_no_key():
    with pytest.raises(ValueError):
        resolve_key(VNode(tag="div"))


@given(st.one_of(st.text(min_size=1, max_size=20), st.integers()))
def test_explicit_key_is_stable(key):
    """Property test: resolving the same explicit key is idempotent."""
    vnode = VNode(
        key=key,
        component_options=ComponentOptions(ctor=ComponentDefinition(cid=1), tag="x"),
    )
    assert resolve_key(vnode) == resolve_key(vnode) == str(key)


@pytest.mark.unit
def test_component_name_prefers_declared_name():
    options = ComponentOptions(ctor=ComponentDefinition(cid=1, name="Editor"), tag="my-editor")
    assert component_name(options) == "Editor"


@pytest.mark.unit
def test_component_name_falls_back_to_tag():
    options = ComponentOptions(ctor=ComponentDefinition(cid=1), tag="my-editor")
    assert component_name(options) == "my-editor"


@pytest.mark.unit
def test_component_name_missing():
    assert component_name(ComponentOptions(ctor=ComponentDefinition(cid=1))) is None
    assert component_name(None) is None


@pytest.mark.unit
def test_first_component_child_skips_plain_nodes(make_vnode):
    text = VNode(tag=None)
    div = VNode(tag="div")
    panel = make_vnode(1, name="Panel")
    other = make_vnode(2, name="Other")

    assert first_component_child([text, div, panel, other]) is panel


@pytest.mark.unit
def test_first_component_child_empty():
    assert first_component_child(None) is None
    assert first_component_child([]) is None
    assert first_component_child([VNode(tag="div")]) is None
