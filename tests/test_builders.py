# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the dynamic tag builders."""

import pytest

from genro_cdom import HtmlElements, InvalidCallError, Namespace, SvgElements, Text, current
from genro_cdom.builders import create, tag_builder


class TestArgumentShapes:
    """Tests for argument-shape inference."""

    def test_no_arguments(self, el):
        div = el.div()
        assert div.tag_name == 'div'
        assert div.attributes == {}
        assert div.child_nodes == []

    def test_attributes_only(self, el):
        div = el.div({'a': 1})
        assert div.attributes == {'a': '1'}
        assert div.child_nodes == []

    def test_none_is_empty_attribute_map(self, el):
        div = el.div(None)
        assert div.attributes == {}
        assert div.child_nodes == []

    def test_inner_only(self, el):
        """Test a primitive alone is text content."""
        div = el.div('x')
        assert div.attributes == {}
        assert div.text_content == 'x'

    def test_falsy_inner_only(self, el):
        assert el.div(0).text_content == '0'

    def test_attributes_and_text(self, el):
        div = el.div({'a': 1}, 'x')
        assert div.attributes == {'a': '1'}
        assert div.text_content == 'x'

    def test_attributes_and_callback(self, el):
        div = el.div({'a': 1}, lambda: el.span())
        assert div.attributes == {'a': '1'}
        assert [child.tag_name for child in div.child_nodes] == ['span']

    def test_callback_only(self, el):
        div = el.div(lambda: el.p('x'))
        assert div.first_child.tag_name == 'p'

    def test_first_argument_not_a_map_raises(self, el):
        with pytest.raises(InvalidCallError, match=r'<div>: \(int, dict\)'):
            el.div(1, {})

    def test_too_many_arguments_raises(self, el):
        with pytest.raises(InvalidCallError):
            el.div({}, 'x', 'y')


class TestTagLookup:
    """Tests for tag-name lookup."""

    def test_any_name_is_a_tag(self, el):
        assert el.totally_custom().tag_name == 'totally_custom'

    def test_lookup_lowercases(self, el):
        assert el.DIV().tag_name == 'div'

    def test_item_lookup(self, el):
        assert el['my-widget']().tag_name == 'my-widget'

    def test_tag_builder(self, el):
        assert tag_builder(el, 'Section')().tag_name == 'section'

    def test_trailing_underscore_dropped(self, el):
        assert el.del_().tag_name == 'del'

    def test_private_names_raise(self, el):
        with pytest.raises(AttributeError):
            el._private

    def test_builder_name(self, el):
        builder = el.span
        assert builder.__name__ == 'span'
        assert builder.__qualname__ == 'HtmlElements.span'

    def test_keyword_attributes(self, el):
        """Test keyword attributes merge after the map, dropping a trailing _."""
        label = el.label({'for': 'a', 'title': 'old'}, 'Name', class_='big', title='new')
        assert label.attributes == {'for': 'a', 'title': 'new', 'class': 'big'}

    def test_keyword_event(self, el):
        def handler(evt):
            pass

        assert el.button(onclick=handler).get_event_listeners('click') == [handler]

    def test_create_explicit(self, el):
        """Test create() takes explicit attrs and inner, name verbatim."""
        node = create(el, 'Custom', {'id': 'c'}, 'body')
        assert node.tag_name == 'Custom'
        assert node.get_attribute('id') == 'c'
        assert node.text_content == 'body'

    def test_create_keeps_svg_case(self, cd):
        node = create(cd.svg_elements, 'foreignObject')
        assert node.tag_name == 'foreignObject'
        assert node.namespace is Namespace.SVG

    def test_repr(self):
        assert repr(HtmlElements()) == 'HtmlElements(XHTML)'
        assert repr(SvgElements()) == 'SvgElements(SVG)'


class TestReservedLookingNames:
    """Tests that no tag name is taken by the builder object itself."""

    def test_tag_is_a_tag(self, el):
        assert el.tag().tag_name == 'tag'

    def test_create_is_a_tag(self, el):
        assert el.create().tag_name == 'create'

    def test_document_is_a_tag(self, el):
        assert el.document().tag_name == 'document'

    def test_namespace_is_a_tag(self, el):
        assert el.namespace().tag_name == 'namespace'

    def test_item_lookup_matches_attribute_lookup(self, el):
        for name in ('tag', 'create', 'document', 'namespace'):
            assert el[name]().tag_name == name

    def test_svg_namespace_is_a_tag(self, cd):
        node = cd.svg_elements.namespace()
        assert node.tag_name == 'namespace'
        assert node.namespace is Namespace.SVG


class TestNesting:
    """Tests for building nested trees."""

    def test_scenario_div_span_text(self, el):
        """Test div#x containing a span containing the text 'hi'."""
        div = el.div({'id': 'x'}, lambda: el.span('hi'))
        assert div.get_attribute('id') == 'x'
        (span,) = div.child_nodes
        assert span.tag_name == 'span'
        (text,) = span.child_nodes
        assert isinstance(text, Text)
        assert text.data == 'hi'
        assert div.outer_html == '<div id="x"><span>hi</span></div>'

    def test_children_in_call_order(self, el):
        """Test siblings appear in call order under the nearest open call."""
        def body():
            el.li('one')
            el.li(lambda: el.b('two'))
            el.li('three')

        ul = el.ul(body)
        assert [li.text_content for li in ul.child_nodes] == ['one', 'two', 'three']
        assert ul.child_nodes[1].first_child.tag_name == 'b'

    def test_attached_before_children_built(self, el):
        """Test a node is in its parent before its own callback runs."""
        seen = []

        def inner_body():
            node = current()
            seen.append(node.parent_node.tag_name)

        el.section(lambda: el.article(inner_body))
        assert seen == ['section']

    def test_top_level_call_detached(self, el):
        div = el.div()
        assert div.parent_node is None
        assert current() is None

    def test_failure_keeps_partial_tree_and_restores(self, el):
        """Test a failing callback unwinds and restores the context."""
        built = {}

        def body():
            built['p'] = el.p('before')
            el.p({'onclick': 'not callable'})

        with pytest.raises(Exception, match='non-function'):
            built['div'] = el.div(body)
        assert current() is None
        assert built['p'].parent_node.tag_name == 'div'
        assert 'div' not in built


class TestSvgElements:
    """Tests for SvgElements."""

    def test_namespace(self):
        svg = SvgElements()
        icon = svg.svg({'viewBox': '0 0 10 10'}, lambda: svg.circle({'r': 5}))
        assert icon.namespace is Namespace.SVG
        assert icon.first_child.namespace is Namespace.SVG
        assert icon.outer_html == '<svg viewBox="0 0 10 10"><circle r="5"/></svg>'

    def test_mixed_namespaces(self, cd):
        """Test SVG builders nest inside HTML builders."""
        el, svg = cd.elements, cd.svg_elements
        div = el.div(lambda: svg.svg(lambda: svg.rect()))
        assert div.namespace is Namespace.XHTML
        assert div.first_child.namespace is Namespace.SVG
        assert div.first_child.first_child.tag_name == 'rect'
