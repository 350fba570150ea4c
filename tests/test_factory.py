# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for create_element()."""

import pytest

from genro_cdom import InvalidAttributeError, Namespace, create_element


class TestCreateElement:
    """Tests for the node factory."""

    def test_xhtml_element(self, doc):
        div = create_element(doc, 'div', Namespace.XHTML)
        assert div.tag_name == 'div'
        assert div.namespace is Namespace.XHTML
        assert div.parent_node is None

    def test_svg_element(self, doc):
        """Test SVG elements are created in the SVG namespace."""
        rect = create_element(doc, 'rect', Namespace.SVG, {'viewBox': '0 0 2 2'})
        assert rect.namespace is Namespace.SVG
        assert rect.get_attribute('viewBox') == '0 0 2 2'

    def test_tag_name_verbatim(self, doc):
        node = create_element(doc, 'foreignObject', Namespace.SVG)
        assert node.tag_name == 'foreignObject'

    def test_event_listener(self, doc):
        """Test on* names register listeners under the lowercased event."""
        def handler(evt):
            pass

        button = create_element(doc, 'button', Namespace.XHTML, {'onClick': handler})
        assert button.get_event_listeners('click') == [handler]
        assert button.attributes == {}

    def test_event_non_callable_raises(self, doc):
        """Test an on* name with a non-callable value raises."""
        with pytest.raises(InvalidAttributeError, match="non-function for event name 'onclick'"):
            create_element(doc, 'button', Namespace.XHTML, {'onclick': 'alert(1)'})

    def test_callable_for_attribute_raises(self, doc):
        """Test a callable for a non-event name raises."""
        with pytest.raises(InvalidAttributeError, match="function for non-event attribute name 'title'"):
            create_element(doc, 'div', Namespace.XHTML, {'title': lambda: 'x'})

    def test_none_becomes_empty_attribute(self, doc):
        """Test None is written as the empty string."""
        div = create_element(doc, 'div', Namespace.XHTML, {'title': None})
        assert div.get_attribute('title') == ''

    def test_none_value_property(self, doc):
        field = create_element(doc, 'input', Namespace.XHTML, {'value': None})
        assert field.value == ''

    def test_attributes_applied_in_order(self, doc):
        """Test later entries win when they reach the same attribute."""
        div = create_element(doc, 'div', Namespace.XHTML, {'hidden': True, 'HIDDEN': False})
        assert not div.has_attribute('hidden')

    def test_drop_false_attributes(self, doc):
        div = create_element(
            doc, 'div', Namespace.XHTML, {'aria-hidden': False},
            drop_false_attributes=True,
        )
        assert not div.has_attribute('aria-hidden')

    def test_false_attribute_kept_by_default(self, doc):
        div = create_element(doc, 'div', Namespace.XHTML, {'aria-hidden': False})
        assert div.get_attribute('aria-hidden') == 'false'
