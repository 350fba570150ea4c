# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Host tree node classes.

The builder layer never touches node internals; it only uses the
operations a browser DOM would give it:

- create nodes (see :class:`~genro_cdom.dom.document.Document`)
- set/remove attributes, assign live properties, set style text
- register event listeners
- append children, clear children, set text content

Example:
    >>> div = Element('div')
    >>> div.set_attribute('id', 'main')
    >>> _ = div.append_child(Text('Hello'))
    >>> div.outer_html
    '<div id="main">Hello</div>'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, TypeVar

from ..exceptions import HierarchyError
from .namespace import Namespace

if TYPE_CHECKING:
    from .document import Document

N = TypeVar('N', bound='Node')

EventListener = Callable[['Event'], Any]


@dataclass
class Event:
    """A dispatched event, passed to every listener."""

    type: str
    target: Element | None = None


class Node:
    """Base class for every node in the host tree.

    Attributes:
        parent_node: The node this one is attached to, or None.
        child_nodes: Children in document order.
        owner_document: The Document that created this node, if any.
    """

    __slots__ = ('parent_node', 'child_nodes', 'owner_document')

    _accepts_children = True

    def __init__(self, owner_document: Document | None = None) -> None:
        self.parent_node: Node | None = None
        self.child_nodes: list[Node] = []
        self.owner_document = owner_document

    def __iter__(self) -> Iterator[Node]:
        return iter(self.child_nodes)

    @property
    def first_child(self) -> Node | None:
        return self.child_nodes[0] if self.child_nodes else None

    @property
    def last_child(self) -> Node | None:
        return self.child_nodes[-1] if self.child_nodes else None

    def contains(self, other: Node) -> bool:
        """True if ``other`` is this node or one of its descendants."""
        node: Node | None = other
        while node is not None:
            if node is self:
                return True
            node = node.parent_node
        return False

    def append_child(self, child: N) -> N:
        """Append ``child`` as the last child of this node.

        A child already attached elsewhere is moved. Appending a Fragment
        moves its children here and leaves the fragment empty.

        Raises:
            HierarchyError: If this node cannot have children, or if
                ``child`` is this node or one of its ancestors.
        """
        if not self._accepts_children:
            raise HierarchyError(f"{type(self).__name__} nodes cannot have children")

        if isinstance(child, Fragment):
            for grandchild in list(child.child_nodes):
                self.append_child(grandchild)
            return child

        if child.contains(self):
            raise HierarchyError(
                f"Appending {child!r} to {self!r} would create a cycle"
            )

        if child.parent_node is not None:
            child.parent_node.remove_child(child)
        child.parent_node = self
        self.child_nodes.append(child)
        return child

    def remove_child(self, child: N) -> N:
        """Detach ``child`` from this node.

        Raises:
            ValueError: If ``child`` is not a child of this node.
        """
        if child.parent_node is not self:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        self.child_nodes.remove(child)
        child.parent_node = None
        return child

    def clear(self) -> None:
        """Remove every child."""
        for child in self.child_nodes:
            child.parent_node = None
        self.child_nodes = []

    @property
    def text_content(self) -> str:
        """Concatenated data of all descendant text nodes."""
        return ''.join(child.text_content for child in self.child_nodes
                       if not isinstance(child, Comment))

    @text_content.setter
    def text_content(self, value: str) -> None:
        self.clear()
        if value:
            self.append_child(Text(value, owner_document=self.owner_document))

    @property
    def inner_html(self) -> str:
        """Serialized markup of the children."""
        from .serialize import serialize
        return ''.join(serialize(child) for child in self.child_nodes)


class Element(Node):
    """An element node with attributes, live properties and listeners.

    Attribute names of XHTML elements are case-insensitive and stored
    lowercase; SVG elements keep the given case (``viewBox``).

    Live properties (``value``, ``checked``) are kept apart from the
    attributes: assigning one never changes the markup.
    """

    __slots__ = ('tag_name', 'namespace', 'attributes', '_properties', '_listeners')

    def __init__(
        self,
        tag_name: str,
        namespace: Namespace = Namespace.XHTML,
        owner_document: Document | None = None,
    ) -> None:
        super().__init__(owner_document)
        self.tag_name = tag_name
        self.namespace = namespace
        self.attributes: dict[str, str] = {}
        self._properties: dict[str, Any] = {}
        self._listeners: dict[str, list[EventListener]] = {}

    def __repr__(self) -> str:
        return f"<Element {self.tag_name}>"

    @property
    def namespace_uri(self) -> str:
        return self.namespace.value

    @property
    def outer_html(self) -> str:
        from .serialize import serialize
        return serialize(self)

    # ==================== Attributes ====================

    def _attribute_name(self, name: str) -> str:
        if self.namespace is Namespace.XHTML:
            return name.lower()
        return name

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(self._attribute_name(name))

    def set_attribute(self, name: str, value: Any) -> None:
        self.attributes[self._attribute_name(name)] = str(value)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(self._attribute_name(name), None)

    def has_attribute(self, name: str) -> bool:
        return self._attribute_name(name) in self.attributes

    # ==================== Properties ====================

    def get_property(self, name: str) -> Any:
        """Read a live property.

        Unassigned ``value`` and ``checked`` fall back to their markup
        attribute, as form controls do before the user touches them.
        """
        if name in self._properties:
            return self._properties[name]
        if name == 'value':
            return self.get_attribute('value') or ''
        if name == 'checked':
            return self.has_attribute('checked')
        return None

    def set_property(self, name: str, value: Any) -> None:
        self._properties[name] = value

    @property
    def value(self) -> Any:
        return self.get_property('value')

    @value.setter
    def value(self, value: Any) -> None:
        self.set_property('value', value)

    @property
    def checked(self) -> bool:
        return bool(self.get_property('checked'))

    @checked.setter
    def checked(self, value: bool) -> None:
        self.set_property('checked', value)

    # ==================== Style ====================

    @property
    def style_text(self) -> str:
        """The whole inline style, as written in the ``style`` attribute."""
        return self.attributes.get('style', '')

    @style_text.setter
    def style_text(self, text: str) -> None:
        text = str(text).strip()
        if text:
            self.attributes['style'] = text
        else:
            self.attributes.pop('style', None)

    @property
    def style(self) -> dict[str, str]:
        """Inline style declarations as a dict (read-only view)."""
        declarations: dict[str, str] = {}
        for chunk in self.style_text.split(';'):
            prop, sep, value = chunk.partition(':')
            if sep and prop.strip():
                declarations[prop.strip().lower()] = value.strip()
        return declarations

    # ==================== Events ====================

    def add_event_listener(self, event_type: str, listener: EventListener) -> None:
        """Register ``listener`` for ``event_type``; duplicates are ignored."""
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_event_listener(self, event_type: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def get_event_listeners(self, event_type: str) -> list[EventListener]:
        return list(self._listeners.get(event_type, []))

    def dispatch_event(self, event: Event | str) -> Event:
        """Call this element's listeners for ``event`` in registration order.

        Args:
            event: An Event, or an event type name.

        Returns:
            The dispatched Event.
        """
        if isinstance(event, str):
            event = Event(event)
        event.target = self
        for listener in self.get_event_listeners(event.type):
            listener(event)
        return event


class CharacterData(Node):
    """Base for leaf nodes holding a string."""

    __slots__ = ('data',)

    _accepts_children = False

    def __init__(self, data: str = '', owner_document: Document | None = None) -> None:
        super().__init__(owner_document)
        self.data = data

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.data!r}>"

    @property
    def text_content(self) -> str:
        return self.data

    @text_content.setter
    def text_content(self, value: str) -> None:
        self.data = value


class Text(CharacterData):
    """A text node."""

    __slots__ = ()


class Comment(CharacterData):
    """A comment node."""

    __slots__ = ()


class Fragment(Node):
    """A detached list of nodes; appending it moves the nodes out of it."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"<Fragment ({len(self.child_nodes)})>"
