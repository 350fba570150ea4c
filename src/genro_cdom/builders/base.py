# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementsBase - dynamic tag builders for one namespace.

Any attribute looked up on an elements object is a tag name; the result
is a builder that creates that element, attaches it to the ambient
parent and fills it::

    elements.div()                          # empty <div>
    elements.div({'id': 'main'})            # attributes only
    elements.div('Hello')                   # text content only
    elements.div({'id': 'main'}, 'Hello')   # both
    elements.div({'id': 'main'}, body)      # body() builds the children

Keyword arguments are extra attributes; one trailing underscore is
dropped so Python keywords can be used (``class_='box'``, ``for_='x'``).

Names that are not Python identifiers are available by item lookup
(``elements['my-widget']``) or :func:`tag_builder`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping

from ..content import Inner, resolve_inner
from ..context import attach_if_parent
from ..dom import Document, Namespace
from ..exceptions import InvalidCallError
from ..factory import create_element

if TYPE_CHECKING:
    from ..dom import Element

TagBuilder = Callable[..., 'Element']


def is_attribute_map(arg: Any) -> bool:
    """True if ``arg`` is in the attribute position of a builder call."""
    return arg is None or isinstance(arg, Mapping)


def split_arguments(tag: str, args: tuple[Any, ...]) -> tuple[Mapping[str, Any] | None, Inner]:
    """Infer (attributes, inner) from positional builder arguments.

    Raises:
        InvalidCallError: If the shape matches none of the accepted forms.
    """
    if not args:
        return None, None
    if len(args) == 1:
        arg = args[0]
        if is_attribute_map(arg):
            return arg, None
        return None, arg
    if len(args) == 2 and is_attribute_map(args[0]):
        return args[0], args[1]
    shape = ', '.join(type(arg).__name__ for arg in args)
    raise InvalidCallError(f"Unexpected argument shape for <{tag}>: ({shape})")


def merge_attributes(attrs: Mapping[str, Any] | None, extra: dict[str, Any]) -> Mapping[str, Any] | None:
    """Merge keyword attributes after the positional attribute map."""
    if not extra:
        return attrs
    merged = dict(attrs or {})
    for name, value in extra.items():
        if len(name) > 1 and name.endswith('_'):
            name = name[:-1]
        merged[name] = value
    return merged


def tag_builder(elements: ElementsBase, name: str) -> TagBuilder:
    """Return the builder for tag ``name`` (lowercased); every name is accepted."""
    return elements._make_tag_method(name.lower())


def create(
    elements: ElementsBase,
    tag_name: str,
    attrs: Mapping[str, Any] | None = None,
    inner: Inner = None,
) -> Element:
    """Build ``tag_name`` with explicit attributes and inner content.

    Same as calling a tag builder, without argument-shape inference.
    The tag name is used as given, so mixed-case SVG names such as
    ``foreignObject`` keep their case.
    """
    return elements._build(tag_name, attrs, inner)


class ElementsBase:
    """Builder factory for the tags of one namespace.

    Every public attribute is a tag builder: ``elements.document``,
    ``elements.tag`` and ``elements.create`` build ``<document>``,
    ``<tag>`` and ``<create>``. The object's own state lives under
    underscore names; use :func:`tag_builder` and :func:`create` for
    explicit lookups. Subclasses set :attr:`_namespace`.

    Args:
        document: Host document used to create nodes.
        drop_false_attributes: Remove generic attributes set to False
            instead of writing ``"false"``.
    """

    _namespace: Namespace = Namespace.XHTML

    def __init__(
        self,
        document: Document | None = None,
        *,
        drop_false_attributes: bool = False,
    ) -> None:
        self._document = document if document is not None else Document()
        self._drop_false_attributes = drop_false_attributes

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._namespace.name})"

    def __getattr__(self, name: str) -> TagBuilder:
        """Builder for the tag ``name`` (lowercased, trailing ``_`` dropped)."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        if name.endswith('_'):
            name = name[:-1]
        return tag_builder(self, name)

    def __getitem__(self, name: str) -> TagBuilder:
        return tag_builder(self, name)

    def _build(self, tag: str, attrs: Mapping[str, Any] | None, inner: Inner) -> Element:
        # create, attach, then fill: the node is in the tree before its children
        element = create_element(
            self._document, tag, self._namespace, attrs,
            drop_false_attributes=self._drop_false_attributes,
        )
        attach_if_parent(element)
        return resolve_inner(element, inner)

    def _make_tag_method(self, tag: str) -> TagBuilder:
        """Create the builder function for a specific tag."""

        def tag_method(*args: Any, **attr: Any) -> Element:
            attrs, inner = split_arguments(tag, args)
            return self._build(tag, merge_attributes(attrs, attr), inner)

        tag_method.__name__ = tag
        tag_method.__qualname__ = f"{type(self).__name__}.{tag}"
        return tag_method
