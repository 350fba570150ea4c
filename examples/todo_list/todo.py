# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TodoList - Example of building and rebuilding a tree with Cdom.

A didactic example showing nested builders, event attributes and
replace_content() to redraw part of the tree.
"""

from __future__ import annotations

from genro_cdom import Cdom


class TodoList:
    """A todo list whose items are redrawn on every change.

    Example:
        >>> todo = TodoList()
        >>> todo.add('Buy milk')
        >>> todo.add('Write docs')
        >>> checkbox = todo.items_node.first_child.first_child
        >>> _ = checkbox.dispatch_event('change')  # toggles and redraws
        >>> 0 in todo.done
        True
    """

    def __init__(self, title: str = 'Todo'):
        """Build the static part of the page.

        Args:
            title: Heading shown above the list.
        """
        self.cdom = Cdom()
        self.items: list[str] = []
        self.done: set[int] = set()
        el = self.cdom.elements

        def body():
            el.h1(title)
            self.items_node = el.ul({'class': 'items'})
            el.p({'class': 'hint', 'hidden': True}, 'Nothing to do')

        self.root = el.section({'id': 'todo'}, body)

    def add(self, text: str) -> None:
        self.items.append(text)
        self.redraw()

    def toggle(self, index: int) -> None:
        self.done ^= {index}
        self.redraw()

    def redraw(self) -> None:
        """Rebuild the list items from scratch."""
        el = self.cdom.elements

        def items():
            for index, text in enumerate(self.items):
                def row(index=index, text=text):
                    el.input({
                        'type': 'checkbox',
                        'checked': index in self.done,
                        'onchange': lambda evt, index=index: self.toggle(index),
                    })
                    el.span(text)

                el.li({'data-index': index}, row)

        self.cdom.replace_content(self.items_node, items)


if __name__ == '__main__':
    todo = TodoList()
    todo.add('Buy milk')
    todo.add('Write docs')
    todo.items_node.child_nodes[0].first_child.dispatch_event('change')
    print(todo.root.outer_html)
