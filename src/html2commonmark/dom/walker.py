#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/dom/walker.py
"""Pre-order cursor over a BeautifulSoup tree.

The walker turns a DOM subtree into a flat sequence of entering and exiting
steps. Every node, including text and comments, is entered once and exited
once, so a consumer that has seen a node's entering step can drain the
walker until it observes the exiting step for the same node.

Examples
--------
    >>> from bs4 import BeautifulSoup
    >>> soup = BeautifulSoup("<p>hi</p>", "html.parser")
    >>> [(step.node.name or str(step.node), step.entering) for step in DomWalker(soup.p)]
    [('p', True), ('hi', True), ('hi', False), ('p', False)]

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Optional

from html2commonmark.dom.predicates import is_element
from html2commonmark.exceptions import CursorProtocolError

if TYPE_CHECKING:
    from bs4.element import PageElement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkingStep:
    """One traversal event: entering or leaving ``node``."""

    node: PageElement
    entering: bool


class DomWalker:
    """Tree cursor over a DOM subtree.

    Parameters
    ----------
    root : PageElement
        Root of the subtree to walk. The first step is the root's entering
        step; after the root's exiting step the walker is exhausted.

    """

    def __init__(self, root: PageElement) -> None:
        self.root = root
        self._node: Optional[PageElement] = root
        self._entering = True

    def __iter__(self) -> Iterator[WalkingStep]:
        step = self.next()
        while step is not None:
            yield step
            step = self.next()

    @property
    def current(self) -> Optional[WalkingStep]:
        """The step the next call to ``next()`` will return, without advancing."""
        if self._node is None:
            return None
        return WalkingStep(self._node, self._entering)

    def next(self) -> Optional[WalkingStep]:
        """Advance and return the next step, or ``None`` once the root has been left."""
        node = self._node
        entering = self._entering
        if node is None:
            return None

        if entering:
            if is_element(node) and node.contents:  # type: ignore[union-attr]
                self._node = node.contents[0]
            else:
                self._entering = False
        elif node is self.root:
            self._node = None
        elif node.next_sibling is not None:
            self._node = node.next_sibling
            self._entering = True
        else:
            self._node = node.parent

        return WalkingStep(node, entering)

    def resume_at(self, node: PageElement, entering: bool) -> None:
        """Reposition the cursor so that ``next()`` returns ``(node, entering)``.

        Raises
        ------
        CursorProtocolError
            If ``node`` is not part of the walked subtree

        """
        if not self._contains(node):
            raise CursorProtocolError(f"Cannot resume at a node outside the walked tree: {node!r:.80}", dom_node=node)
        self._node = node
        self._entering = entering

    def skip_subtree(self, node: PageElement) -> WalkingStep:
        """Skip the rest of ``node``'s subtree, consuming its exiting step.

        After this call, ``next()`` yields the step following ``node``'s
        exit: its next sibling, or its parent's exit.

        Returns
        -------
        WalkingStep
            The consumed exiting step of ``node``

        """
        self.resume_at(node, False)
        step = self.next()
        assert step is not None
        return step

    def _contains(self, node: PageElement) -> bool:
        if node is self.root:
            return True
        return any(parent is self.root for parent in node.parents)
