# mdalerts/markdown/tree.py
"""
Document tree capability used by the alert postprocessor.

The alert logic never talks to BeautifulSoup directly. It goes through a
``DocumentTree``, which exposes the handful of operations it needs:
finding nodes, reading/writing inner markup, reading/writing classes and
inserting new child elements. ``SoupTree`` is the implementation backed by
a parsed BeautifulSoup document.
"""

from __future__ import annotations

import abc
from typing import Any, Dict, Iterable, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString


class DocumentTree(abc.ABC):
    """Mutable view over a document made of block elements."""

    @abc.abstractmethod
    def find_all(self, name: str) -> List[Any]:
        """Return every element called ``name`` in depth-first pre-order."""

    @abc.abstractmethod
    def first_paragraph(self, node: Any) -> Optional[Any]:
        """Return the leading <p> child of ``node``, or None."""

    @abc.abstractmethod
    def get_content(self, node: Any) -> str:
        """Return the inner markup of ``node``."""

    @abc.abstractmethod
    def set_content(self, node: Any, markup: str) -> None:
        """Replace the inner markup of ``node``."""

    @abc.abstractmethod
    def get_classes(self, node: Any) -> List[str]:
        pass

    @abc.abstractmethod
    def set_classes(self, node: Any, classes: Iterable[str]) -> None:
        pass

    @abc.abstractmethod
    def create_element(self, name: str, attrs: Optional[Dict[str, str]] = None) -> Any:
        pass

    @abc.abstractmethod
    def append_child(self, parent: Any, child: Any) -> None:
        pass

    @abc.abstractmethod
    def prepend_child(self, parent: Any, child: Any) -> None:
        pass

    def remove_text(self, node: Any, text: str) -> None:
        """Remove the first occurrence of ``text`` from the inner markup of ``node``."""
        self.set_content(node, self.get_content(node).replace(text, "", 1))


class SoupTree(DocumentTree):
    """DocumentTree backed by a BeautifulSoup document."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "SoupTree":
        return cls(BeautifulSoup(html, "html.parser"))

    def find_all(self, name: str) -> List[Tag]:
        return list(self.soup.find_all(name))

    def first_paragraph(self, node: Tag) -> Optional[Tag]:
        for child in node.children:
            # Skip whitespace-only text nodes
            if isinstance(child, NavigableString) and not child.strip():
                continue

            if isinstance(child, Tag) and child.name == "p":
                return child

            # Anything else means the blockquote does not open with a paragraph
            break

        return None

    def get_content(self, node: Tag) -> str:
        return node.decode_contents()

    def set_content(self, node: Tag, markup: str) -> None:
        fragment = BeautifulSoup(markup, "html.parser")
        node.clear()
        for child in list(fragment.contents):
            node.append(child.extract())

    def remove_text(self, node: Tag, text: str) -> None:
        """
        Remove the first occurrence of ``text`` from the visible text of ``node``.

        Comments, CDATA and other non-text strings are skipped, as are
        attribute values, so ``<a title="[!NOTE]">`` keeps its title when a
        text node holds the same token. Only when no single text node
        contains ``text`` is the inner markup rewritten instead.
        """
        # Edit the text node in place so sibling elements keep their identity
        for string in node.find_all(string=True):
            if isinstance(string, PreformattedString):
                continue
            if text in string:
                string.replace_with(string.replace(text, "", 1))
                return

        # Token split across several text nodes
        super().remove_text(node, text)

    def get_classes(self, node: Tag) -> List[str]:
        existing_classes = node.get("class", [])
        if isinstance(existing_classes, str):
            existing_classes = existing_classes.split()
        return list(existing_classes)

    def set_classes(self, node: Tag, classes: Iterable[str]) -> None:
        node["class"] = list(classes)

    def create_element(self, name: str, attrs: Optional[Dict[str, str]] = None) -> Tag:
        tag = self.soup.new_tag(name)
        for key, value in (attrs or {}).items():
            tag[key] = value
        return tag

    def append_child(self, parent: Tag, child: Tag) -> None:
        parent.append(child)

    def prepend_child(self, parent: Tag, child: Tag) -> None:
        parent.insert(0, child)
