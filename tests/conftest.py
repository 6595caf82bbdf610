"""Shared fixtures for mdalerts tests."""

import pytest

from mdalerts.markdown.tree import DocumentTree


ALERTS_HTML = """<!DOCTYPE html>
<section>
    <blockquote><p> [!IMPORTANT]
    text </p></blockquote>
</section>
<section>
    <blockquote><p> [!NOTE] text </p></blockquote>
</section>
<section>
    <blockquote><p> [!TIP] text </p></blockquote>
</section>
<section>
    <blockquote><p> [!WARNING] text </p></blockquote>
</section>
<section>
    <blockquote><p> [!CAUTION] text </p></blockquote>
</section>
<section>
    <blockquote class="split-lines"><p> [!NOTE]
     [!TIP] </p></blockquote>
</section>
<section>
    <blockquote class="same-line"><p> [!TIP] [!NOTE] </p></blockquote>
</section>
<section>
    <p>
        <blockquote class="nested"><p> [!TIP] </p></blockquote>
    </p>
</section>
"""


class FakeElement:
    """Minimal element for exercising the alert logic without a parser."""

    def __init__(self, name, content="", classes=None, children=None, attrs=None):
        self.name = name
        self.content = content
        self.classes = list(classes or [])
        self.children = list(children or [])
        self.attrs = dict(attrs or {})

    def __repr__(self):
        return f"FakeElement({self.name!r}, {self.content!r})"


class FakeTree(DocumentTree):
    def __init__(self, root):
        self.root = root

    def find_all(self, name):
        found = []

        def visit(node):
            if node.name == name:
                found.append(node)
            for child in node.children:
                visit(child)

        visit(self.root)
        return found

    def first_paragraph(self, node):
        if node.children and node.children[0].name == "p":
            return node.children[0]
        return None

    def get_content(self, node):
        return node.content

    def set_content(self, node, markup):
        node.content = markup

    def get_classes(self, node):
        return list(node.classes)

    def set_classes(self, node, classes):
        node.classes = list(classes)

    def create_element(self, name, attrs=None):
        return FakeElement(name, attrs=attrs)

    def append_child(self, parent, child):
        parent.children.append(child)

    def prepend_child(self, parent, child):
        parent.children.insert(0, child)


def make_blockquote(content, classes=None):
    return FakeElement("blockquote", classes=classes, children=[FakeElement("p", content)])


@pytest.fixture
def alerts_html():
    return ALERTS_HTML


@pytest.fixture
def fake_tree():
    """Build a FakeTree whose root holds the given blockquotes."""

    def build(*blockquotes):
        return FakeTree(FakeElement("body", children=list(blockquotes)))

    return build


@pytest.fixture
def blockquote():
    """Factory for a fake blockquote holding one paragraph."""
    return make_blockquote


@pytest.fixture
def fake_element():
    return FakeElement
