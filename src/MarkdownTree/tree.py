"""Output tree handed to the rendering framework, and the builder that emits it.

Every node and every attribute carries a sequence key: the value of the
:class:`Sequencer` at the moment it was emitted. Keys start at 0 for each
render pass and grow by one per emission, so a consumer can line up nodes
between two passes when diffing.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, ContextManager, Iterator, List, Protocol, Union

from .markup import WidgetKind


class TreeBuilderError(RuntimeError):
    """Raised when open/close calls on a :class:`TreeBuilder` do not pair up."""


@dataclass
class Attribute:
    name: str
    value: str
    sequence: int

    def to_dict(self, keys: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "value": self.value}
        if keys:
            data["sequence"] = self.sequence
        return data


@dataclass
class Element:
    tag: str
    sequence: int
    attributes: List[Attribute] = field(default_factory=list)
    children: List["OutputNode"] = field(default_factory=list)

    def attribute(self, name: str) -> str | None:
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return None

    def to_dict(self, keys: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": "element",
            "tag": self.tag,
            "attributes": [attr.to_dict(keys) for attr in self.attributes],
            "children": [child.to_dict(keys) for child in self.children],
        }
        if keys:
            data["sequence"] = self.sequence
        return data


@dataclass
class Widget:
    kind: WidgetKind
    sequence: int
    props: List[Attribute] = field(default_factory=list)
    children: List["OutputNode"] = field(default_factory=list)

    def prop(self, name: str) -> str | None:
        for attr in self.props:
            if attr.name == name:
                return attr.value
        return None

    def to_dict(self, keys: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": "widget",
            "kind": self.kind.value,
            "props": [attr.to_dict(keys) for attr in self.props],
            "children": [child.to_dict(keys) for child in self.children],
        }
        if keys:
            data["sequence"] = self.sequence
        return data


@dataclass
class Text:
    content: str
    sequence: int

    def to_dict(self, keys: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "text", "content": self.content}
        if keys:
            data["sequence"] = self.sequence
        return data


@dataclass
class RawMarkup:
    """Markup passed through verbatim. Never escaped or sanitized."""

    content: str
    sequence: int

    def to_dict(self, keys: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "raw", "content": self.content}
        if keys:
            data["sequence"] = self.sequence
        return data


OutputNode = Union[Element, Widget, Text, RawMarkup]


class Sequencer:
    """Monotonic counter owned by one render pass."""

    def __init__(self) -> None:
        self.value = 0

    def next(self) -> int:
        current = self.value
        self.value += 1
        return current

    def reset(self) -> None:
        self.value = 0


class OutputSink(Protocol):
    """Imperative tree-builder protocol the renderer emits into."""

    def open_element(self, tag: str) -> None: ...

    def open_widget(self, kind: WidgetKind) -> None: ...

    def close_node(self) -> None: ...

    def add_attribute(self, name: str, value: str) -> None: ...

    def add_text(self, content: str) -> None: ...

    def add_raw_markup(self, content: str) -> None: ...

    def element(self, tag: str) -> ContextManager[None]: ...

    def widget(self, kind: WidgetKind) -> ContextManager[None]: ...


class TreeBuilder:
    """Builds a tree of output nodes, stamping each emission with a sequence key.

    Exactly one root node may be opened. Attributes attach to the innermost
    open node: element attributes for an :class:`Element`, properties for a
    :class:`Widget`.
    """

    def __init__(self, sequencer: Sequencer | None = None) -> None:
        self.sequencer = sequencer or Sequencer()
        self.root: Element | Widget | None = None
        self._stack: list[Element | Widget] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def open_element(self, tag: str) -> None:
        self._open(Element(tag=tag, sequence=self.sequencer.next()))

    def open_widget(self, kind: WidgetKind) -> None:
        self._open(Widget(kind=kind, sequence=self.sequencer.next()))

    def close_node(self) -> None:
        if not self._stack:
            raise TreeBuilderError("close_node() called with no open node")
        self._stack.pop()

    def add_attribute(self, name: str, value: str) -> None:
        node = self._current("add_attribute")
        attr = Attribute(name=name, value=value, sequence=self.sequencer.next())
        if isinstance(node, Widget):
            node.props.append(attr)
        else:
            node.attributes.append(attr)

    def add_text(self, content: str) -> None:
        node = self._current("add_text")
        node.children.append(Text(content=content, sequence=self.sequencer.next()))

    def add_raw_markup(self, content: str) -> None:
        node = self._current("add_raw_markup")
        node.children.append(RawMarkup(content=content, sequence=self.sequencer.next()))

    @contextmanager
    def element(self, tag: str) -> Iterator[None]:
        self.open_element(tag)
        try:
            yield
        finally:
            self.close_node()

    @contextmanager
    def widget(self, kind: WidgetKind) -> Iterator[None]:
        self.open_widget(kind)
        try:
            yield
        finally:
            self.close_node()

    def _open(self, node: Element | Widget) -> None:
        if self._stack:
            self._stack[-1].children.append(node)
        elif self.root is None:
            self.root = node
        else:
            raise TreeBuilderError("tree already has a root node")
        self._stack.append(node)

    def _current(self, operation: str) -> Element | Widget:
        if not self._stack:
            raise TreeBuilderError(f"{operation} requires an open node")
        return self._stack[-1]
