"""Node visitor and transformer for bbspan trees.

Rendering hosts walk the parsed tree with a visitor; ``transform``
rebuilds a frozen tree with selected nodes replaced.

Example, collecting link targets:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.targets: list[str] = []

        def visit_hyperlink(self, node: Hyperlink) -> None:
            self.targets.append(node.target)

    collector = LinkCollector()
    collector.visit(doc)

Example, dropping images:

    def drop_images(node: InlineNode) -> InlineNode | None:
        return None if isinstance(node, Image) else node

    new_doc = transform(doc, drop_images)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeVar

from bbspan.nodes import Container, Hyperlink, Image, InlineNode, LineBreak, Run


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children
    (container children, hyperlink display, image caption) are walked
    automatically after the ``visit_*`` call.

    """

    def visit(self, node: InlineNode) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: InlineNode) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_run(self, node: Run) -> T:
        return self.visit_default(node)

    def visit_line_break(self, node: LineBreak) -> T:
        return self.visit_default(node)

    def visit_hyperlink(self, node: Hyperlink) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_container(self, node: Container) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: InlineNode) -> T:
        match node:
            case Run():
                return self.visit_run(node)
            case LineBreak():
                return self.visit_line_break(node)
            case Hyperlink():
                return self.visit_hyperlink(node)
            case Image():
                return self.visit_image(node)
            case Container():
                return self.visit_container(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: InlineNode) -> None:
        match node:
            case Container():
                for child in node.children:
                    self.visit(child)
            case Hyperlink():
                for child in node.display:
                    self.visit(child)
            case Image() if node.caption is not None:
                self.visit(node.caption)


def transform(
    node: InlineNode,
    fn: Callable[[InlineNode], InlineNode | None],
) -> InlineNode | None:
    """Rebuild a tree bottom-up, applying fn to every node.

    Children are transformed first; fn then sees the node with its new
    children. Returning None from fn removes the node from its parent.
    A caption removed by fn leaves the image without a caption.

    Returns:
        The transformed node, or None if fn removed the root.
    """
    match node:
        case Container():
            node = dataclasses.replace(node, children=_transform_all(node.children, fn))
        case Hyperlink():
            node = dataclasses.replace(node, display=_transform_all(node.display, fn))
        case Image() if node.caption is not None:
            caption = transform(node.caption, fn)
            node = dataclasses.replace(node, caption=caption if isinstance(caption, Run) else None)
    return fn(node)


def _transform_all(
    nodes: tuple[InlineNode, ...],
    fn: Callable[[InlineNode], InlineNode | None],
) -> tuple[InlineNode, ...]:
    result: list[InlineNode] = []
    for child in nodes:
        new = transform(child, fn)
        if new is not None:
            result.append(new)
    return tuple(result)
