"""Extract plain text from bbspan node trees.

Example:
    >>> from bbspan import parse, extract_text
    >>> extract_text(parse("[b]Hello[/b]\\nWorld"))
    'Hello\\nWorld'
"""

from bbspan.nodes import Container, Hyperlink, Image, InlineNode, LineBreak, Run


def extract_text(node: InlineNode) -> str:
    """Extract plain text from any node, ignoring style.

    Runs contribute their text, LineBreak contributes a newline, a
    Hyperlink its display text and an Image its caption.

    Args:
        node: Any inline node (typically the parse root).

    Returns:
        Concatenated plain text from the node and its descendants.
    """
    parts: list[str] = []
    _collect(node, parts)
    return "".join(parts)


def _collect(node: InlineNode, parts: list[str]) -> None:
    match node:
        case Run():
            parts.append(node.text)
        case LineBreak():
            parts.append("\n")
        case Hyperlink():
            for child in node.display:
                _collect(child, parts)
        case Image():
            if node.caption is not None:
                parts.append(node.caption.text)
        case Container():
            for child in node.children:
                _collect(child, parts)
