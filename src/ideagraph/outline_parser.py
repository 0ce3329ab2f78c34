"""Parse indentation-structured text into an outline tree."""

from __future__ import annotations

from typing import Iterator

from ideagraph.config import IDEAGRAPH_ROOT_NAME
from ideagraph.schemas import TreeNode


def parse_outline(
    text: str,
    *,
    root_name: str = IDEAGRAPH_ROOT_NAME,
    tab_size: int | None = None,
) -> TreeNode:
    """Build a tree from indented lines of text.

    Each non-blank line becomes a node. A line becomes the child of the
    nearest preceding line with strictly smaller indentation; lines with no
    such ancestor hang off a synthetic root. The first line is always
    top-level, whatever its indentation.

    Args:
        text: Raw text with ``\\n``-delimited lines.
        root_name: Name of the synthetic root node.
        tab_size: If given, tabs are expanded to tab stops of this width
            before measuring indentation. By default every leading whitespace
            character, tab included, counts as one unit.

    Returns:
        The root node. Empty or blank-only input yields a root with no
        children.
    """
    if tab_size is not None and tab_size < 1:
        raise ValueError("tab_size must be a positive integer")

    root = TreeNode(name=root_name)
    stack: list[tuple[TreeNode, int]] = []

    for line in iter_content_lines(text):
        indent = measure_indent(line, tab_size=tab_size)
        node = TreeNode(name=line.strip(), indent=indent)

        while stack and stack[-1][1] >= indent:
            stack.pop()

        if stack:
            stack[-1][0].children.append(node)
        else:
            root.children.append(node)

        stack.append((node, indent))

    return root


def iter_content_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text`` that contain non-whitespace characters."""
    for line in text.split("\n"):
        if line.strip():
            yield line


def measure_indent(line: str, *, tab_size: int | None = None) -> int:
    """Return the index of the first non-whitespace character of ``line``."""
    if tab_size is not None:
        line = line.expandtabs(tab_size)
    return len(line) - len(line.lstrip())

