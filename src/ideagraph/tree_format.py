"""Format outline trees for renderers and plain-text display.

Walks use an explicit stack rather than recursion.
"""

from __future__ import annotations

from typing import Any, Iterator

from ideagraph.schemas import TreeNode


def to_renderer_dict(node: TreeNode) -> dict[str, Any]:
    """Convert a tree into the ``{name, children?}`` shape a tree renderer expects.

    ``children`` is omitted for leaves and ``indent`` is dropped.
    """
    root_data: dict[str, Any] = {"name": node.name}
    stack: list[tuple[TreeNode, dict[str, Any]]] = [(node, root_data)]

    while stack:
        current, data = stack.pop()
        if not current.children:
            continue
        child_data = [{"name": child.name} for child in current.children]
        data["children"] = child_data
        stack.extend(zip(current.children, child_data))

    return root_data


def render_outline(node: TreeNode, indent_width: int = 4) -> str:
    """Render the tree below ``node`` as indented text, one line per node."""
    lines: list[str] = []
    stack: list[tuple[TreeNode, int]] = [(child, 0) for child in reversed(node.children)]

    while stack:
        current, depth = stack.pop()
        lines.append(" " * (depth * indent_width) + current.name)
        stack.extend((child, depth + 1) for child in reversed(current.children))

    return "\n".join(lines)


def iter_nodes(node: TreeNode) -> Iterator[TreeNode]:
    """Yield ``node`` and its descendants in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def count_nodes(node: TreeNode) -> int:
    """Count nodes below ``node``, excluding ``node`` itself."""
    return sum(1 for _ in iter_nodes(node)) - 1


def tree_depth(node: TreeNode) -> int:
    """Return the number of levels below ``node``."""
    deepest = 0
    stack: list[tuple[TreeNode, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in current.children)
    return deepest


def summarize_tree(node: TreeNode, source: str | None = None) -> str:
    """Create a short summary of an outline tree."""
    summary_lines = []
    if source:
        summary_lines.append(f"Source: {source}")
    summary_lines.append(f"Nodes: {count_nodes(node)}")
    summary_lines.append(f"Top-level: {len(node.children)}")
    summary_lines.append(f"Depth: {tree_depth(node)}")
    return "\n".join(summary_lines)
