"""Mind map pipeline: text -> outline tree -> display outputs."""

from __future__ import annotations

import logging
from pathlib import Path

from ideagraph.file_utils import read_text_async
from ideagraph.outline_parser import parse_outline
from ideagraph.schemas import MindMapResult
from ideagraph.tree_format import count_nodes, render_outline, summarize_tree

logger = logging.getLogger(__name__)


def build_mind_map(
    text: str,
    *,
    source: str | None = None,
    tab_size: int | None = None,
) -> MindMapResult:
    """Parse outline text and package the tree with its summary and outline.

    Args:
        text: Decoded file contents.
        source: Optional label for the input (usually a file name).
        tab_size: Tab stop width used when measuring indentation.

    Returns:
        The mind map result.
    """
    tree = parse_outline(text, tab_size=tab_size)
    logger.debug(
        "Parsed outline from %s",
        source or "text",
        extra={"source": source, "nodes": count_nodes(tree)},
    )
    return MindMapResult(
        tree=tree,
        summary=summarize_tree(tree, source=source),
        outline=render_outline(tree),
    )


async def load_mind_map(path: Path, *, tab_size: int | None = None) -> MindMapResult:
    """Read a text file and build its mind map.

    Raises:
        FileReadError: If the file cannot be read. The parser is not invoked.
    """
    text = await read_text_async(path)
    return build_mind_map(text, source=path.name, tab_size=tab_size)
