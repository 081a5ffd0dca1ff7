"""A suffix tree built with Ukkonen's algorithm."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass, field

TERMINATOR = "#"


@dataclass(eq=False)
class _Node:
    children: dict[str, _Edge] = field(default_factory=dict)
    link: _Node | None = None


@dataclass(eq=False)
class _Edge:
    begin: int
    end: int | None  # None: a leaf edge that runs to the end of the text
    node: _Node


class SuffixTree:
    """Suffix tree of ``text``; a ``#`` is appended as the terminator."""

    def __init__(self, text: str) -> None:
        if TERMINATOR in text:
            raise ValueError(f"text must not contain {TERMINATOR!r}")
        self._text = text + TERMINATOR
        self._root: _Node | None = None
        self._last = -1

    def _edge_end(self, edge: _Edge) -> int:
        return self._last if edge.end is None else edge.end

    def construct(self) -> None:
        """Build the tree; further calls do nothing."""
        if self._root is not None:
            return
        text = self._text
        root = _Node()
        active_node, active_edge, active_length = root, 0, 0
        remainder = 0
        for pos, ch in enumerate(text):
            self._last = pos
            remainder += 1
            last_new: _Node | None = None
            while remainder:
                if active_length == 0:
                    active_edge = pos
                edge = active_node.children.get(text[active_edge])
                if edge is None:
                    active_node.children[text[active_edge]] = _Edge(pos, None, _Node())
                    if last_new is not None:
                        last_new.link = active_node
                        last_new = None
                else:
                    length = self._edge_end(edge) - edge.begin + 1
                    if active_length >= length:
                        active_edge += length
                        active_length -= length
                        active_node = edge.node
                        continue
                    if text[edge.begin + active_length] == ch:
                        if last_new is not None and active_node is not root:
                            last_new.link = active_node
                            last_new = None
                        active_length += 1
                        break
                    split = _Node()
                    active_node.children[text[active_edge]] = _Edge(
                        edge.begin, edge.begin + active_length - 1, split
                    )
                    split.children[ch] = _Edge(pos, None, _Node())
                    edge.begin += active_length
                    split.children[text[edge.begin]] = edge
                    if last_new is not None:
                        last_new.link = split
                    last_new = split
                remainder -= 1
                if active_node is root and active_length > 0:
                    active_length -= 1
                    active_edge = pos - remainder + 1
                elif active_node is not root:
                    active_node = active_node.link or root
        self._root = root

    def _walk(self, sub: str) -> Iterator[int]:
        """Yield the text index of each character of ``sub`` matched from the root."""
        self.construct()
        node = self._root
        edge: _Edge | None = None
        offset = 0
        for ch in sub:
            if ch == TERMINATOR:
                return
            if edge is None:
                edge = node.children.get(ch)
                if edge is None:
                    return
                offset = 0
            index = edge.begin + offset
            if self._text[index] != ch:
                return
            yield index
            offset += 1
            if edge.begin + offset > self._edge_end(edge):
                node, edge = edge.node, None

    def search(self, sub: str) -> int:
        """Return a position where ``sub`` occurs in the text, or -1.

        An empty ``sub`` gives -1.
        """
        matched = 0
        last = -1
        for index in self._walk(sub):
            matched += 1
            last = index
        if sub and matched == len(sub):
            return last - len(sub) + 1
        return -1

    def prefix_match_length(self, sub: str) -> int:
        """Length of the longest prefix of ``sub`` that occurs in the text."""
        return sum(1 for _ in self._walk(sub))

    def format_tree(self) -> str:
        """Render the edges, one per line, indented by depth."""
        self.construct()
        lines: list[str] = []

        def visit(node: _Node, level: int) -> None:
            for key in sorted(node.children):
                edge = node.children[key]
                end = self._edge_end(edge)
                label = self._text[edge.begin:end + 1]
                lines.append("\t" * level + f"--> ({edge.begin}, {end})  {label}")
                visit(edge.node, level + 1)

        visit(self._root, 1)
        return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Build a suffix tree, print it and run a few searches."""
    parser = argparse.ArgumentParser(description="Suffix tree search demo.")
    parser.add_argument("--text", default="mississippi")
    parser.add_argument(
        "queries", nargs="*",
        default=["ANA", "NA", "NAN", "B", "BB", "ANN", "b"],
    )
    args = parser.parse_args(argv)
    tree = SuffixTree(args.text)
    tree.construct()
    print(tree.format_tree(), end="")
    for query in args.queries:
        print(f"Search {query}:{tree.search(query)}")
    return 0