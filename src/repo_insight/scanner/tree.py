"""
Renders a project map as an ASCII file tree for the console.
"""

from typing import Iterator

from .scanner import ProjectMap


def _nest(structure: ProjectMap) -> dict:
    """Turn {"a/b": {"f.py": {...}}} into nested dicts; files map to None."""
    root: dict = {}
    for rel_dir, files in structure.items():
        node = root
        for name in (rel_dir.split("/") if rel_dir else []):
            child = node.get(name)
            if child is None:
                child = node[name] = {}
            node = child
        for file_name in files:
            node.setdefault(file_name, None)
    return root


def _tree_lines(node: dict, indent: str) -> Iterator[str]:
    names = sorted(node)
    for position, name in enumerate(names, 1):
        children = node[name]
        is_final = position == len(names)
        connector, child_indent = ("└── ", "    ") if is_final else ("├── ", "│   ")
        yield f"{indent}{connector}{name}{'' if children is None else '/'}"
        if children is not None:
            yield from _tree_lines(children, indent + child_indent)


def render_tree(structure: ProjectMap) -> str:
    """Directories end with '/'; an empty map renders as '(no files)'."""
    return "\n".join(_tree_lines(_nest(structure), "")) or "(no files)"
