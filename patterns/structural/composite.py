"""
Composite pattern demo.

Files (leaves) and folders (composites) share the FileSystemNode
interface, so a folder renders its children without knowing their kind.
"""

from abc import ABC, abstractmethod
from typing import List


class FileSystemNode(ABC):
    @abstractmethod
    def render(self, indent: str = "") -> List[str]:
        """
        Lines for this node and everything below it.

        Args:
            indent: Prefix for this node's line; children add two spaces
        """
        pass

    def print(self, indent: str = "") -> None:
        for line in self.render(indent):
            print(line)


class FileLeaf(FileSystemNode):
    def __init__(self, name: str):
        self.name = name

    def render(self, indent: str = "") -> List[str]:
        return [f"{indent}{self.name}"]


class Folder(FileSystemNode):
    def __init__(self, name: str):
        self.name = name
        self.children: List[FileSystemNode] = []

    def add(self, node: FileSystemNode) -> "Folder":
        """Append a child and return self for chaining."""
        self.children.append(node)
        return self

    def render(self, indent: str = "") -> List[str]:
        lines = [f"{indent}{self.name}/"]
        for child in self.children:
            lines.extend(child.render(indent + "  "))
        return lines


def main():
    root = Folder("root")
    root.add(FileLeaf("readme.txt"))
    root.add(FileLeaf("notes.md"))

    images = Folder("images")
    images.add(FileLeaf("logo.png"))
    images.add(FileLeaf("banner.jpg"))
    root.add(images)

    root.print()


if __name__ == '__main__':
    main()
