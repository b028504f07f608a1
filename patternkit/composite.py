"""Composite: pictures made of shapes and other pictures, drawn as one."""

from abc import ABC, abstractmethod


class Graphic(ABC):
    """A named drawable element."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def draw(self) -> None:
        """Draw this element."""

    def add(self, child: "Graphic") -> None:
        """Add a child element; simple shapes have no children and ignore it."""


class Picture(Graphic):
    """A graphic made of other graphics, drawn in the order they were added."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: list[Graphic] = []

    def draw(self) -> None:
        for child in self._children:
            child.draw()
        print(f"Draw a picture:{self.name} finished")

    def add(self, child: Graphic) -> None:
        self._children.append(child)


class Rectangle(Graphic):
    def draw(self) -> None:
        print(f"Draw a rectangle:{self.name}")


class Triangle(Graphic):
    def draw(self) -> None:
        print(f"Draw a triangle:{self.name}")


_SCENE = (
    (Triangle, "tri1"),
    (Rectangle, "rec1"),
    (Rectangle, "rec2"),
    (Triangle, "tri2"),
    (Rectangle, "rec3"),
)


def main(argv: list[str] | None = None) -> int:
    """Draw a picture made of five shapes; takes no arguments."""
    picture = Picture("pic1")
    for shape, name in _SCENE:
        picture.add(shape(name))
    picture.draw()
    return 0