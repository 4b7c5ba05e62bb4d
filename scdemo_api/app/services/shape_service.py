"""
Shape hierarchy and its service.

Each shape is an immutable value exposing ``area()``.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


class Shape(ABC):
    """A plane figure with an area."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def area(self) -> float:
        raise NotImplementedError


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Triangle(Shape):
    base: float
    height: float

    def area(self) -> float:
        return self.base * self.height / 2


class ShapeService:
    """Provides the sample shapes shown by the API."""

    @classmethod
    def get_shapes(cls) -> List[Shape]:
        return [
            Circle(1.0),
            Rectangle(1.0, 2.0),
            Triangle(1.0, 2.0),
        ]
