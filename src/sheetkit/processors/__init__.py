"""Table shaping, transposition and serialization for sheetkit."""

from sheetkit.processors.serializers import CSVSerializer, JSONSerializer, LiteralSerializer
from sheetkit.processors.shape_builder import ShapeBuilder
from sheetkit.processors.transposer import transpose

__all__ = [
    "ShapeBuilder",
    "transpose",
    "JSONSerializer",
    "LiteralSerializer",
    "CSVSerializer",
]
