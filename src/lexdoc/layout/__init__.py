"""Layout engine — normalisation, wrapping, pagination and both renderers."""

from lexdoc.layout.fixed import FixedLayoutRenderer
from lexdoc.layout.flow import FlowRenderer
from lexdoc.layout.normalizer import normalize
from lexdoc.layout.paginator import Paginator
from lexdoc.layout.wrapper import wrap, wrap_measured

__all__ = [
    "FixedLayoutRenderer",
    "FlowRenderer",
    "Paginator",
    "normalize",
    "wrap",
    "wrap_measured",
]
