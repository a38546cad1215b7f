"""Transform pipeline: axis, unit, projection and datum steps."""

from pykoord.pipeline.datum_shift import datum_transform
from pykoord.pipeline.reproject import adjust_axis, transform
from pykoord.pipeline.transformer import Transformer

__all__ = ["Transformer", "adjust_axis", "datum_transform", "transform"]
