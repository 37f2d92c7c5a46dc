"""jsonld_decoder: shape-tolerant decoding of schema.org Recipe JSON-LD."""

from .model import Absent, AdaptiveObjectBuilder, JSONLDDecodable, KeyPath, Shape, shape_of
from .errors import (
    ConfigurationError,
    DocumentError,
    JSONLDDecoderError,
    KeyPathResolutionError,
    TypeMismatch,
)
from .coerce import decode_value
from .projector import project, project_array
from .decoder import decode_field, decode_member, decode_single
from .schema import FieldDef, RecordDef, decode_record
from .recipe import (
    AggregateRating,
    HowToStep,
    NutritionInfo,
    Person,
    Recipe,
    VideoObject,
)
from .document import RecipeJSONLDDecoder, find_node

__all__ = [
    "Absent",
    "AdaptiveObjectBuilder",
    "JSONLDDecodable",
    "KeyPath",
    "Shape",
    "shape_of",
    "ConfigurationError",
    "DocumentError",
    "JSONLDDecoderError",
    "KeyPathResolutionError",
    "TypeMismatch",
    "decode_value",
    "project",
    "project_array",
    "decode_field",
    "decode_member",
    "decode_single",
    "FieldDef",
    "RecordDef",
    "decode_record",
    "AggregateRating",
    "HowToStep",
    "NutritionInfo",
    "Person",
    "Recipe",
    "VideoObject",
    "RecipeJSONLDDecoder",
    "find_node",
]
