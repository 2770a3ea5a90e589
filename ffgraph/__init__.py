"""
ffgraph - Compile declarative filter graphs into ffmpeg -filter_complex commands.

Provides the node model, stage formatting, graph compilation and opt-in
strict validation of pad wiring.
"""

from ffgraph.common import (
    FilterGraphError,
    NodeVariantError,
    StrictValidationError,
    ValidationResult,
)
from ffgraph.compiler import annotate_graph, compile_args, compile_graph
from ffgraph.nodes import (
    FilterInvocation,
    FilterStage,
    KeyedOptions,
    RawOptions,
    Stream,
    StreamDirection,
    as_filter_stage,
    as_stream,
    filter_stage,
    input_stream,
    invocation,
    output_stream,
)
from ffgraph.stage import render_stage
from ffgraph.validation import validate_graph

__all__ = [
    "FilterGraphError",
    "NodeVariantError",
    "StrictValidationError",
    "ValidationResult",
    "annotate_graph",
    "compile_args",
    "compile_graph",
    "FilterInvocation",
    "FilterStage",
    "KeyedOptions",
    "RawOptions",
    "Stream",
    "StreamDirection",
    "as_filter_stage",
    "as_stream",
    "filter_stage",
    "input_stream",
    "invocation",
    "output_stream",
    "render_stage",
    "validate_graph",
]
