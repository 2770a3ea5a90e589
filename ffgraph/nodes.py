"""
Filter graph node model.

A graph is an ordered list of nodes. Each node is either a Stream (an input
or output file) or a FilterStage (input pads, a chain of filter invocations,
output pads). Filter options are either keyed (rendered as k=v:k=v) or raw
(rendered verbatim).
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from ffgraph.common import NodeVariantError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class StreamDirection(str, Enum):
    """Whether a stream is read by ffmpeg or written by it."""

    INPUT = "input"
    OUTPUT = "output"


# ---------------------------------------------------------------------------
# Option payloads
# ---------------------------------------------------------------------------

@dataclass
class KeyedOptions:
    """Filter options as ordered key/value pairs.

    Rendering follows dict insertion order, so build the dict in the order
    the options should appear.
    """

    values: Dict[str, str] = field(default_factory=dict)


@dataclass
class RawOptions:
    """Pre-formatted filter option text, emitted as-is."""

    text: str = ""


OptionPayload = Union[KeyedOptions, RawOptions]


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

@dataclass
class FilterInvocation:
    """One filter (fade, scale, trim, ...) within a stage's chain."""

    name: str
    options: OptionPayload = field(default_factory=KeyedOptions)


@dataclass
class Stream:
    """An input or output file of the graph."""

    path: str
    name: str = ""
    direction: StreamDirection = StreamDirection.INPUT
    mapped_pads: Optional[List[str]] = None  # output streams only


@dataclass
class FilterStage:
    """A filter chain reading from input pads and writing to output pads."""

    name: str = ""
    input_pads: List[str] = field(default_factory=list)
    output_pads: List[str] = field(default_factory=list)
    operations: List[FilterInvocation] = field(default_factory=list)


Node = Union[Stream, FilterStage]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def make_options(value=None) -> OptionPayload:
    """Coerce a dict, str, payload or None into an option payload."""
    if value is None:
        return KeyedOptions()
    if isinstance(value, (KeyedOptions, RawOptions)):
        return value
    if isinstance(value, dict):
        return KeyedOptions(values=dict(value))
    if isinstance(value, str):
        return RawOptions(text=value)
    raise TypeError(
        f"Filter options must be a dict, str or option payload, got {type(value).__name__}"
    )


def invocation(name: str, options=None) -> FilterInvocation:
    """Build a FilterInvocation, coercing options through make_options()."""
    return FilterInvocation(name=name, options=make_options(options))


def input_stream(path: str, name: str = "") -> Stream:
    return Stream(path=path, name=name, direction=StreamDirection.INPUT)


def output_stream(
    path: str,
    name: str = "",
    mapped_pads: Optional[List[str]] = None,
) -> Stream:
    return Stream(
        path=path,
        name=name,
        direction=StreamDirection.OUTPUT,
        mapped_pads=list(mapped_pads) if mapped_pads is not None else None,
    )


def filter_stage(
    name: str = "",
    input_pads: Optional[List[str]] = None,
    output_pads: Optional[List[str]] = None,
    operations: Optional[List[FilterInvocation]] = None,
) -> FilterStage:
    return FilterStage(
        name=name,
        input_pads=list(input_pads or []),
        output_pads=list(output_pads or []),
        operations=list(operations or []),
    )


# ---------------------------------------------------------------------------
# Variant inspection
# ---------------------------------------------------------------------------

def is_filter_stage(node: Node) -> bool:
    return isinstance(node, FilterStage)


def is_input(node: Node) -> bool:
    return isinstance(node, Stream) and node.direction == StreamDirection.INPUT


def is_output(node: Node) -> bool:
    return isinstance(node, Stream) and node.direction == StreamDirection.OUTPUT


def as_stream(node: Node) -> Stream:
    """Return the node as a Stream, raising NodeVariantError otherwise."""
    if isinstance(node, Stream):
        return node
    raise NodeVariantError(f"Expected a Stream node, got {type(node).__name__}")


def as_filter_stage(node: Node) -> FilterStage:
    """Return the node as a FilterStage, raising NodeVariantError otherwise."""
    if isinstance(node, FilterStage):
        return node
    raise NodeVariantError(f"Expected a FilterStage node, got {type(node).__name__}")
