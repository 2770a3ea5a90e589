"""Filter graph compilation to ffmpeg command text, argv lists and annotations."""

import logging
from dataclasses import dataclass, field
from typing import List

from ffgraph.common import StrictValidationError
from ffgraph.nodes import FilterStage, Node, Stream, is_filter_stage, is_input, is_output
from ffgraph.stage import render_stage
from ffgraph.validation import validate_graph

logger = logging.getLogger(__name__)

STAGE_SEPARATOR = ";"


@dataclass
class Annotation:
    """A single annotation for a command flag."""

    flag: str
    explanation: str
    category: str  # input, filter, map, output


@dataclass
class AnnotatedCommand:
    """A compiled argument list with one annotation per flag group."""

    command: List[str]
    annotations: List[Annotation] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Partitioning
# ---------------------------------------------------------------------------

def select_inputs(nodes: List[Node]) -> List[Stream]:
    return [n for n in nodes if is_input(n)]


def select_filter_stages(nodes: List[Node]) -> List[FilterStage]:
    return [n for n in nodes if is_filter_stage(n)]


def select_outputs(nodes: List[Node]) -> List[Stream]:
    return [n for n in nodes if is_output(n)]


# ---------------------------------------------------------------------------
# Section rendering
# ---------------------------------------------------------------------------

def generate_input_flags(nodes: List[Node]) -> str:
    """Render '-i <path> ' for every input stream, in order."""
    return "".join(f"-i {stream.path} " for stream in select_inputs(nodes))


def generate_filter_graph(nodes: List[Node]) -> str:
    """Render the stages joined by ';' (without the -filter_complex wrapper)."""
    return STAGE_SEPARATOR.join(render_stage(stage) for stage in select_filter_stages(nodes))


def generate_filter_complex(nodes: List[Node]) -> str:
    """Render the full -filter_complex '<graph>' clause."""
    return f"-filter_complex '{generate_filter_graph(nodes)}'"


def _mapped_pads(nodes: List[Node]) -> List[str]:
    pads: List[str] = []
    for stream in select_outputs(nodes):
        if stream.mapped_pads:
            pads.extend(stream.mapped_pads)
    return pads


def generate_map_flags(nodes: List[Node]) -> str:
    """Render " -map '[<pad>]'" for every mapped pad of every output, in order."""
    return "".join(f" -map '[{pad}]'" for pad in _mapped_pads(nodes))


def generate_output_paths(nodes: List[Node]) -> str:
    """Render output paths, each as its own space-separated argument."""
    return " ".join(stream.path for stream in select_outputs(nodes))


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------

def _check_strict(nodes: List[Node], strict: bool) -> None:
    if not strict:
        return

    result = validate_graph(nodes)
    for warning in result.warnings:
        logger.warning("[FFGRAPH-VALIDATE] %s", warning)
    if not result.valid:
        raise StrictValidationError(result)


def compile_graph(nodes: List[Node], strict: bool = False) -> str:
    """Compile a node list into ffmpeg command text.

    Layout: -i <in> ... -filter_complex '<stage>;<stage>' -map '[<pad>]' ... <out> ...

    With strict=True the graph is validated first and StrictValidationError
    is raised on errors. The default is lenient and never raises.
    """
    nodes = list(nodes)
    _check_strict(nodes, strict)

    logger.debug(
        "[FFGRAPH-COMPILE] inputs=%s stages=%s outputs=%s",
        len(select_inputs(nodes)),
        len(select_filter_stages(nodes)),
        len(select_outputs(nodes)),
    )

    text = (
        f"{generate_input_flags(nodes)}"
        f"{generate_filter_complex(nodes)}"
        f"{generate_map_flags(nodes)}"
        f" {generate_output_paths(nodes)}"
    )

    logger.debug("[FFGRAPH-COMPILE] %s", text)
    return text


def compile_args(nodes: List[Node], strict: bool = False) -> List[str]:
    """Compile a node list into an ffmpeg argument list (without 'ffmpeg').

    Same order as compile_graph(), but each flag and value is its own element
    and no shell quoting is applied.
    """
    nodes = list(nodes)
    _check_strict(nodes, strict)

    args: List[str] = []
    for stream in select_inputs(nodes):
        args.extend(["-i", stream.path])

    args.extend(["-filter_complex", generate_filter_graph(nodes)])

    for pad in _mapped_pads(nodes):
        args.extend(["-map", f"[{pad}]"])

    args.extend(stream.path for stream in select_outputs(nodes))
    return args


def annotate_graph(nodes: List[Node]) -> AnnotatedCommand:
    """Compile a node list and annotate each flag group with explanations."""
    nodes = list(nodes)
    cmd = compile_args(nodes)
    annotations: List[Annotation] = []

    for index, stream in enumerate(select_inputs(nodes)):
        annotations.append(Annotation(
            flag=f"-i {stream.path}",
            explanation=f"Input {index}: {stream.path}",
            category="input",
        ))

    for stage in select_filter_stages(nodes):
        filter_names = [op.name for op in stage.operations]
        label = f" '{stage.name}'" if stage.name else ""
        if filter_names:
            explanation = f"Filter stage{label}: {' -> '.join(filter_names)}"
        else:
            explanation = f"Filter stage{label} with no filters"
        annotations.append(Annotation(
            flag=render_stage(stage),
            explanation=explanation,
            category="filter",
        ))

    for pad in _mapped_pads(nodes):
        annotations.append(Annotation(
            flag=f"-map [{pad}]",
            explanation=f"Route filter pad '{pad}' to the output",
            category="map",
        ))

    for stream in select_outputs(nodes):
        annotations.append(Annotation(
            flag=stream.path,
            explanation=f"Output file: {stream.path}",
            category="output",
        ))

    return AnnotatedCommand(command=cmd, annotations=annotations)
