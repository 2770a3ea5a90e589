"""
Opt-in strict validation of a whole filter graph.

The compiler never calls this on its default path; pad wiring is the caller's
responsibility unless strict compilation is requested.
"""
import logging
import re
from collections import Counter
from typing import List

from ffgraph.common import ValidationResult
from ffgraph.nodes import Node, is_filter_stage, is_input, is_output
from ffgraph.stage import validate_filter_stage, validate_pad

logger = logging.getLogger(__name__)

# "0", "0:v", "1:a:0" -- a stream of the N-th input rather than a stage output
INPUT_SPECIFIER_RE = re.compile(r"^(\d+)(:.+)?$")


def is_input_specifier(pad: str) -> bool:
    return bool(INPUT_SPECIFIER_RE.match(pad))


def collect_produced_pads(nodes: List[Node]) -> List[str]:
    """Every stage output pad, in graph order (duplicates kept)."""
    pads: List[str] = []
    for node in nodes:
        if is_filter_stage(node):
            pads.extend(node.output_pads)
    return pads


def collect_consumed_pads(nodes: List[Node]) -> List[str]:
    """Every stage input pad and output mapping, in graph order (duplicates kept)."""
    pads: List[str] = []
    for node in nodes:
        if is_filter_stage(node):
            pads.extend(node.input_pads)
        elif is_output(node) and node.mapped_pads:
            pads.extend(node.mapped_pads)
    return pads


def validate_graph(nodes: List[Node]) -> ValidationResult:
    """Check pad wiring and node contents of a graph.

    Errors cover dangling pad references, out-of-range input specifiers,
    pads produced or consumed more than once, and outputs with no mapping
    while filter stages exist. Warnings cover unconsumed stage outputs and
    graphs without inputs or outputs.
    """
    result = ValidationResult()

    inputs = [n for n in nodes if is_input(n)]
    outputs = [n for n in nodes if is_output(n)]
    stages = [n for n in nodes if is_filter_stage(n)]

    if not inputs:
        result.add_warning("Graph has no input streams")
    if not outputs:
        result.add_warning("Graph has no output streams")

    for stage in stages:
        result.merge(validate_filter_stage(stage))

    for stream in inputs:
        if stream.mapped_pads:
            result.add_warning(
                f"Input stream '{stream.path}' has mapped pads; they are ignored"
            )

    for stream in outputs:
        for pad in stream.mapped_pads or []:
            result.merge(validate_pad(pad))

    if stages:
        for stream in outputs:
            if not stream.mapped_pads:
                result.add_error(
                    f"Output stream '{stream.path}' has no mapped pads while filter stages exist"
                )

    produced = Counter(collect_produced_pads(nodes))
    consumed = Counter(collect_consumed_pads(nodes))

    for pad, count in produced.items():
        if count > 1:
            result.add_error(f"Pad '{pad}' is produced by {count} stage outputs")
        if pad not in consumed:
            result.add_warning(f"Pad '{pad}' is produced but never consumed")

    for pad, count in consumed.items():
        if pad in produced:
            if count > 1:
                result.add_error(f"Pad '{pad}' is consumed {count} times")
            continue
        match = INPUT_SPECIFIER_RE.match(pad)
        if match:
            index = int(match.group(1))
            if index >= len(inputs):
                result.add_error(
                    f"Pad '{pad}' refers to input {index} but the graph has "
                    f"{len(inputs)} input stream(s)"
                )
            continue
        result.add_error(f"Pad '{pad}' is referenced but never produced")

    if result.errors:
        logger.debug("[FFGRAPH-VALIDATE] %s error(s): %s", len(result.errors), result.errors)

    return result
