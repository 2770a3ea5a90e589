"""Filter stage validation and rendering."""

from typing import List

from ffgraph.common import ValidationResult
from ffgraph.nodes import (
    FilterInvocation,
    FilterStage,
    KeyedOptions,
    OptionPayload,
    RawOptions,
)

# Characters with meaning in the filtergraph grammar; not allowed inside a pad label.
RESERVED_PAD_CHARS = set("[];,")


def validate_pad(pad: str) -> ValidationResult:
    """Validate a single pad label."""
    result = ValidationResult()

    if not pad:
        result.add_error("Pad label must not be empty")
        return result

    bad = sorted(RESERVED_PAD_CHARS.intersection(pad))
    if bad:
        result.add_error(
            f"Pad label '{pad}' contains reserved characters: {' '.join(bad)}"
        )

    return result


def validate_filter_stage(stage: FilterStage) -> ValidationResult:
    """Validate a filter stage's pads and invocations."""
    result = ValidationResult()
    label = stage.name or "<unnamed>"

    for pad in stage.input_pads + stage.output_pads:
        result.merge(validate_pad(pad))

    if not stage.operations:
        result.add_warning(f"Filter stage '{label}' has no operations")

    for op in stage.operations:
        if not op.name:
            result.add_error(f"Filter stage '{label}' has an invocation without a name")
        if isinstance(op.options, RawOptions) and not op.options.text:
            result.add_warning(
                f"Filter '{op.name}' in stage '{label}' has empty raw options"
            )

    return result


def format_pads(pads: List[str]) -> str:
    """Render pads as adjacent bracket groups: [a][b]."""
    return "".join(f"[{pad}]" for pad in pads)


def format_options(options: OptionPayload) -> str:
    """Render an option payload.

    Keyed options become k=v pairs joined by ':' in insertion order; raw
    options are returned unchanged.
    """
    if isinstance(options, KeyedOptions):
        return ":".join(f"{k}={v}" for k, v in options.values.items())
    if isinstance(options, RawOptions):
        return options.text
    raise TypeError(f"Unsupported option payload: {type(options).__name__}")


def format_invocation(op: FilterInvocation) -> str:
    return f"{op.name}={format_options(op.options)}"


def format_filter_chain(operations: List[FilterInvocation]) -> str:
    """Join a stage's invocations with ',' in execution order."""
    return ",".join(format_invocation(op) for op in operations)


def render_stage(stage: FilterStage) -> str:
    """Render one stage: [in]...filter=opts,filter=opts...[out]..."""
    ins = format_pads(stage.input_pads)
    chain = format_filter_chain(stage.operations)
    outs = format_pads(stage.output_pads)
    return f"{ins}{chain}{outs}"
