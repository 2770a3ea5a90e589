"""
Unit tests for the ffgraph node model.

Tests constructors, option payload coercion, variant predicates and safe
narrowing.
"""
import pytest

from ffgraph.common import NodeVariantError
from ffgraph.nodes import (
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
    is_filter_stage,
    is_input,
    is_output,
    make_options,
    output_stream,
)

from tests.fixtures.graph_factories import create_input, create_output, create_stage


class TestConstructors:
    """Tests for the node construction helpers."""

    def test_input_stream_direction(self):
        stream = input_stream("/data/in.mp4", name="main")

        assert stream.direction == StreamDirection.INPUT
        assert stream.path == "/data/in.mp4"
        assert stream.name == "main"
        assert stream.mapped_pads is None

    def test_output_stream_copies_mapped_pads(self):
        """The pad list is copied so later caller edits do not leak in."""
        pads = ["audio", "out0"]
        stream = output_stream("/data/out.mp4", mapped_pads=pads)
        pads.append("extra")

        assert stream.direction == StreamDirection.OUTPUT
        assert stream.mapped_pads == ["audio", "out0"]

    def test_filter_stage_defaults_empty(self):
        stage = filter_stage()

        assert stage.input_pads == []
        assert stage.output_pads == []
        assert stage.operations == []

    def test_direction_is_str_enum(self):
        assert StreamDirection("output") is StreamDirection.OUTPUT
        assert StreamDirection.INPUT == "input"


class TestOptionCoercion:
    """Tests for make_options() and invocation()."""

    def test_dict_becomes_keyed(self):
        opts = make_options({"type": "in", "st": "0"})

        assert isinstance(opts, KeyedOptions)
        assert list(opts.values.items()) == [("type", "in"), ("st", "0")]

    def test_str_becomes_raw(self):
        opts = make_options("512:-2")

        assert isinstance(opts, RawOptions)
        assert opts.text == "512:-2"

    def test_none_becomes_empty_keyed(self):
        assert make_options(None) == KeyedOptions()

    def test_payload_passes_through(self):
        raw = RawOptions("w=10")
        assert make_options(raw) is raw

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            make_options(42)

    def test_invocation_coerces_options(self):
        op = invocation("scale", "512:-2")

        assert op.name == "scale"
        assert op.options == RawOptions("512:-2")


class TestVariantInspection:
    """Tests for predicates and safe narrowing."""

    def test_predicates(self):
        inp, out, stage = create_input(), create_output(), create_stage()

        assert is_input(inp) and not is_output(inp) and not is_filter_stage(inp)
        assert is_output(out) and not is_input(out)
        assert is_filter_stage(stage) and not is_input(stage) and not is_output(stage)

    def test_as_stream_returns_stream(self):
        inp = create_input()
        assert as_stream(inp) is inp

    def test_as_filter_stage_returns_stage(self):
        stage = create_stage()
        assert as_filter_stage(stage) is stage

    def test_as_stream_mismatch_raises(self):
        with pytest.raises(NodeVariantError, match="Stream"):
            as_stream(create_stage())

    def test_as_filter_stage_mismatch_raises(self):
        with pytest.raises(NodeVariantError, match="FilterStage"):
            as_filter_stage(create_output())

    def test_variant_error_is_type_error(self):
        """Callers catching TypeError also catch narrowing mismatches."""
        with pytest.raises(TypeError):
            as_filter_stage(Stream(path="x"))

    def test_nodes_are_plain_dataclasses(self):
        assert FilterStage(name="a") == FilterStage(name="a")
