from __future__ import annotations

import pytest

from operand_align.runtime import telemetry


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="chatty")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_loggers_are_cached_per_name() -> None:
    first = telemetry.get_logger("operand_align.tests")

    assert telemetry.get_logger("operand_align.tests") is first


def test_span_reraises_and_keeps_metadata() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span(
            "tests::span", component=True, metadata={"row": 1}
        ) as handle:
            handle.add_metadata("stage", "before-failure")
            assert handle.component_name == "tests::span"
            assert handle.metadata == {"row": "1", "stage": "before-failure"}
            raise RuntimeError("boom")
