from __future__ import annotations

import pytest

from operand_align.config import AlignConfig
from operand_align.operators import DEFAULT_OPERATORS, OperatorSet


def test_defaults() -> None:
    config = AlignConfig()

    assert config.tab_width == 8
    assert config.basic_offset == 4
    assert config.use_tabs is False
    assert config.electric is True
    assert set(config.operators) == set(DEFAULT_OPERATORS)


def test_from_env_without_overrides_matches_defaults() -> None:
    assert AlignConfig.from_env({}) == AlignConfig()


def test_from_env_reads_every_setting() -> None:
    config = AlignConfig.from_env(
        {
            "OPERAND_ALIGN_OPERATORS": "&|",
            "OPERAND_ALIGN_TAB_WIDTH": "4",
            "OPERAND_ALIGN_BASIC_OFFSET": "2",
            "OPERAND_ALIGN_USE_TABS": "yes",
            "OPERAND_ALIGN_ELECTRIC": "off",
        }
    )

    assert list(config.operators) == ["&", "|"]
    assert config.tab_width == 4
    assert config.basic_offset == 2
    assert config.use_tabs is True
    assert config.electric is False

    style = config.indent_style()
    assert style.basic_offset == 2
    assert style.use_tabs is True


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPERAND_ALIGN_TAB_WIDTH", "2")
    monkeypatch.setenv("OPERAND_ALIGN_OPERATORS", "  ")

    config = AlignConfig.from_env()

    assert config.tab_width == 2
    assert config.operators == OperatorSet.default()


@pytest.mark.parametrize(
    "environ",
    [
        {"OPERAND_ALIGN_TAB_WIDTH": "wide"},
        {"OPERAND_ALIGN_TAB_WIDTH": "0"},
        {"OPERAND_ALIGN_BASIC_OFFSET": "-1"},
        {"OPERAND_ALIGN_USE_TABS": "maybe"},
        {"OPERAND_ALIGN_OPERATORS": "&("},
    ],
)
def test_invalid_environment_raises(environ: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        AlignConfig.from_env(environ)


@pytest.mark.parametrize("chars", ["", " ", ",", ";", "{", '"'])
def test_operator_set_rejects_non_operators(chars: str) -> None:
    with pytest.raises(ValueError):
        OperatorSet.from_chars(chars)


def test_operator_set_rejects_multi_character_entries() -> None:
    with pytest.raises(ValueError):
        OperatorSet(frozenset({"&&"}))


def test_operator_line_classification() -> None:
    operators = OperatorSet.default()

    assert operators.starts_operator_line("    && beta")
    assert operators.starts_operator_line("/ divisor")
    assert not operators.starts_operator_line("    // comment")
    assert not operators.starts_operator_line("/* comment */")
    assert not operators.starts_operator_line("beta")
    assert not operators.starts_operator_line("   ")
    assert "&" in operators
    assert "a" not in operators
    assert len(operators) == len(DEFAULT_OPERATORS)
