"""Tests for pseudo-assembly generation."""

import pytest

from tally.ast import LogStatement, Program, VariableDeclaration
from tally.codegen import AssemblyGenerator, generate, render


def test_declaration_emits_mov_without_kind_or_type():
    node = VariableDeclaration(identifier="x", kind="constant", value_type="number", value="5")

    assert generate(Program(body=(node,))) == ["MOV x, 5"]


def test_log_emits_print():
    assert generate(Program(body=(LogStatement(argument="x"),))) == ["PRINT x"]


def test_lines_follow_program_order():
    program = Program(
        body=(
            LogStatement(argument="a"),
            VariableDeclaration(identifier="b", kind="k", value_type="t", value="1, 2"),
            LogStatement(argument="b"),
        )
    )

    assert generate(program) == ["PRINT a", "MOV b, 1, 2", "PRINT b"]


def test_empty_program_generates_nothing():
    assert generate(Program()) == []


def test_unknown_statement_kind_is_rejected():
    with pytest.raises(AssertionError):
        AssemblyGenerator().emit(object())


def test_render_terminates_every_line():
    assert render(["MOV x, 5", "PRINT x"]) == "MOV x, 5\nPRINT x\n"


def test_render_of_no_lines_is_empty():
    assert render([]) == ""
