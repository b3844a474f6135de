"""
どこで: tests（figures.base）。
何を: 等価（巡回シフト一致・鏡映不一致・異種不一致）、複製と移動、表示形式、空状態。
なぜ: 値としての図形の振る舞いを種別に依存せず固定するため。
"""

from __future__ import annotations

import copy

import pytest

from common.errors import Defect, InvalidShapeError
from figures import Hexagon, Pentagon, Rhombus

DIAMOND = "0 0 1 1 2 0 1 -1"


def test_equality_is_invariant_under_rotation() -> None:
    a = Rhombus().read(DIAMOND)
    b = Rhombus().read("2 0 1 -1 0 0 1 1")
    assert a == b
    assert not (a != b)


def test_reflected_sequence_is_not_equal() -> None:
    a = Rhombus().read(DIAMOND)
    reflected = Rhombus().read("1 -1 2 0 1 1 0 0")
    assert reflected.validate()
    assert a.surface() == reflected.surface()
    assert a != reflected


def test_cross_variant_comparison_is_false(regular_polygon_text) -> None:
    rhombus = Rhombus().read(DIAMOND)
    pentagon = Pentagon().read(regular_polygon_text(5, 1.0))
    hexagon = Hexagon().read(regular_polygon_text(6, 1.0))
    assert rhombus != pentagon
    assert pentagon != hexagon
    assert Pentagon() != Hexagon()
    assert rhombus != "(0, 0) (1, 1) (2, 0) (1, -1)"


def test_figures_are_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Rhombus())


def test_copy_duplicates_vertices() -> None:
    original = Rhombus().read(DIAMOND)
    for clone in (original.copy(), copy.copy(original), copy.deepcopy(original)):
        assert clone == original
        assert clone is not original

    clone = original.copy()
    original.read("0 0 1 2 2 0 1 -2")
    assert clone != original
    assert clone.surface() == 2.0
    assert original.surface() == 4.0


def test_take_moves_vertices_and_empties_source() -> None:
    source = Rhombus().read(DIAMOND)
    before = source.vertices

    moved = source.take()

    assert moved.vertices == before
    assert source.is_empty
    assert source.vertices == ()
    assert str(source) == ""
    assert source.find_defect() is Defect.EMPTY
    with pytest.raises(InvalidShapeError) as ei:
        source.surface()
    assert ei.value.defect is Defect.EMPTY
    with pytest.raises(InvalidShapeError):
        source.center()


def test_moved_from_figure_can_be_read_again() -> None:
    source = Rhombus().read(DIAMOND)
    source.take()
    source.read(DIAMOND)
    assert source.surface() == 2.0


def test_text_output_format() -> None:
    rhombus = Rhombus().read(DIAMOND)
    assert str(rhombus) == "(0, 0) (1, 1) (2, 0) (1, -1)"
    assert rhombus.format(2) == "(0.00, 0.00) (1.00, 1.00) (2.00, 0.00) (1.00, -1.00)"
    assert repr(rhombus) == "Rhombus([(0, 0), (1, 1), (2, 0), (1, -1)])"


def test_printed_form_is_not_the_input_format() -> None:
    printed = str(Rhombus().read(DIAMOND))
    with pytest.raises(InvalidShapeError) as ei:
        Rhombus().read(printed)
    assert ei.value.defect is Defect.MALFORMED_INPUT


def test_kind_metadata() -> None:
    assert Rhombus().kind.value == "rhombus"
    assert Rhombus.vertex_count() == 4
    assert Pentagon().title == "Pentagon"
    assert Hexagon.vertex_count() == 6
    assert Hexagon().scalar is float


def test_invalid_scalar_type() -> None:
    with pytest.raises(TypeError):
        Rhombus(scalar=complex)  # type: ignore[arg-type]
