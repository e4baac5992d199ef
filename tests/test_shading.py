import pytest

from pdfkiln.shading import (
    Shading1Function,
    Shading2Axial,
    Shading3Radial,
    Shading4FreeFormGouraud,
    Shading5LatticeGouraud,
    Shading6CoonsPatch,
    Shading7TensorPatch,
    ShadingType,
)
from pdfkiln.util import Name

RGB = Name("DeviceRGB")
FUNC = {"FunctionType": 2, "N": 1}


def test_shading_type_values():
    assert Shading1Function(RGB, FUNC).dictionary["ShadingType"] == 1
    assert Shading2Axial(RGB, [0, 0, 1, 0], FUNC).dictionary["ShadingType"] == 2
    assert Shading7TensorPatch(RGB, 8, 8, 8).dictionary["ShadingType"] == 7
    assert ShadingType.TENSOR_PATCH.value == 7


def test_function_shading_entries():
    sh = Shading1Function(RGB, FUNC).with_domain([0, 1, 0, 1]).with_matrix([1, 0, 0, 1, 0, 0])
    assert sh.dictionary["ShadingType"] == ShadingType.FUNCTION.value
    assert sh.dictionary["ColorSpace"] == RGB
    assert sh.dictionary["Function"] == FUNC
    assert sh.dictionary["Domain"] == [0, 1, 0, 1]
    assert sh.dictionary["Matrix"] == [1, 0, 0, 1, 0, 0]


def test_axial_shading_entries():
    coords = [0, 0, 100, 0]
    sh = Shading2Axial(RGB, coords, FUNC).with_extend([True, False]).with_domain([0, 1])
    assert sh.dictionary["ShadingType"] == ShadingType.AXIAL.value
    assert sh.dictionary["Coords"] == coords
    assert sh.dictionary["Extend"] == [True, False]
    assert sh.dictionary["Domain"] == [0, 1]


def test_radial_shading_entries():
    sh = Shading3Radial(RGB, FUNC).with_extend([True, True])
    assert sh.dictionary["ShadingType"] == ShadingType.RADIAL.value
    assert sh.dictionary["Function"] == FUNC
    assert sh.dictionary["Extend"] == [True, True]


def test_free_form_gouraud_entries():
    decode = [0, 1, 0, 1]
    sh = Shading4FreeFormGouraud(RGB, 16, 8, 2, decode).with_function(FUNC)
    assert sh.dictionary["ShadingType"] == ShadingType.FREE_FORM_GOURAUD.value
    assert sh.dictionary["BitsPerComponent"] == 16
    assert sh.dictionary["BitsPerCordinate"] == 8
    assert sh.dictionary["BitsPerFlag"] == 2
    assert sh.dictionary["Decode"] == decode
    assert sh.dictionary["Function"] == FUNC


def test_lattice_gouraud_entries():
    sh = Shading5LatticeGouraud(RGB, 16, 8, 4, [0, 1])
    assert sh.dictionary["ShadingType"] == ShadingType.LATTICE_GOURAUD.value
    assert sh.dictionary["VerticesPerRow"] == 4
    assert "Function" not in sh.dictionary
    assert sh.with_function(FUNC).dictionary["Function"] == FUNC


@pytest.mark.parametrize(
    "cls,kind",
    [(Shading6CoonsPatch, ShadingType.COONS_PATCH), (Shading7TensorPatch, ShadingType.TENSOR_PATCH)],
)
def test_patch_shadings(cls, kind):
    sh = cls(RGB, 16, 8, 2).with_decode([0, 1]).with_function(FUNC)
    assert sh.dictionary["ShadingType"] == kind.value
    assert sh.dictionary["BitsPerCoordinate"] == 16
    assert sh.dictionary["BitsPerComponent"] == 8
    assert sh.dictionary["BitsPerFlag"] == 2
    assert sh.dictionary["Decode"] == [0, 1]


def test_base_options_chain_and_return_same_object():
    sh = Shading3Radial(RGB, FUNC)
    result = sh.with_background([1, 1, 1]).with_bbox([0, 0, 10, 10]).with_anti_alias(True)
    assert result is sh
    assert sh.dictionary["Background"] == [1, 1, 1]
    assert sh.dictionary["BBox"] == [0, 0, 10, 10]
    assert sh.dictionary["AntiAlias"] is True


def test_duplicate_entry_raises():
    sh = Shading1Function(RGB, FUNC).with_domain([0, 1, 0, 1])
    with pytest.raises(KeyError):
        sh.with_domain([0, 2, 0, 2])
    assert sh.dictionary["Domain"] == [0, 1, 0, 1]


def test_duplicate_anti_alias_raises():
    sh = Shading6CoonsPatch(RGB, 8, 8, 8).with_anti_alias(False)
    with pytest.raises(KeyError):
        sh.with_anti_alias(True)
    assert sh.dictionary["AntiAlias"] is False