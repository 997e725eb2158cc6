"""Tests for creating attributes & adding generators to them."""

import pytest

from mapgen.exceptions import (
    DuplicateAttributeError,
    GenerationStepError,
    UnknownAttributeError,
)
from mapgen.generators.generator1d import Constant, InputAsOutput, InputAsOutputData
from mapgen.generators.generator2d import ApplyToX, ApplyToXData, IndexGeneratorData, Noise2dData
from mapgen.map import Map2d
from mapgen.size import Size2d
from mapgen.steps import (
    CreateAttribute,
    CreateAttributeData,
    GeneratorAdd,
    GeneratorAddData,
    get_attribute_id,
)


class TestGetAttributeId:
    """Tests for resolving attribute names."""

    def test_position(self):
        assert get_attribute_id("b", ["a", "b", "c"]) == 1

    def test_unknown(self):
        with pytest.raises(UnknownAttributeError) as exc_info:
            get_attribute_id("d", ["a", "b", "c"])
        assert exc_info.value.name == "d"
        assert "'d'" in str(exc_info.value)

    def test_unknown_is_step_error(self):
        with pytest.raises(GenerationStepError):
            get_attribute_id("a", [])


class TestCreateAttribute:
    """Tests for CreateAttribute."""

    def test_run(self, size_3x3):
        map2d = Map2d(size=size_3x3)
        CreateAttribute("elevation", 12).run(map2d)

        assert map2d.get_attribute_names() == ["elevation"]
        assert map2d.get_attribute(0).get_all().tolist() == [12] * 9

    def test_roundtrip(self):
        data = CreateAttributeData(name="rainfall", default=3)
        assert data.try_convert([]).convert([]) == data

    def test_duplicate_name(self):
        data = CreateAttributeData(name="rainfall")
        with pytest.raises(DuplicateAttributeError):
            data.try_convert(["rainfall"])


class TestGeneratorAdd:
    """Tests for GeneratorAdd."""

    def test_run(self):
        map2d = Map2d(size=Size2d(width=3, height=2))
        map2d.create_attribute("test")

        GeneratorAdd("ramp", 0, ApplyToX(InputAsOutput())).run(map2d)

        assert map2d.get_attribute(0).get_all().tolist() == [0, 1, 2, 0, 1, 2]

    def test_saturates(self):
        map2d = Map2d(size=Size2d(width=3, height=1))
        map2d.create_attribute_from("test", [0, 100, 250])

        GeneratorAdd("const", 0, ApplyToX(Constant(10))).run(map2d)

        assert map2d.get_attribute(0).get_all().tolist() == [10, 110, 255]

    def test_applied_twice_adds_twice(self, map_3x3):
        step = GeneratorAdd("const", 0, ApplyToX(Constant(1)))
        step.run(map_3x3)
        step.run(map_3x3)
        assert map_3x3.get_attribute(0).get_all().tolist() == list(range(3, 12))

    @pytest.mark.parametrize(
        "generator",
        [
            ApplyToXData(generator=InputAsOutputData()),
            IndexGeneratorData(size=Size2d(width=2, height=2)),
            Noise2dData(seed=0, scale=20, min_value=0, max_value=125),
        ],
        ids=lambda generator: generator.type,
    )
    def test_roundtrip(self, generator):
        attributes = ["elevation", "rainfall"]
        data = GeneratorAddData(name="islands", attribute="rainfall", generator=generator)
        step = data.try_convert(attributes)

        assert step.attribute_id == 1
        assert step.convert(attributes) == data

    def test_unknown_attribute(self):
        data = GeneratorAddData(
            name="islands", attribute="missing", generator=ApplyToXData(generator=InputAsOutputData())
        )
        with pytest.raises(UnknownAttributeError):
            data.try_convert(["elevation"])

    def test_invalid_generator(self):
        data = GeneratorAddData(
            name="islands",
            attribute="elevation",
            generator=Noise2dData(seed=0, scale=20, min_value=200, max_value=100),
        )
        with pytest.raises(GenerationStepError, match="islands"):
            data.try_convert(["elevation"])
