"""Tests for the energy term components."""

import pytest

from src.core.energy_measure import EnergyMeasure
from src.core.object import SetResult
from src.core.parameters import ParameterList
from src.core.terms.base import EnergyTerm
from src.core.terms.constraints import BendingEnergy
from src.core.terms.external_forces import BalloonForce, ImplicitSurfaceSpringForce
from src.core.terms.internal_forces import CurvatureForce, SpringForce
from src.core.terms.point_set_distance import FiducialRegistrationError
from src.core.terms.similarity import (
    NormalizedCrossCorrelation,
    NormalizedMutualInformation,
    SumOfSquaredDifferences,
)

ALL_TERMS = [
    SumOfSquaredDifferences,
    NormalizedCrossCorrelation,
    NormalizedMutualInformation,
    FiducialRegistrationError,
    SpringForce,
    CurvatureForce,
    BalloonForce,
    ImplicitSurfaceSpringForce,
    BendingEnergy,
]


@pytest.mark.parametrize("term_cls", ALL_TERMS)
def test_weight_parameter(term_cls):
    term = term_cls(name="term")
    assert term.set("Weight", "0.25")
    assert term.weight == 0.25
    assert term.parameter().get("Weight") == "0.25"
    assert term.parameter().find("Weight") == 0


@pytest.mark.parametrize("term_cls", ALL_TERMS)
def test_rejects_unknown_and_malformed(term_cls):
    term = term_cls()
    assert not term.set("No such parameter", "1")
    assert not term.set("Weight", "heavy")
    assert term.weight == 1.0


@pytest.mark.parametrize("term_cls", ALL_TERMS)
def test_parameter_round_trip(term_cls):
    source = term_cls()
    target = term_cls()
    target.set_parameters(source.parameter())
    assert target.parameter() == source.parameter()


@pytest.mark.parametrize("term_cls", ALL_TERMS)
def test_measure_name(term_cls):
    assert term_cls.MEASURE != EnergyMeasure.UNKNOWN
    assert term_cls.measure_name() != "Unknown"


def test_base_term_has_no_measure():
    assert EnergyTerm.measure_name() == "Unknown"
    assert EnergyTerm().parameter() == [("Weight", "1")]


def test_weight_is_not_validated():
    term = SumOfSquaredDifferences()
    assert term.set("Weight", "-3")
    assert term.weight == -3.0


class TestNormalizedCrossCorrelation:
    def test_class_name_depends_on_window(self):
        term = NormalizedCrossCorrelation()
        assert term.name_of_class() == "NormalizedCrossCorrelation"
        assert term.set("Local window radius", "3")
        assert term.name_of_class() == "LocalNormalizedCrossCorrelation"
        assert NormalizedCrossCorrelation.name_of_type() == "NormalizedCrossCorrelation"

    def test_window_must_be_integer(self):
        term = NormalizedCrossCorrelation()
        assert not term.set("Local window radius", "2.5")
        assert term.window_radius == 0


def test_mutual_information_bins():
    term = NormalizedMutualInformation()
    assert term.set("No. of histogram bins", "32")
    assert term.parameter() == [("Weight", "1"), ("No. of bins", "32")]


def test_spring_force_parameters():
    term = SpringForce()
    term.set_parameters([("Inward normal weight", "0.9"), ("Outward normal weight", "0.1")])
    assert (term.inward_normal_weight, term.outward_normal_weight) == (0.9, 0.1)


def test_curvature_switch():
    term = CurvatureForce()
    assert term.set("Signed curvature", "on")
    assert term.signed_curvature is True
    term.signed_curvature_off()
    assert term.parameter().get("Signed curvature") == "No"


class TestBalloonForce:
    def test_image_is_not_a_parameter(self):
        term = BalloonForce()
        term.image = object()
        assert "Image" not in term.parameter()

    def test_intensity_range(self):
        term = BalloonForce()
        assert term.parameter().get("Lower intensity") == "-inf"
        assert term.set("Lower intensity", "10")
        assert term.lower_intensity == 10.0


class TestImplicitSurfaceSpringForce:
    def test_spring_parameters_are_prefixed(self):
        term = ImplicitSurfaceSpringForce()
        assert term.parameter().names() == [
            "Weight",
            "Maximum distance",
            "Spring weight",
            "Spring inward normal weight",
            "Spring outward normal weight",
        ]

    def test_set_spring_parameter(self):
        term = ImplicitSurfaceSpringForce()
        assert term.set("Spring weight", "0.2")
        assert term.spring.weight == 0.2
        assert term.weight == 1.0
        assert term.set("Spring inward normal weight", "0.75")
        assert term.spring.inward_normal_weight == 0.75

    def test_unknown_spring_parameter(self):
        assert not ImplicitSurfaceSpringForce().set("Spring stiffness", "1")

    def test_replacing_spring(self):
        term = ImplicitSurfaceSpringForce()
        spring = SpringForce(weight=0.3)
        term.spring = spring
        assert term.parameter().get("Spring weight") == "0.3"

    def test_spring_subset(self):
        term = ImplicitSurfaceSpringForce()
        term.set("Spring weight", "0.4")
        assert term.parameter().subset("Spring") == term.spring.parameter()


def test_bending_energy_switch():
    term = BendingEnergy()
    term.set_parameters(ParameterList({"World coordinates": True, "Weight": 0.001}))
    assert term.world_coordinates is True
    assert term.weight == 0.001


class TestRejectionReasons:
    def test_alternative_bins_name_has_invalid_value(self):
        term = NormalizedMutualInformation()
        assert term.try_set("No. of histogram bins", "x") is SetResult.INVALID_VALUE
        assert term.try_set("No. of bins", "x") is SetResult.INVALID_VALUE
        assert term.try_set("No. of voxels", "x") is SetResult.UNKNOWN_PARAMETER

    def test_capitalized_spring_name_has_invalid_value(self):
        term = ImplicitSurfaceSpringForce()
        assert term.set("Spring Weight", "2")
        assert term.spring.weight == 2.0
        assert term.try_set("Spring Weight", "x") is SetResult.INVALID_VALUE
        assert term.try_set("Spring stiffness", "1") is SetResult.UNKNOWN_PARAMETER


class TestImplicitSurfaceWithoutSpring:
    def test_parameters_exclude_spring(self):
        term = ImplicitSurfaceSpringForce()
        term.spring = None
        assert term.parameter().names() == ["Weight", "Maximum distance"]
        assert "ImplicitSurfaceSpringForce" in repr(term)

    def test_spring_parameters_rejected(self):
        term = ImplicitSurfaceSpringForce()
        term.spring = None
        assert not term.set("Spring weight", "0.5")
        assert term.try_set("Spring weight", "0.5") is SetResult.UNKNOWN_PARAMETER
        assert term.set("Weight", "0.5")
