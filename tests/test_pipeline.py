"""Tests for the configuration pipeline, report and entry point."""

import logging
import textwrap

import pytest

import main
from src.config.config_parser import merge_configs, parse_args
from src.core.errors import ParameterError, UnknownEnergyMeasureError
from src.core.pipeline import build_energy_terms, configure_term, run_configuration_pipeline
from src.core.terms.external_forces import ImplicitSurfaceSpringForce
from src.core.terms.internal_forces import SpringForce
from src.core.terms.similarity import NormalizedCrossCorrelation
from src.reporting.report import format_measure_table, format_parameters, format_term_report
from src.core.parameters import ParameterList


def _config(terms, *argv):
    return merge_configs({"energy": {"terms": terms}}, parse_args(list(argv)))


class TestConfigureTerm:
    def test_lenient_warns_and_continues(self, caplog):
        term = SpringForce()
        params = ParameterList([("Weight", "2"), ("Stiffness", "1"), ("Inward normal weight", "x")])
        with caplog.at_level(logging.WARNING, logger="src"):
            rejected = configure_term(term, params)
        assert term.weight == 2.0
        assert rejected == [
            ("Stiffness", "1", "unknown parameter"),
            ("Inward normal weight", "x", "invalid value"),
        ]
        assert "ignored parameter 'Stiffness'" in caplog.text

    def test_strict_applies_valid_parameters_then_raises(self):
        term = SpringForce()
        params = ParameterList([("Stiffness", "1"), ("Weight", "3")])
        with pytest.raises(ParameterError) as excinfo:
            configure_term(term, params, strict=True)
        assert term.weight == 3.0
        assert excinfo.value.class_name == "SpringForce"
        assert excinfo.value.rejected == [("Stiffness", "1", "unknown parameter")]
        assert "'Stiffness'" in str(excinfo.value)

    def test_no_rejections(self):
        assert configure_term(SpringForce(), ParameterList({"Weight": 1})) == []


class TestBuildEnergyTerms:
    def test_terms_created_in_order(self):
        config = _config(
            [
                {"measure": "NCC", "name": "sim", "parameters": {"Local window radius": 2}},
                {"measure": "ImplicitSurfaceSpringForce", "parameters": {"Spring weight": 0.5}},
            ]
        )
        terms = build_energy_terms(config)
        assert [type(t) for t in terms] == [NormalizedCrossCorrelation, ImplicitSurfaceSpringForce]
        assert terms[0].name == "sim"
        assert terms[0].window_radius == 2
        assert terms[1].spring.weight == 0.5

    def test_overrides_reach_every_term(self):
        config = _config(
            [{"measure": "SSD"}, {"measure": "FRE"}], "--param", "Weight=0.1"
        )
        assert [t.weight for t in build_energy_terms(config)] == [0.1, 0.1]

    def test_unknown_measure(self):
        with pytest.raises(UnknownEnergyMeasureError):
            build_energy_terms(_config([{"measure": "Bogus"}]))

    def test_strict_mode(self):
        config = _config([{"measure": "SSD", "parameters": {"Bogus": 1}}], "--strict")
        with pytest.raises(ParameterError):
            build_energy_terms(config)

    def test_run_pipeline_logs_report(self, caplog):
        config = _config([{"measure": "NCC", "name": "sim"}])
        with caplog.at_level(logging.INFO, logger="src"):
            terms = run_configuration_pipeline(config)
        assert len(terms) == 1
        assert "sim: NormalizedCrossCorrelation (LNCC)" in caplog.text


class TestReport:
    def test_format_parameters(self):
        term = SpringForce(weight=0.5)
        lines = format_parameters(term, width=24, fill=".")
        assert lines[0] == "Weight".ljust(24, ".") + " = 0.5"
        assert all(line.index("=") == 25 for line in lines)

    def test_format_term_report(self):
        report = format_term_report([NormalizedCrossCorrelation()], width=8)
        assert report.splitlines() == [
            "NormalizedCrossCorrelation (LNCC)",
            "  Weight   = 1",
            "  Local window radius = 0",
        ]

    def test_format_measure_table(self):
        table = format_measure_table()
        assert table.splitlines()[0] == "Similarity"
        assert "Point Set Distance" in table
        assert "LNCC" in table and "NCC, LCC" in table
        assert "Unknown" not in table


class TestMain:
    def test_main_with_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            textwrap.dedent(
                """
                logging:
                  level: WARNING
                energy:
                  terms:
                    - measure: Landmark error
                      parameters:
                        Weight: 0.25
                """
            )
        )
        terms = main.main(["--config", str(path)])
        assert len(terms) == 1
        assert terms[0].weight == 0.25
        assert terms[0].name_of_class() == "FiducialRegistrationError"

    def test_list_measures(self, capsys):
        assert main.main(["--list-measures"]) == []
        assert "ImplicitSurfaceSpringForce" in capsys.readouterr().out


def test_main_with_null_log_level(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level:\nenergy:\n  terms:\n    - measure: SSD\n")
    terms = main.main(["--config", str(path)])
    assert [t.name_of_class() for t in terms] == ["SumOfSquaredDifferences"]


def test_build_energy_terms_uses_registry_factory(monkeypatch):
    import src.core.pipeline as pipeline

    created = []
    original = pipeline.create_energy_term

    def recording_factory(measure, params=None, name=""):
        created.append((measure, name))
        return original(measure, params, name=name)

    monkeypatch.setattr(pipeline, "create_energy_term", recording_factory)
    build_energy_terms(_config([{"measure": "NCC", "name": "sim"}]))
    assert created == [("NCC", "sim")]
