"""Tests for the command-line entry point."""

from __future__ import annotations

import json
from typing import Any

import pytest

import main
from poke_forecast.models import CandidateDetail, StatEntry
from poke_forecast.services import ForecastOrchestrator, WEATHER_NOT_FOUND
from tests.fakes import FakePokeAPI, FakeWeatherClient, listing_payload, make_report


@pytest.fixture
def fake_orchestrator(monkeypatch: pytest.MonkeyPatch) -> None:
    def _factory(**kwargs: Any) -> ForecastOrchestrator:
        return ForecastOrchestrator(
            weather_client=FakeWeatherClient({"Natal": make_report(34.2, "céu limpo")}),
            pokeapi_client=FakePokeAPI(
                {"fire": listing_payload(["charmander"])},
                {
                    "charmander": CandidateDetail(
                        name="charmander",
                        image_url="https://img.test/4.png",
                        stats=[StatEntry(base_stat=39, stat_name="hp")],
                        types=["fire"],
                    )
                },
            ),
            index_picker=lambda low, high: low,
            **kwargs,
        )

    monkeypatch.setattr(main, "ForecastOrchestrator", _factory)


def test_cli_prints_humanized_result(fake_orchestrator, capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["Natal"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Curitiba: 34°C")
    assert "Type: fire" in out
    assert "Pokémon: charmander" in out
    assert "  - hp: 39" in out


def test_cli_json_reports_errors(fake_orchestrator, capsys: pytest.CaptureFixture[str]) -> None:
    assert main.main(["Atlantis", "--json"]) == 1

    payload = json.loads(capsys.readouterr().out)
    assert payload["error"] == WEATHER_NOT_FOUND
    assert payload["loading"] is False


def test_cli_debug_writes_to_stderr(fake_orchestrator, capsys: pytest.CaptureFixture[str]) -> None:
    main.main(["Natal", "--debug"])

    err = capsys.readouterr().err
    assert "[debug]" in err
    assert "-> fire" in err
