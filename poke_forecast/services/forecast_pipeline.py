"""Sequential weather -> type -> Pokémon pipeline with observable session state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..analysis import classify, round_half_up
from ..clients import OpenWeatherClient, PokeAPIClient
from ..models import CandidateDetail, SessionState, WeatherReport
from ..utils import pick_index

WEATHER_NOT_FOUND = "Cidade não encontrada"
LISTING_FAILED = "Cidade não encontrada. Tente novamente!"
GENERIC_FAILURE = "Algo deu errado. Sry. Tente novamente!"

T = TypeVar("T")

StateListener = Callable[[SessionState], None]


@dataclass
class StageResult(Generic[T]):
    """Outcome of one stage: either a value or a user-facing error message."""

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ----------------------------------------------------------------------
# State transitions
# ----------------------------------------------------------------------
def begin_request(state: SessionState) -> SessionState:
    return replace(state, loading=True, error=None, report=None, detail=None)


def fail_request(state: SessionState, message: str) -> SessionState:
    return replace(state, error=message, loading=False, report=None, detail=None)


def publish_result(
    state: SessionState,
    *,
    category: str,
    detail: CandidateDetail,
    report: WeatherReport,
) -> SessionState:
    return replace(state, category=category, detail=detail, report=report)


def finish_request(state: SessionState) -> SessionState:
    return replace(state, loading=False)


class ForecastOrchestrator:
    """Owns the session state and runs the three network stages in order."""

    def __init__(
        self,
        *,
        weather_client: Optional[OpenWeatherClient] = None,
        pokeapi_client: Optional[PokeAPIClient] = None,
        index_picker: Optional[Callable[[int, int], int]] = None,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.weather = weather_client or OpenWeatherClient()
        self.pokeapi = pokeapi_client or PokeAPIClient()
        self.index_picker = index_picker or pick_index
        self._debug_logger = debug_logger
        self._state = SessionState()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for every state change; returns an unsubscriber."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def submit(self, city: str) -> SessionState:
        """Run the whole lookup for ``city``. Never raises."""

        try:
            self._set_state(begin_request(self._state))
            outcome = self._run(city)
            if not outcome.ok:
                self._set_state(fail_request(self._state, outcome.error))
        except Exception as exc:
            self._debug(f"Forecast for {city!r} failed unexpectedly: {exc!r}")
            self._set_state(fail_request(self._state, GENERIC_FAILURE))
        finally:
            final = finish_request(self._state)
            self._set_state(final)
        return final

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------
    def _run(self, city: str) -> StageResult[CandidateDetail]:
        weather = self._fetch_weather(city)
        if not weather.ok:
            return StageResult(error=weather.error)
        report = weather.value

        temperature = round_half_up(report.temp)
        condition_text = report.primary_condition.description
        category = classify(temperature, condition_text)
        self._debug(f"{city!r}: {temperature}°C, {condition_text!r} -> {category}")

        listing = self._fetch_listing(category)
        if not listing.ok:
            return StageResult(error=listing.error)

        detail = self._fetch_detail(listing.value)
        if not detail.ok:
            return detail

        self._set_state(
            publish_result(
                self._state,
                category=category,
                detail=detail.value,
                report=report,
            )
        )
        return detail

    def _fetch_weather(self, city: str) -> StageResult[WeatherReport]:
        try:
            return StageResult(value=self.weather.get_weather_report(city))
        except Exception as exc:
            self._debug(f"Weather lookup for {city!r} failed: {exc}")
            return StageResult(error=WEATHER_NOT_FOUND)

    def _fetch_listing(self, category: str) -> StageResult[Dict[str, Any]]:
        try:
            return StageResult(value=self.pokeapi.get_type(category))
        except Exception as exc:
            self._debug(f"Listing for type {category!r} failed: {exc}")
            return StageResult(error=LISTING_FAILED)

    def _fetch_detail(self, listing: Dict[str, Any]) -> StageResult[CandidateDetail]:
        try:
            candidates = self.pokeapi.parse_candidates(listing)
            chosen = candidates[self.index_picker(0, len(candidates))]
            self._debug(f"Picked {chosen.name} out of {len(candidates)} candidates")
            return StageResult(value=self.pokeapi.get_pokemon_detail(chosen))
        except Exception as exc:
            self._debug(f"Detail fetch failed: {exc!r}")
            return StageResult(error=GENERIC_FAILURE)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _set_state(self, state: SessionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as exc:
                self._debug(f"State listener {listener!r} failed: {exc!r}")

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)
