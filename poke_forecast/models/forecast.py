"""Core dataclasses shared by the forecast clients and orchestrator."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class WeatherCondition:
    """A single entry of the weather service ``weather`` array."""

    id: int
    main: str
    description: str
    icon: str


@dataclass(slots=True)
class WeatherReport:
    """Current weather for a city, in metric units."""

    temp: float
    temp_min: float
    temp_max: float
    weather: List[WeatherCondition] = field(default_factory=list)
    city: Optional[str] = None

    @property
    def primary_condition(self) -> WeatherCondition:
        return self.weather[0]


@dataclass(slots=True)
class CandidateRef:
    """Reference to a Pokémon detail resource that has not been fetched yet."""

    name: str
    url: str


@dataclass(slots=True)
class StatEntry:
    base_stat: int
    stat_name: str


@dataclass(slots=True)
class CandidateDetail:
    """Display record for the chosen Pokémon."""

    name: str
    image_url: Optional[str] = None
    stats: List[StatEntry] = field(default_factory=list)
    types: Optional[List[str]] = None


@dataclass(slots=True)
class SessionState:
    """Observable result/error/loading state owned by the orchestrator."""

    error: Optional[str] = None
    loading: bool = False
    report: Optional[WeatherReport] = None
    detail: Optional[CandidateDetail] = None
    category: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
