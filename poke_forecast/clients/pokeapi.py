"""Lightweight wrapper around PokéAPI for type listings and Pokémon details."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from .. import config
from ..models import CandidateDetail, CandidateRef, StatEntry


class PokeAPIClientError(RuntimeError):
    """Raised when the PokeAPI request fails."""


class PokeAPIClient:
    """Small helper client for the type and pokemon endpoints."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: str = "poke-forecast/0.1 (+https://github.com/)",
    ) -> None:
        self.base_url = (base_url or config.pokeapi_base_url()).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.user_agent = user_agent

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_type(self, type_name: str) -> Dict[str, Any]:
        slug = self._slugify_type(type_name)
        return self._get_json(self._build_url(f"type/{slug}"))

    def get_resource(self, url: str) -> Dict[str, Any]:
        """Fetch an absolute resource URL as returned inside listings."""

        return self._get_json(url)

    def get_pokemon_detail(self, ref: CandidateRef) -> CandidateDetail:
        return self.parse_detail(self.get_resource(ref.url))

    # ------------------------------------------------------------------
    # Parsing helpers
    # ------------------------------------------------------------------
    @staticmethod
    def parse_candidates(payload: Dict[str, Any]) -> List[CandidateRef]:
        return [
            CandidateRef(name=slot["pokemon"]["name"], url=slot["pokemon"]["url"])
            for slot in payload["pokemon"]
        ]

    @staticmethod
    def parse_detail(payload: Dict[str, Any]) -> CandidateDetail:
        stats = [
            StatEntry(base_stat=entry["base_stat"], stat_name=entry["stat"]["name"])
            for entry in payload.get("stats", [])
        ]
        types = payload.get("types")
        return CandidateDetail(
            name=payload["name"],
            image_url=payload["sprites"]["other"]["official-artwork"]["front_default"],
            stats=stats,
            types=[slot["type"]["name"] for slot in types] if types is not None else None,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _get_json(self, url: str) -> Dict[str, Any]:
        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            raise PokeAPIClientError(str(exc)) from exc

    def _build_url(self, endpoint: str) -> str:
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}/{endpoint}"

    @staticmethod
    def _slugify_type(type_name: str) -> str:
        slug = type_name.strip().lower().replace(" ", "-")
        return slug
