"""Command-line interface for picking a Pokémon from a city's current weather."""

from __future__ import annotations

import argparse
import json
import sys

from poke_forecast.analysis import round_half_up
from poke_forecast.models import SessionState
from poke_forecast.services import ForecastOrchestrator


def _humanize_state(state: SessionState) -> str:
    report = state.report
    detail = state.detail
    if report is None or detail is None:
        return str(state.error or "")

    condition = report.primary_condition
    lines: list[str] = [
        f"{report.city or 'Cidade'}: {round_half_up(report.temp)}°C "
        f"(min {report.temp_min}°C / max {report.temp_max}°C)",
        f"Condition: {condition.description}",
        f"Type: {state.category}",
        "",
        f"Pokémon: {detail.name}",
    ]
    if detail.types:
        lines.append(f"Types: {', '.join(detail.types)}")
    if detail.image_url:
        lines.append(f"Artwork: {detail.image_url}")
    if detail.stats:
        lines.append("Stats:")
        for stat in detail.stats:
            lines.append(f"  - {stat.stat_name}: {stat.base_stat}")
    return "\n".join(lines)


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the Pokémon that fits a city's weather")
    parser.add_argument("city", help="City name passed to the weather lookup")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the final session state as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    args = parser.parse_args(argv)

    _debug_print(args.debug, f"Arguments parsed: {args}")
    try:
        orchestrator = ForecastOrchestrator(
            debug_logger=(lambda msg: _debug_print(args.debug, msg)),
        )
    except RuntimeError as exc:
        raise SystemExit(str(exc))
    orchestrator.subscribe(
        lambda state: _debug_print(args.debug, f"loading={state.loading} error={state.error}")
    )

    state = orchestrator.submit(args.city)

    if args.json:
        json.dump(state.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print(_humanize_state(state))
    return 1 if state.error else 0


if __name__ == "__main__":
    raise SystemExit(main())
