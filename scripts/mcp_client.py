"""Utility script to exercise the poke-forecast FastMCP server via HTTP.

Usage:
    python scripts/mcp_client.py "Porto Alegre" --url http://localhost:3333/mcp
    python scripts/mcp_client.py --classify 24 "nublado"
"""
from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any

from fastmcp import Client


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "args",
        nargs="+",
        help="City name, or TEMPERATURE CONDITION together with --classify",
    )
    parser.add_argument(
        "--url",
        default="http://localhost:3333/mcp",
        help="Base MCP endpoint exposed by the FastMCP server",
    )
    parser.add_argument(
        "--classify",
        action="store_true",
        help="Call classify_weather instead of forecast_pokemon",
    )
    return parser


def _tool_call(args: argparse.Namespace) -> tuple[str, dict[str, Any]]:
    if args.classify:
        temperature, *condition = args.args
        return "classify_weather", {
            "temperature": float(temperature),
            "condition_text": " ".join(condition),
        }
    return "forecast_pokemon", {"city": " ".join(args.args)}


async def _main_async() -> None:
    args = _build_parser().parse_args()
    tool, params = _tool_call(args)

    async with Client(args.url) as client:
        await client.ping()
        result = await client.call_tool(tool, params)
        data = getattr(result, "data", None)
        print(json.dumps(data if data is not None else str(result), indent=2, ensure_ascii=False))


def main() -> None:
    asyncio.run(_main_async())


if __name__ == "__main__":
    main()
