"""Write a demo catalog expanded from a small seed dataset."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import requests

from symptomcheck.api.core.config import DEFAULT_SEED_PATH
from symptomcheck.api.services.catalog_sources import SourceUnavailable, expand_seed, records_from_payload


def load_seed(location: str) -> Any:
    if location.startswith(("http://", "https://")):
        response = requests.get(location, timeout=30, headers={"Accept": "application/json"})
        response.raise_for_status()
        return response.json()
    return json.loads(Path(location).read_text(encoding="utf-8"))


def main(args: argparse.Namespace) -> int:
    try:
        seed = records_from_payload(load_seed(args.seed))
    except (OSError, ValueError, requests.RequestException, SourceUnavailable) as exc:
        print(f"Could not read seed dataset {args.seed}: {exc}")
        return 1
    if not seed:
        print("Seed dataset contains no usable records.")
        return 1
    expanded = expand_seed(seed, args.target)
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    payload = [record.model_dump() for record in expanded]
    out.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"{len(expanded)} records written to {out} from {len(seed)} seeds.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Expand a seed condition list into a demo catalog.")
    parser.add_argument("--seed", default=str(DEFAULT_SEED_PATH), help="Seed JSON file path or URL")
    parser.add_argument("--target", type=int, default=500, help="Number of records to produce")
    parser.add_argument("--out", required=True, help="Destination JSON file")
    return parser


if __name__ == "__main__":
    sys.exit(main(build_parser().parse_args()))
