"""JSON CLI facade for frontend integration (framework-agnostic)."""

from __future__ import annotations

import argparse
import json
import logging
import random

from tenseflow.config import load_config_from_env
from tenseflow.generator import ExampleGenerator
from tenseflow.normalize import classify_payload, normalize
from tenseflow.reference import load_reference_tables

from .analyzer import AnalysisSession, AnalyzerClient
from .ui_state import build_analysis_ui_feedback, build_display_payload


def _print_json(payload):
    print(json.dumps(payload, ensure_ascii=False))


def main() -> None:
    parser = argparse.ArgumentParser(description="TenseFlow client API facade (JSON output).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible generation.")
    parser.add_argument("--log-level", default="WARNING")

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("example", help="Generate one example for display.")
    batch = sub.add_parser("batch", help="Generate several independent examples.")
    batch.add_argument("--size", type=int, default=10)

    norm = sub.add_parser("normalize", help="Normalize an analyzer response stored in a JSON file.")
    norm.add_argument("--input-json", required=True)

    analyze = sub.add_parser("analyze", help="Send one sentence to the remote analyzer.")
    analyze.add_argument("--sentence", required=True)

    sub.add_parser("reference", help="Dump the active tag/tense reference tables.")
    sub.add_parser("config", help="Show the effective configuration.")

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    config = load_config_from_env()
    tables = load_reference_tables(config.reference_version)

    if args.cmd == "example":
        generator = ExampleGenerator(config, rng=random.Random(args.seed))
        _print_json(build_display_payload([generator.generate_for_display()], tables))
        return

    if args.cmd == "batch":
        generator = ExampleGenerator(config, rng=random.Random(args.seed))
        _print_json(generator.generate_batch(args.size))
        return

    if args.cmd == "normalize":
        with open(args.input_json, "r", encoding="utf-8") as f:
            payload = json.load(f)
        _print_json({"shape": classify_payload(payload), "examples": normalize(payload)})
        return

    if args.cmd == "analyze":
        session = AnalysisSession(client=AnalyzerClient.from_config(config))
        result = session.submit(args.sentence)
        out = build_display_payload(result.examples, tables)
        out["feedback"] = build_analysis_ui_feedback(result)
        out["fallback"] = result.fallback
        _print_json(out)
        return

    if args.cmd == "reference":
        _print_json(tables.as_payload())
        return

    if args.cmd == "config":
        _print_json(config.as_payload())
        return

    raise RuntimeError(f"Unknown command: {args.cmd}")


if __name__ == "__main__":
    main()
