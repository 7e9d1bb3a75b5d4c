#!/usr/bin/env python3
"""Entry point for building a graph and searching it for a cycle count.

Chains the stages into a single command:
graph generation -> matrix-power cycle search -> result.json.

Usage:
    python run_search.py --nodes 10 --cycles 3 --target 3
    python run_search.py --config config.json
    python run_search.py --config config.json --dry-run
    python run_search.py --config config.json --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from src.config import (
    ANCHOR_CONFIG,
    GraphConfig,
    RunConfig,
    SearchConfig,
    config_from_json,
    full_config_hash,
    graph_config_hash,
)
from src.results import generate_run_id
from src.search import CycleSearchResult, Found

log = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.3f}s")
    log.info("Completed: %s in %.3fs", name, elapsed)


def format_outcome(outcome: CycleSearchResult, target: int) -> str:
    """Human-readable summary of a search outcome."""
    if isinstance(outcome, Found):
        return (
            f"Total cycles: {outcome.matched_count} (power {outcome.step})\n"
            f"Calculation time: {outcome.elapsed_ms:.2f} ms "
            f"({outcome.elapsed:.2f} s)"
        )
    return (
        f"Could not find exactly {target} cycles "
        f"(searched {outcome.steps_exhausted} powers)"
    )


def run_pipeline(
    config: RunConfig,
    results_dir: str | Path = "results",
    run_id: str | None = None,
) -> tuple[CycleSearchResult, Path]:
    """Generate the configured graph, search it, and write result.json.

    Args:
        config: Validated run configuration.
        results_dir: Base directory for results output.
        run_id: Result directory name; generated from the config when omitted.

    Returns:
        (outcome, path to result.json).
    """
    from src.graph import generate_from_config
    from src.results import write_result
    from src.search import search_from_config

    with stage_timer("Graph Generation"):
        graph = generate_from_config(config)
        log.info(
            "Graph: n=%d, rule=%s, edges=%d",
            graph.n,
            graph.rule.value,
            graph.edge_count,
        )

    with stage_timer("Cycle Search"):
        outcome = search_from_config(graph, config)

    with stage_timer("Write Result"):
        result_path = write_result(
            config,
            outcome,
            graph=graph,
            results_dir=results_dir,
            run_id=run_id,
        )
        log.info("Result written to %s", result_path)

    return outcome, result_path


def build_config(args: argparse.Namespace) -> RunConfig:
    """Load the base config and apply command-line overrides.

    Raises:
        ValueError: If the resulting configuration is out of range.
        DaciteError: If the config file does not match the schema.
    """
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())
    else:
        config = ANCHOR_CONFIG

    graph = GraphConfig(
        node_count=config.graph.node_count if args.nodes is None else args.nodes,
        cycle_count=config.graph.cycle_count if args.cycles is None else args.cycles,
    )
    search = SearchConfig(
        target_cycle_count=(
            config.search.target_cycle_count if args.target is None else args.target
        ),
    )
    # replace() re-runs __post_init__ validation on the merged values
    return replace(config, graph=graph, search=search)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a directed graph and find the smallest matrix "
        "power whose trace equals a target cycle count"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to run config JSON file (defaults to built-in config)",
    )
    parser.add_argument("--nodes", type=int, default=None, help="Node count")
    parser.add_argument(
        "--cycles", type=int, default=None, help="Cycle count used to build the graph"
    )
    parser.add_argument(
        "--target", type=int, default=None, help="Target cycle count to search for"
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default="results",
        help="Base directory for result.json output",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the run plan without computing anything",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging (per-power traces)",
    )
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        config = build_config(args)
    except (ValueError, DaciteError) as e:
        print(f"Error: invalid input: {e}", file=sys.stderr)
        log.warning("Rejected input: %s", e)
        return EXIT_INVALID_INPUT

    run_id = generate_run_id(config)
    print(f"Run ID:      {run_id}")
    print(f"Config hash: {full_config_hash(config)}")
    print(f"Graph hash:  {graph_config_hash(config)}")
    print()
    print(f"Graph:  nodes={config.graph.node_count}, "
          f"cycles={config.graph.cycle_count}")
    print(f"Search: target={config.search.target_cycle_count}, "
          f"max powers={config.graph.node_count}")

    if args.dry_run:
        print(f"\nRun plan for {run_id}:")
        print(f"  1. Graph generation: {config.graph.node_count} nodes, "
              f"{config.graph.cycle_count} cycles")
        print(f"  2. Cycle search: trace(A^k) == "
              f"{config.search.target_cycle_count} for k <= "
              f"{config.graph.node_count}")
        print(f"  3. Result: {args.results_dir}/{run_id}/result.json")
        print(f"\n[dry-run] Config loaded successfully. Exiting.")
        return 0

    try:
        outcome, result_path = run_pipeline(
            config, args.results_dir, run_id=run_id
        )
    except Exception:
        log.exception("Run failed")
        return EXIT_FAILURE

    print(f"\n{'=' * 60}")
    print(format_outcome(outcome, config.search.target_cycle_count))
    print(f"  Result: {result_path}")
    print(f"{'=' * 60}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
