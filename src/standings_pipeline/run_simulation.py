"""Simulate a season's draft lottery from CSV exports and write a report.

Usage:
    python -m src.standings_pipeline.run_simulation [season_id] [runs] [data_dir]

Examples:
    python -m src.standings_pipeline.run_simulation
    python -m src.standings_pipeline.run_simulation s2024 20000
    python -m src.standings_pipeline.run_simulation s2024 10000 /path/to/csvs
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from src.lottery_engine.lottery_session import LotterySession
from src.lottery_engine.override_store import JsonOverrideStore, OverrideStore
from src.logging_config import setup_logging
from src.simulation_engine.config import DEFAULT_SIMULATION_RUNS, PICK_ONE_TOLERANCE
from src.simulation_engine.odds_simulator import OddsSimulator
from src.standings_pipeline.config import RAW_DATA_DIR, REPORTS_DIR
from src.standings_pipeline.league_store import CsvLeagueStore

logger = logging.getLogger(__name__)


def run_simulation(
    season_id: str | None = None,
    runs: int = DEFAULT_SIMULATION_RUNS,
    data_dir: Path | None = None,
    output_dir: Path | None = None,
    override_store: OverrideStore | None = None,
) -> Path:
    """Resolve a season's seeds, simulate the lottery and save a JSON report.

    Args:
        season_id: Season to simulate. Defaults to the most recent year.
        runs: Number of independent draws.
        data_dir: Directory containing seasons/teams/standings CSVs.
            Defaults to ``data/raw``.
        output_dir: Directory for the report. Defaults to ``data/reports``.
        override_store: Source of admin overrides. Defaults to the JSON
            store under ``data/overrides``.

    Returns:
        Path to the generated JSON report.

    Raises:
        FileNotFoundError: If the data directory doesn't exist.
        ValueError: If the season is unknown or has no standings.
    """
    if data_dir is None:
        data_dir = RAW_DATA_DIR
    if output_dir is None:
        output_dir = REPORTS_DIR
    if override_store is None:
        override_store = JsonOverrideStore()

    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    logger.info("Starting lottery simulation (data: %s, runs: %d)", data_dir, runs)

    # 1. Load league data
    logger.info("Step 1/3: Loading league data...")
    session = LotterySession(CsvLeagueStore(data_dir), override_store)
    default_season = session.load()
    season_id = season_id or default_season

    known = {s.id for s in session.seasons}
    if season_id is None or season_id not in known:
        raise ValueError(f"Unknown season: {season_id!r}")
    if season_id != session.selected_season_id:
        session.select_season(season_id)
    if not session.seeds:
        raise ValueError(f"Season {season_id} has no standings to draw from")

    # 2. Simulate
    logger.info("Step 2/3: Simulating %d draws over %d seeds...", runs, len(session.seeds))
    simulator = OddsSimulator(session.engine)
    result = simulator.simulate(session.seeds, runs)
    comparison = simulator.compare_to_table(result, session.odds_table)

    pick_one = comparison[comparison["pick"] == 1]
    worst_diff = float(pick_one["diff"].abs().max())
    if worst_diff > PICK_ONE_TOLERANCE:
        logger.warning(
            "Pick 1 odds deviate from the table by up to %.2f points", worst_diff
        )

    # 3. Output JSON
    logger.info("Step 3/3: Writing report...")
    report = {
        "metadata": {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "season_id": season_id,
            "runs": runs,
            "total_seeds": len(session.seeds),
        },
        "seeds": [
            {
                "seed": seed.seed_number,
                "team_id": seed.team_id,
                "team_name": seed.team.name,
                "record": seed.record_label,
                "original_position": seed.original_position,
                "effective_position": seed.effective_position,
                "pick_frequencies": {
                    col: float(val)
                    for col, val in result.frequencies.loc[seed.seed_number].items()
                },
            }
            for seed in session.seeds
        ],
        "lottery_comparison": comparison.to_dict(orient="records"),
        "sample_draw": session.engine.draw(session.seeds).to_dict(),
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"lottery_{season_id}.json"

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)

    logger.info("Simulation complete! Output: %s", output_file)
    logger.info(
        "  Seed 1 -> pick 1: %.2f%% (table: %.1f%%)",
        result.frequency(1, 1),
        session.odds_table.lookup(1, 1),
    )

    return output_file


if __name__ == "__main__":
    setup_logging()

    season_id = sys.argv[1] if len(sys.argv) > 1 else None
    runs = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_SIMULATION_RUNS
    data_dir = Path(sys.argv[3]) if len(sys.argv) > 3 else None

    try:
        output = run_simulation(season_id, runs, data_dir)
        print(f"Simulation complete: {output}")
    except Exception:
        logger.exception("Simulation failed")
        sys.exit(1)
