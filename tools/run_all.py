#!/usr/bin/env python3
"""Run the test suite and the simulators, writing artifacts to build/.

This script executes:
- Python unit tests (pytest)
- Orbits simulation (timeseries CSV, distance plot, final frame PNG)
- Impact estimate (JSON)

It writes full logs + data + images into build/reports/.

Usage:
  python3 tools/run_all.py
  python3 tools/run_all.py --out build/reports --frames 500 --eccentricity 0.4
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import os
import shutil
import subprocess
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

# Force headless plotting
import matplotlib

matplotlib.use("Agg")
import numpy as np


REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUT_ROOT = REPO_ROOT / "build" / "reports"


def _utc_stamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%SZ")


def _run_cmd(
    cmd: list[str],
    *,
    cwd: Path,
    log_path: Path,
    env: Optional[dict[str, str]] = None,
) -> int:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("w", encoding="utf-8") as f:
        f.write(f"$ {' '.join(cmd)}\n")
        f.write(f"cwd={cwd}\n\n")
        f.flush()
        proc = subprocess.Popen(
            cmd,
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            env=env,
        )
        assert proc.stdout is not None
        for line in proc.stdout:
            f.write(line)
        return proc.wait()


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    def _default(o: Any):
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, np.generic):
            return o.item()
        if is_dataclass(o):
            return asdict(o)
        return str(o)

    path.write_text(json.dumps(obj, indent=2, sort_keys=True, default=_default) + "\n", encoding="utf-8")


def _frames_to_rows(frames: Iterable[Any]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for f in frames:
        earth = f.state.earth
        asteroid = f.state.asteroid
        rows.append(
            {
                "time_yr": float(f.time_yr),
                "earth_x_au": float(earth.position[0]),
                "earth_y_au": float(earth.position[1]),
                "earth_z_au": float(earth.position[2]),
                "asteroid_x_au": float(asteroid.position[0]),
                "asteroid_y_au": float(asteroid.position[1]),
                "asteroid_z_au": float(asteroid.position[2]),
                "distance_au": float(f.distance_au),
                "asteroid_speed_au_yr": float(f.asteroid_speed_au_yr),
            }
        )
    return rows


def _write_csv(path: Path, rows: list[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not rows:
        path.write_text("", encoding="utf-8")
        return
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)


def _run_simulation_bundle(out_dir: Path, args: argparse.Namespace) -> dict[str, Any]:
    # Import here so repo root is on sys.path
    sys.path.insert(0, str(REPO_ROOT))

    from impact import ImpactEstimator, ImpactParameters, format_summary
    from orbits.core.config import OrbitalConfig
    from orbits.core.integrator import OrbitalIntegrator
    from orbits.core.loop import SimulationLoop
    from orbits.dynamics.diagnostics import orbital_elements
    from orbits.rendering.renderer import OrbitRenderer, plot_distance_history

    results: dict[str, Any] = {}

    config = OrbitalConfig(
        semi_major_axis=args.semi_major_axis,
        eccentricity=args.eccentricity,
        inclination_offset=args.inclination,
    )
    loop = SimulationLoop(OrbitalIntegrator(config), steps_per_frame=args.steps_per_frame)
    frames = loop.run(args.frames)

    rows = _frames_to_rows(frames)
    _write_csv(out_dir / "data" / "orbits_timeseries.csv", rows)

    if rows:
        plot_distance_history(
            np.array([r["time_yr"] for r in rows]),
            np.array([r["distance_au"] for r in rows]),
            out_dir / "images" / "orbits_distance.png",
        )

        renderer = OrbitRenderer()
        renderer.draw(frames[-1].state, loop.trails())
        renderer.save(out_dir / "images" / "orbits.png")
        renderer.close()

    final = loop.integrator.snapshot()
    results["orbits"] = {
        "config": asdict(config),
        "frames": len(rows),
        "final_state": final.to_dict(),
        "asteroid_elements": orbital_elements(final.asteroid),
        "min_distance_au": min((r["distance_au"] for r in rows), default=None),
    }

    # Deterministic population draw for reports/CI
    estimator = ImpactEstimator(rng=np.random.default_rng(0))
    impact = estimator.estimate(ImpactParameters())
    _write_json(out_dir / "data" / "impact.json", impact.to_dict())
    (out_dir / "logs" / "impact_summary.txt").write_text(format_summary(impact), encoding="utf-8")
    results["impact"] = impact.to_dict()

    return results


def main() -> int:
    parser = argparse.ArgumentParser(description="Run tests + simulations and write artifacts into build/")
    parser.add_argument("--out", default=str(DEFAULT_OUT_ROOT), help="Output root (default: build/reports)")
    parser.add_argument("--skip-pytests", action="store_true", help="Skip pytest")
    parser.add_argument("--skip-sim", action="store_true", help="Skip simulations")
    parser.add_argument("--frames", type=int, default=250, help="Animation frames to simulate (default: 250)")
    parser.add_argument("--steps-per-frame", type=int, default=10, help="Integrator steps per frame (default: 10)")
    parser.add_argument("--semi-major-axis", type=float, default=2.5, help="Asteroid semi-major axis [AU]")
    parser.add_argument("--eccentricity", type=float, default=0.2, help="Asteroid eccentricity")
    parser.add_argument("--inclination", type=float, default=0.1, help="Asteroid out-of-plane offset [AU]")
    args = parser.parse_args()

    out_root = Path(args.out)
    stamp = _utc_stamp()
    run_dir = out_root / stamp
    latest_dir = out_root / "latest"

    run_dir.mkdir(parents=True, exist_ok=True)
    (run_dir / "logs").mkdir(exist_ok=True)
    (run_dir / "data").mkdir(exist_ok=True)
    (run_dir / "images").mkdir(exist_ok=True)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        filename=str(run_dir / "logs" / "simulation.log"),
    )

    meta = {
        "timestamp_utc": stamp,
        "python": sys.version,
        "repo": str(REPO_ROOT),
    }
    _write_json(run_dir / "meta.json", meta)

    summary: dict[str, Any] = {"meta": meta, "steps": {}}

    # Pytests
    if not args.skip_pytests:
        code = _run_cmd(
            [
                sys.executable,
                "-m",
                "pytest",
                "-q",
                "--disable-warnings",
                "--maxfail=1",
                f"--junitxml={str(run_dir / 'data' / 'pytest-junit.xml')}",
                "tests",
            ],
            cwd=REPO_ROOT,
            log_path=run_dir / "logs" / "pytest.log",
            env={**os.environ, "PYTHONPATH": str(REPO_ROOT)},
        )
        summary["steps"]["pytest"] = {"exit_code": code}

    # Simulations
    if not args.skip_sim:
        try:
            sim_results = _run_simulation_bundle(run_dir, args)
            _write_json(run_dir / "data" / "simulation_summary.json", sim_results)
            summary["steps"]["simulations"] = {"ok": True, "outputs": list(sim_results.keys())}
        except KeyboardInterrupt:
            (run_dir / "logs" / "simulation_runner_error.log").write_text("KeyboardInterrupt\n", encoding="utf-8")
            summary["steps"]["simulations"] = {"ok": False, "error": "KeyboardInterrupt"}
        except Exception as e:
            logging.getLogger("run_all").exception("Simulation bundle failed")
            (run_dir / "logs" / "simulation_runner_error.log").write_text(str(e) + "\n", encoding="utf-8")
            summary["steps"]["simulations"] = {"ok": False, "error": str(e)}

    _write_json(run_dir / "summary.json", summary)

    # Human-readable summary
    lines = [
        f"Orbits Validation Report ({stamp})",
        f"Output: {run_dir}",
        "",
        "Steps:",
    ]
    for k, v in summary["steps"].items():
        lines.append(f"- {k}: {v}")
    (run_dir / "summary.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")

    # Refresh latest/
    if latest_dir.exists():
        shutil.rmtree(latest_dir)
    shutil.copytree(run_dir, latest_dir)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
