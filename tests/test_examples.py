"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_route_planning_demo_runs() -> None:
    """Test that examples/route_planning_demo.py runs successfully."""
    script = ROOT / "examples" / "route_planning_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    assert "Shortest route A -> D: A -> D (distance 15.0)" in result.stdout
    assert "No path found from 'A' to 'C'" in result.stdout
    assert "Route planning demo complete" in result.stdout
