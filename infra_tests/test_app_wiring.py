"""Tests for CDK app stack wiring."""

import os
import subprocess
import sys
from pathlib import Path

_INFRA_DIR = Path(__file__).resolve().parent.parent / "infra"


def _synth(outdir: Path) -> subprocess.CompletedProcess[str]:
    env = {
        **os.environ,
        "CDK_OUTDIR": str(outdir),
        "CDK_ENVIRONMENT": "testing",
        "ETL_API": "https://tak.example.com",
        "ETL_LAYER": "7",
    }
    return subprocess.run(
        [sys.executable, "app.py"],
        cwd=_INFRA_DIR,
        capture_output=True,
        text=True,
        timeout=120,
        env=env,
        check=False,
    )


class TestCdkSynth:
    """Tests that the CDK app synthesizes."""

    def test_cdk_synth_succeeds(self, tmp_path) -> None:
        """The connector stack synthesizes without errors."""
        result = _synth(tmp_path)
        assert result.returncode == 0, f"CDK synth failed:\n{result.stderr}"

    def test_connector_stack_in_output(self, tmp_path) -> None:
        """The environment's connector stack is written to the cloud assembly."""
        _synth(tmp_path)
        assert (tmp_path / "EtlDroneSense-testing.template.json").exists()
