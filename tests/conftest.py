from pathlib import Path

import pytest
from click.testing import CliRunner

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def comprehensive_html() -> str:
    """Snudown output exercising every supported block and inline tag."""
    return (DATA_DIR / "comprehensive.html").read_text(encoding="utf-8")
