"""
Pytest configuration and fixtures for Expert Level Engine tests
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ranking import ExpertRecord, ExpertStats  # noqa: E402


PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(scope="session")
def sample_stats_file():
    """Sample roster shipped with the repository (12 experts)"""
    return PROJECT_ROOT / "data" / "expert_stats.json"


@pytest.fixture(scope="function")
def sample_records():
    """Small roster covering every specialty and tie case"""
    return [
        ExpertRecord("a", ExpertStats(total_sessions=10, avg_rating=4.5, review_count=5, specialty="legal"), name="Alice"),
        ExpertRecord("b", ExpertStats(total_sessions=120, avg_rating=4.9, review_count=60, repeat_clients=30, like_count=80, specialty="health"), name="Bob"),
        ExpertRecord("c", ExpertStats(total_sessions=40, avg_rating=4.9, review_count=20, specialty="legal"), name="Carol"),
        ExpertRecord("d", ExpertStats(total_sessions=80, avg_rating=3.8, review_count=45, like_count=10, specialty="health"), name="Dan"),
        ExpertRecord("e", ExpertStats(), name="Eve"),
    ]


@pytest.fixture(scope="function")
def client(sample_stats_file):
    """FastAPI TestClient bound to the sample roster"""
    from fastapi.testclient import TestClient
    from app.server import app
    from app.dependencies import reset_stats_source
    from database import JsonStatsSource

    reset_stats_source(JsonStatsSource(sample_stats_file))
    yield TestClient(app)
    reset_stats_source(None)


@pytest.fixture(scope="function")
def unavailable_client(tmp_path):
    """TestClient whose stats source points at a missing file"""
    from fastapi.testclient import TestClient
    from app.server import app
    from app.dependencies import reset_stats_source
    from database import JsonStatsSource

    reset_stats_source(JsonStatsSource(tmp_path / "missing.json"))
    yield TestClient(app)
    reset_stats_source(None)
