"""
Shared test fixtures.

Everything here is in-memory or under pytest's tmp_path:
- Job lists are built directly from Job values
- Job files are written to a temporary directory
- HTTP tests talk to the FastAPI app through httpx's ASGITransport
  (no server, no network)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from models.job import Job


def make_jobs(*records: tuple[str, int, int]) -> list[Job]:
    """Helper: make_jobs(("A", 3, 5), ("B", 2, 3)) → [Job("A", 3, 5), Job("B", 2, 3)]."""
    return [Job(name=name, p=p, d=d) for name, p, d in records]


@pytest.fixture
def three_jobs() -> list[Job]:
    """The A/B/C example: EDF orders it B, A, C."""
    return make_jobs(("A", 3, 5), ("B", 2, 3), ("C", 4, 10))


@pytest.fixture
def job_file(tmp_path):
    """A job list file holding the A/B/C example."""
    path = tmp_path / "jobs.txt"
    path.write_text("A/3/5\nB/2/3\nC/4/10\n", encoding="utf-8")
    return path


@pytest_asyncio.fixture
async def client():
    """
    Test HTTP client that talks directly to the FastAPI app.

    ASGITransport means requests go to the app in-process,
    no HTTP server or network involved.
    """
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
