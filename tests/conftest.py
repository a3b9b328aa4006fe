"""
Shared pytest fixtures for wellness tests.
"""
import pytest
import pendulum
from pathlib import Path

from wellness.core import ActivityStore, Config, Workspace


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """
    Run every test from an empty temporary directory with no wellness
    environment variables set, so nothing reads or writes a real journal.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WELLNESS_CONFIG", raising=False)
    monkeypatch.delenv("WELLNESS_DATA_FILE", raising=False)
    return tmp_path


@pytest.fixture
def d1():
    return pendulum.date(2025, 1, 15)


@pytest.fixture
def d2():
    return pendulum.date(2025, 1, 16)


@pytest.fixture
def d3():
    return pendulum.date(2025, 2, 3)


@pytest.fixture
def sample_store(d1, d2, d3):
    """
    A store with one exercise entry in each casing and a study entry between.
    """
    store = ActivityStore()
    store.add("Exercise", 30, d1, "")
    store.add("Study", 60, d2, "")
    store.add("exercise", 15, d3, "")
    return store


@pytest.fixture
def data_file(tmp_path) -> Path:
    return tmp_path / "wellness_data.txt"


@pytest.fixture
def sample_data_file(data_file):
    """
    A journal file with three well-formed lines.
    """
    data_file.write_text(
        "Exercise,30,15.01.2025,Morning run\n"
        "Study,60,16.01.2025,Algebra\n"
        "Meditation,10,03.02.2025,\n"
    )
    return data_file


@pytest.fixture
def workspace(data_file):
    """
    A Workspace pointed at the temporary journal file.
    """
    return Workspace(Config(data_file=data_file))
