import pytest
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
SAMPLE_TREES = Path("/tmp/begone_test_trees")
POLYGLOT_TREE = SAMPLE_TREES / "polyglot"
EMPTY_TREE = SAMPLE_TREES / "empty"

@pytest.fixture(scope="session", autouse=True)
def setup_sample_trees():
    """
    Session-scoped fixture to create the sample workspaces before any tests run,
    and destroy them after all tests complete.
    """
    print("\n[setup] Generating sample trees...")

    script = PROJECT_ROOT / "scripts" / "sample_trees.py"
    subprocess.run([sys.executable, str(script), "polyglot"], check=True)
    subprocess.run([sys.executable, str(script), "empty"], check=True)

    yield

    print("\n[teardown] Destroying sample trees...")
    subprocess.run([sys.executable, str(script), "destroy"], check=True)

def snapshot(root: Path):
    """Every path under root, relative to it, for before/after comparisons."""
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))

@pytest.fixture
def make_tree(tmp_path):
    """
    Build a throwaway tree from relative file paths. Paths ending in '/' become
    empty directories.
    """
    def _make(*paths: str) -> Path:
        for rel in paths:
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("")
        return tmp_path
    return _make
