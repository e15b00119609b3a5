import sys
from pathlib import Path


def pytest_configure() -> None:
    """Put the project root on sys.path so tests can import the flat modules
    (`walker`, `pixel_canvas`, ...) without installing the project."""

    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))
