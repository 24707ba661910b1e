from pathlib import Path
from importlib import metadata as importlib_metadata
import tomllib

DISTRIBUTION_NAME = "org-chart-entities"


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def get_project_version(default: str = "unknown") -> str:
    """
    Version stamped on structured log lines.

    - The installed distribution's metadata when the package is installed.
    - Otherwise project.version from the nearest pyproject.toml (source checkouts).
    - `default` if neither is available.
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass

    pyproject = find_pyproject(Path(__file__).resolve().parent)
    if pyproject is None:
        return default
    with pyproject.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError:
            return default
    return data.get("project", {}).get("version", default)


__all__ = ["find_pyproject", "get_project_version"]
