"""Load lesson definitions from YAML."""

from pathlib import Path
from typing import Union

import yaml

from tdd_kata.nodes.schemas import Lesson

LESSONS_DIR = Path(__file__).parent.parent / "lessons"


def list_lessons() -> list[str]:
    """Names of the lessons bundled with the package."""
    return sorted(path.stem for path in LESSONS_DIR.glob("*.yml"))


def load_lesson(name_or_path: Union[str, Path]) -> Lesson:
    """Load a lesson by bundled name or from a YAML file path.

    Raises:
        FileNotFoundError: If neither a file nor a bundled lesson matches.
        pydantic.ValidationError: If the file does not describe a valid lesson.
    """
    path = Path(name_or_path)
    if not path.is_file():
        path = LESSONS_DIR / f"{name_or_path}.yml"

    if not path.is_file():
        available = ", ".join(list_lessons()) or "none"
        raise FileNotFoundError(
            f"Lesson '{name_or_path}' not found. Available lessons: {available}"
        )

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return Lesson.model_validate(data)
