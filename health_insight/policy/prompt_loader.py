from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


class PromptLoadError(Exception):
    """Raised when a bundled instruction file cannot be read."""


def load_prompt(name: str, prompt_dir: Path | None = None) -> str:
    """Load an instruction text by name (``<prompt_dir>/<name>.txt``).

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt '{name}': {exc}") from exc
