from pathlib import Path

from clientreport.summarization.exceptions import SummarizerError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled prompt template by file name.

    Args:
        name: File name inside the prompt directory, e.g. "summary_prompt.txt".
        prompt_dir: Directory override. Defaults to the bundled prompts/.

    Raises:
        SummarizerError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise SummarizerError(f"Failed to load prompt {name}: {exc}") from exc
