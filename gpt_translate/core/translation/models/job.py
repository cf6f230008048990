"""Translation job models."""

from dataclasses import dataclass
from enum import Enum


class TranslationOutcome(str, Enum):
    """What happened to one output file."""

    WRITTEN = "written"
    SKIPPED = "skipped"  # Translation identical to the existing output


@dataclass(frozen=True)
class TranslationJob:
    """One input file, its derived output path and the target language."""

    input_path: str
    output_path: str
    target_lang: str
