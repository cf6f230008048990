"""Translation package.

- paths: glob expansion and output path derivation
- translator: Translator interface and the LLM-backed implementation
- invoker: translate_one, the per-file step with the idempotence skip
- batch: translate_all, bounded concurrent fan-out over files
"""

from .batch import translate_all
from .invoker import translate_one
from .models import TranslationJob, TranslationOutcome
from .paths import derive_output_path, derive_output_paths, expand_glob, extension_hint
from .translator import LLMTranslator, Translator

__all__ = [
    "translate_all",
    "translate_one",
    "TranslationJob",
    "TranslationOutcome",
    "derive_output_path",
    "derive_output_paths",
    "expand_glob",
    "extension_hint",
    "LLMTranslator",
    "Translator",
]
