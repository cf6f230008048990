"""Allow ``python -m gpt_translate``."""

import sys

from gpt_translate.main import run

sys.exit(run())
