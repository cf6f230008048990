"""Input file expansion and output path derivation."""

import glob
import os
import posixpath
from typing import Optional, Sequence


def expand_glob(pattern: str) -> list[str]:
    """Expand a glob pattern into a sorted list of files (``**`` is recursive)."""
    matches = glob.glob(pattern, recursive=True)
    return sorted(path for path in matches if os.path.isfile(path))


def extension_hint(path: str) -> str:
    """Return the file extension without the dot, e.g. ``"md"``."""
    return os.path.splitext(path)[1].lstrip(".")


def derive_output_path(
    input_path: str, template: str, target_lang: Optional[str] = None
) -> str:
    """Derive one output path from an input path and a template.

    Placeholders:
        {lang}  target language
        {dir}   input directory
        {name}  input file name without its extension
        {ext}   input extension without the dot
        {file}  input base name
        **      input directory
        *       input file name without its extension
    """
    normalized = input_path.replace(os.sep, "/")
    directory, file_name = posixpath.split(normalized)
    directory = "" if directory in ("", ".") else directory
    if directory.startswith("./"):
        directory = directory[2:]
    name, ext = posixpath.splitext(file_name)

    result = template
    if target_lang is not None:
        result = result.replace("{lang}", target_lang)
    result = (
        result.replace("{dir}", directory)
        .replace("{name}", name)
        .replace("{ext}", ext.lstrip("."))
        .replace("{file}", file_name)
        .replace("**", directory)
        .replace("*", name)
    )

    # An empty directory substitution must not leave "//" or a leading "/"
    # that the template itself did not have.
    while "//" in result:
        result = result.replace("//", "/")
    if result.startswith("/") and not template.startswith("/"):
        result = result[1:]
    return result


def derive_output_paths(
    input_paths: Sequence[str], template: str, target_lang: Optional[str] = None
) -> list[str]:
    """Derive one output path per input path, preserving order."""
    return [derive_output_path(path, template, target_lang) for path in input_paths]
