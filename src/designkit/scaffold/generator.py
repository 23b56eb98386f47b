"""Atomic design scaffolding: component folders and stub files.

Layout produced by :func:`scaffold`::

    <base>/<level>s/<kebab-name>/
        <kebab-name>.jsx
        index.js
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from designkit.errors import ScaffoldError

__all__ = [
    "Level",
    "ScaffoldResult",
    "StructureResult",
    "scaffold",
    "scaffold_structure",
    "to_kebab",
    "to_pascal",
]

logger = logging.getLogger(__name__)


class Level(StrEnum):
    ATOM = "atom"
    MOLECULE = "molecule"
    ORGANISM = "organism"

    @property
    def folder(self) -> str:
        return f"{self.value}s"

    @property
    def guidance(self) -> str:
        return _GUIDANCE[self]


_GUIDANCE = {
    Level.ATOM: "Single UI element; use design tokens for colors/spacing.",
    Level.MOLECULE: "Combination of atoms; keep to one responsibility.",
    Level.ORGANISM: "Section of UI combining molecules and/or atoms.",
}

_WORD_START_RE = re.compile(r"(?:^|-|\s)(\w)")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")


@dataclass(frozen=True)
class ScaffoldResult:
    path: Path
    files: tuple[Path, ...]


@dataclass(frozen=True)
class StructureResult:
    path: Path
    dirs: tuple[Path, ...]


def to_pascal(name: str) -> str:
    """``product-card`` / ``product card`` -> ``ProductCard``."""
    return _WORD_START_RE.sub(lambda m: m.group(1).upper(), name)


def to_kebab(name: str) -> str:
    """``ProductCard`` -> ``product-card``."""
    return _CAMEL_BOUNDARY_RE.sub(r"\1-\2", name).lower()


def _parse_level(level: str) -> Level:
    try:
        return Level(level.lower())
    except ValueError:
        choices = ", ".join(lv.value for lv in Level)
        raise ScaffoldError(f"Level must be one of: {choices}", level=level) from None


def component_stub(name: str, level: Level) -> str:
    return f"""/**
 * {name} - {level.value}
 * {level.guidance}
 * Tokens: var(--color-*), var(--space-*), var(--font-*), var(--radius-*)
 */

export default function {name}(props) {{
  return (
    <div className="{to_kebab(name)}" data-level="{level.value}">
      {{/* TODO: implement using design tokens */}}
    </div>
  );
}}
"""


def scaffold(component_name: str, level: str, base_path: str | Path = ".") -> ScaffoldResult:
    """Create the folder and stub files for one component.

    Existing files are overwritten. Raises :class:`ScaffoldError` for an
    unknown level or an empty name.
    """
    lv = _parse_level(level)
    name = to_pascal(component_name.strip())
    if not name:
        raise ScaffoldError("Component name must not be empty", level=lv.value)
    kebab = to_kebab(name)
    folder = Path(base_path) / lv.folder / kebab
    folder.mkdir(parents=True, exist_ok=True)

    component_path = folder / f"{kebab}.jsx"
    component_path.write_text(component_stub(name, lv), encoding="utf-8")

    index_path = folder / "index.js"
    index_path.write_text(f"export {{ default }} from './{kebab}';\n", encoding="utf-8")

    logger.info("Scaffolded %s %s at %s", lv.value, name, folder)
    return ScaffoldResult(path=folder, files=(component_path, index_path))


def scaffold_structure(base_path: str | Path = ".") -> StructureResult:
    """Create ``atoms/``, ``molecules/`` and ``organisms/`` with READMEs.

    READMEs that already exist are left untouched.
    """
    base = Path(base_path)
    dirs: list[Path] = []
    for lv in Level:
        directory = base / lv.folder
        directory.mkdir(parents=True, exist_ok=True)
        readme = directory / "README.md"
        if not readme.exists():
            readme.write_text(
                f"# {lv.folder}\n\nAdd {lv.value} components here.\n", encoding="utf-8"
            )
        dirs.append(directory)
    logger.info("Created component structure at %s", base)
    return StructureResult(path=base, dirs=tuple(dirs))
