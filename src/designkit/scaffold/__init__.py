from designkit.scaffold.generator import (
    Level,
    ScaffoldResult,
    StructureResult,
    scaffold,
    scaffold_structure,
    to_kebab,
    to_pascal,
)

__all__ = [
    "Level",
    "ScaffoldResult",
    "StructureResult",
    "scaffold",
    "scaffold_structure",
    "to_kebab",
    "to_pascal",
]
