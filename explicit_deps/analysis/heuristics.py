"""Package-identity heuristic: which import prefixes may belong to a module."""

from __future__ import annotations

from typing import Iterable


def package_guesses(organization: str, name: str) -> frozenset[str]:
    """Plausible lowercase package prefixes for ``organization:name``.

    >>> sorted(package_guesses("org-x", "mod-y"))
    ['mod.y', 'org.x', 'org.x.mod.y']
    """
    return frozenset(
        candidate.replace("-", ".").lower()
        for candidate in (organization, name, f"{organization}.{name}")
    )


def is_provided_by(import_path: str, guesses: Iterable[str]) -> bool:
    """True if *import_path* starts with any guess (case-insensitive)."""
    lowered = import_path.lower()
    return any(lowered.startswith(guess) for guess in guesses)


def matching_imports(imports: Iterable[str], guesses: Iterable[str]) -> set[str]:
    guesses = tuple(guesses)
    return {imp for imp in imports if is_provided_by(imp, guesses)}
