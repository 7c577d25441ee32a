"""
Name-based registry of the spherical test functions.

Catalog entries register themselves with :func:`register` when
:mod:`sphcollection.functions` is imported, so callers (a quadrature
driver, a benchmark script) can pick test cases by name:

>>> from sphcollection import catalog
>>> f = catalog.get_function("franke")
>>> catalog.list_functions(family="renka")
['renka_f3', 'renka_f4', 'renka_f5']
"""

from typing import Any, Callable, Dict, List, Optional

__all__ = [
    "register",
    "unregister",
    "get_function",
    "list_functions",
    "list_families",
    "get_info",
    "evaluate",
]

SphericalFunction = Callable[[Any, Any], Any]

_registry: Dict[str, Dict[str, Any]] = {}
_aliases: Dict[str, str] = {}


def register(
    family: str,
    reference: Optional[str] = None,
    aliases: tuple = (),
) -> Callable[[SphericalFunction], SphericalFunction]:
    """
    Decorator adding a function to the catalog under its ``__name__``.

    Parameters
    ----------
    family : str
        Provenance group, e.g. ``"renka"`` or ``"custom"``
    reference : str, optional
        Publication the test case is taken from
    aliases : tuple of str
        Extra names the entry can be looked up by

    Returns
    -------
    decorator
        Returns the function unchanged
    """

    def decorator(func: SphericalFunction) -> SphericalFunction:
        name = func.__name__.lower()
        if name in _registry or name in _aliases:
            raise ValueError(f"Function '{name}' is already registered")
        alias_keys = [alias.lower() for alias in aliases]
        for alias in alias_keys:
            if alias in _registry or alias in _aliases or alias == name:
                raise ValueError(f"Alias '{alias}' is already registered")
        if len(set(alias_keys)) != len(alias_keys):
            raise ValueError(f"Duplicate aliases for '{name}': {alias_keys}")

        _registry[name] = {
            "function": func,
            "family": family.lower(),
            "reference": reference,
        }
        for alias in alias_keys:
            _aliases[alias] = name
        return func

    return decorator


def unregister(name: str) -> bool:
    """Remove an entry and its aliases. Returns False if it was not registered."""
    key = name.lower()
    if key not in _registry:
        return False
    del _registry[key]
    for alias in [a for a, target in _aliases.items() if target == key]:
        del _aliases[alias]
    return True


def _resolve(name: str) -> str:
    key = name.lower()
    key = _aliases.get(key, key)
    if key not in _registry:
        available = ", ".join(list_functions())
        raise KeyError(
            f"Function '{name}' not found. Available: {available or 'none'}"
        )
    return key


def get_function(name: str) -> SphericalFunction:
    """
    Look up a catalog entry by name (case-insensitive).

    Raises
    ------
    KeyError
        If no entry or alias matches ``name``
    """
    return _registry[_resolve(name)]["function"]


def list_functions(family: Optional[str] = None) -> List[str]:
    """
    List registered entry names, optionally restricted to one family.

    Raises
    ------
    ValueError
        If ``family`` is given but unknown
    """
    if family is None:
        return sorted(_registry)

    family = family.lower()
    if family not in list_families():
        raise ValueError(
            f"Unknown family '{family}'. Available: {', '.join(list_families())}"
        )
    return sorted(
        name for name, entry in _registry.items() if entry["family"] == family
    )


def list_families() -> List[str]:
    """Sorted names of all provenance families."""
    return sorted({entry["family"] for entry in _registry.values()})


def get_info(name: str) -> Dict[str, Any]:
    """
    Summary of one catalog entry.

    Returns
    -------
    info : dict
        Keys ``name``, ``family``, ``reference`` and ``description`` (the
        first docstring line)
    """
    key = _resolve(name)
    entry = _registry[key]
    doc = (entry["function"].__doc__ or "").strip()
    return {
        "name": key,
        "family": entry["family"],
        "reference": entry["reference"],
        "description": doc.splitlines()[0] if doc else "",
    }


def evaluate(name: str, theta, phi):
    """Evaluate the entry called ``name`` at (theta, phi)."""
    return get_function(name)(theta, phi)
