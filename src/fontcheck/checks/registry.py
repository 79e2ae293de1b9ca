"""Ordered registry of available checks. Registration order is run order."""

from .base import BaseCheck, CheckFunction, FunctionCheck
from .win_metrics import WinAscentDescentCheck

_REGISTRY: dict[str, BaseCheck] = {}


def register(check: BaseCheck | type[BaseCheck] | CheckFunction) -> BaseCheck:
    """Add a check (instance, BaseCheck subclass, or plain function) to the registry."""
    if isinstance(check, type) and issubclass(check, BaseCheck):
        instance = check()
    elif isinstance(check, BaseCheck):
        instance = check
    else:
        instance = FunctionCheck(check)

    if not instance.CODE:
        raise ValueError(f"{instance!r} has no CODE")
    if instance.CODE in _REGISTRY:
        raise ValueError(f"check {instance.CODE!r} is already registered")
    _REGISTRY[instance.CODE] = instance
    return instance


def available_checks() -> list[BaseCheck]:
    return list(_REGISTRY.values())


def get_check(code: str) -> BaseCheck:
    try:
        return _REGISTRY[code]
    except KeyError:
        known = ", ".join(_REGISTRY) or "none"
        raise KeyError(f"unknown check {code!r} (available: {known})") from None


def resolve_checks(codes: list[str] | None = None) -> list[BaseCheck]:
    """Map check codes to registered checks, preserving the given order. Empty means all."""
    if not codes:
        return available_checks()
    return [get_check(code) for code in codes]


register(WinAscentDescentCheck)
