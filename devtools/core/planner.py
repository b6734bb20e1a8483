"""
Install ordering from declared tool prerequisites.
"""

from typing import List, Sequence, TypeVar

from ..errors import PlanningError

T = TypeVar("T")


def plan_install_order(installers: Sequence[T]) -> List[T]:
    """
    Order installers so every prerequisite runs before its dependents.

    Declared order is kept wherever prerequisites allow it. Each item must
    expose ``spec.name`` and ``spec.requires``.

    Raises:
        PlanningError: on duplicate names, unknown prerequisites or cycles
    """
    by_name = {}
    for installer in installers:
        name = installer.spec.name
        if name in by_name:
            raise PlanningError(f"Duplicate tool in install plan: {name}")
        by_name[name] = installer

    for installer in installers:
        missing = [dep for dep in installer.spec.requires if dep not in by_name]
        if missing:
            raise PlanningError(
                f"{installer.spec.name} requires unknown tool(s): {', '.join(missing)}"
            )

    ordered: List[T] = []
    done = set()
    remaining = list(installers)
    while remaining:
        for installer in remaining:
            if all(dep in done for dep in installer.spec.requires):
                ordered.append(installer)
                done.add(installer.spec.name)
                remaining.remove(installer)
                break
        else:
            names = ", ".join(i.spec.name for i in remaining)
            raise PlanningError(f"Circular tool prerequisites among: {names}")
    return ordered
