"""Component resolver - Expand a component into its ordered dependency closure.

Dependencies are weak references: plain names looked up in the catalog at
resolution time.

Cycles are NOT detected. A name that is already visited counts as satisfied,
so ``A -> B -> A`` resolves to ``[B, A]``. Components reachable only through
a cycle may therefore be installed before something they depend on.
"""

import logging

from .exceptions import ComponentNotFoundError
from .schema import Catalog
from .schema import ComponentDescriptor

logger = logging.getLogger(__name__)


class ComponentResolver:
    """
    Resolve component names to an ordered installation list.

    Each call to resolve() uses its own visited set, so repeated resolutions
    against the same catalog never interfere.

    Example:
        >>> resolver = ComponentResolver(catalog)
        >>> [c.name for c in resolver.resolve("Table")]
        ['Loading', 'Empty', 'Table']
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def resolve(self, component_name: str) -> list[ComponentDescriptor]:
        """
        Resolve a component and all its transitive dependencies.

        Args:
            component_name: Name of the requested component

        Returns:
            Descriptors with every dependency before its dependents, no duplicates

        Raises:
            ComponentNotFoundError: If the component or any transitive dependency
                is missing from the catalog. No partial result is returned.
        """
        visited: set[str] = set()
        ordered: list[ComponentDescriptor] = []
        self._expand(component_name, visited, ordered)
        logger.debug(f"Resolved '{component_name}' to {[c.name for c in ordered]}")
        return ordered

    def _expand(
        self,
        component_name: str,
        visited: set[str],
        ordered: list[ComponentDescriptor],
    ) -> None:
        if component_name in visited:
            return

        component = self.catalog.get(component_name)
        if component is None:
            raise ComponentNotFoundError(component_name, self.catalog.descriptions())

        # Mark before recursing so a cycle back to this name stops here
        visited.add(component_name)

        for dependency in component.dependencies:
            self._expand(dependency, visited, ordered)

        ordered.append(component)


def resolve_components(catalog: Catalog, component_name: str) -> list[ComponentDescriptor]:
    """Resolve component_name against catalog (see ComponentResolver.resolve)."""
    return ComponentResolver(catalog).resolve(component_name)
