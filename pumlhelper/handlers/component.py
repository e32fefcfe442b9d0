from __future__ import annotations
import logging
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Optional

from ..diagramtype import DiagramType
from ..errors import InternalInvariantViolation
from ..handler_registry import register
from ..models.component import Component
from ..models.definition import Definition
from ..models.line import Line

logger = logging.getLogger(__name__)


def _strip_brackets(name: str) -> str:
    if name.startswith("[") and name.endswith("]"):
        return name[1:-1]
    return name


def transitive_closure(deps: Dict[str, List[str]]) -> Dict[str, List[str]]:
    """Everything reachable from each key: A -> B and B -> C gives A -> [B, C]."""
    closure: Dict[str, List[str]] = {}
    for key, direct in deps.items():
        reached = list(direct)
        frontier = list(direct)
        while frontier:
            found: List[str] = []
            for name in frontier:
                for dep in deps.get(name, ()):
                    if dep not in reached:
                        reached.append(dep)
                        found.append(dep)
            frontier = found
        closure[key] = reached
    return closure


@register(DiagramType.CLASS_COMPONENT)
class ComponentSorter:
    """Orders the connections of a class/component diagram from sources to sinks."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def auto_format(self, rebuild: bool = False) -> Component:
        self.restructure()
        if rebuild:
            self._map_lines(Line.with_default_direction)
        self._sort()
        self._sort_packages()
        return self.component

    def restructure(self) -> None:
        names = self._component_names(self.component)
        if self.component.children:
            # connections are drawn at top level only; extracting replaces the content list
            extracted = self._extract_lines()
            self.component.content.extend(extracted)
        self._rename_components(names)

    def _map_lines(self, fun: Callable[[Line], Line]) -> None:
        self.component.content = [
            fun(c) if isinstance(c, Line) else c for c in self.component.content
        ]

    # ---------- sorting ----------
    def _sort(self) -> None:
        orig = self._initial_sort()
        # everything that is not a connection stays in front, unchanged
        others = list(self.component.non_lines())
        result: List[Line] = []
        idx = 0
        while orig:
            if idx == len(result):
                result.append(orig.pop(0))
            # pull in the lines sharing an endpoint: left side first, then right
            for name in result[idx].components:
                result.extend(line for line in orig if line.has(name))
                orig = [line for line in orig if not line.has(name)]
            idx += 1
        self.component.content = others + result

    def _initial_sort(self) -> List[Line]:
        order = {name: i for i, name in enumerate(self._sort_by_dependencies())}

        def key(line: Line):
            return (
                order.get(line.components[0], -1),
                line.combined_direction(),
                order.get(line.components[1], -1),
            )

        return sorted(self.component.lines(), key=key)

    def _sort_by_dependencies(self) -> List[str]:
        deps = self._calc_dependencies()
        pointed = self._calc_pointed_counts(deps)
        first = {name: i for i, name in enumerate(deps)}
        # least pointed to first, then the ones depending on most others
        order = sorted(deps, key=lambda n: (pointed[n], -len(deps[n]), first[n]))
        logger.debug("dependency order: %s", order)
        return order

    def _calc_dependencies(self) -> Dict[str, List[str]]:
        # visual order: left token depends on the right one
        deps: Dict[str, List[str]] = {}
        for line in self.component.lines():
            source, target = line.components
            deps.setdefault(source, []).append(target)
        return deps

    @staticmethod
    def _calc_pointed_counts(deps: Dict[str, List[str]]) -> Dict[str, int]:
        pointed = {name: 0 for name in deps}
        for targets in transitive_closure(deps).values():
            for t in targets:
                pointed[t] = pointed.get(t, 0) + 1
        return pointed

    def _sort_packages(self) -> None:
        lines = list(self.component.lines())

        def compare(c1: Component, c2: Component) -> int:
            # packages whose names are used first go last
            for line in lines:
                for name in line.component_names():
                    if c1.contains_name(name):
                        return 1
                    if c2.contains_name(name):
                        return -1
            raise InternalInvariantViolation(
                f"No connection refers to {c1.type} {c1.name!r} or {c2.type} {c2.name!r}."
            )

        def sort_children(c: Component) -> None:
            if len(c.children) > 1:
                c.children = sorted(c.children, key=cmp_to_key(compare))

        self.component.for_all(sort_children)

    # ---------- names ----------
    def _component_names(
        self, comp: Component, ancestors: Optional[Dict[str, str]] = None
    ) -> Dict[str, str]:
        """Maps every name used in `comp` to the way it is printed in connections.

        Names only used in connections get an implicit declaration in their package.
        """
        ancestors = ancestors or {}
        self._remove_leading_dots(comp)
        names: Dict[str, str] = {}
        if comp.name:
            names[comp.name] = f"[{comp.name}]" if comp.is_component() else comp.name
        for d in comp.definitions():
            self._add_definition(d, names)

        # dicts as ordered sets
        line_components: Dict[str, None] = {}
        line_interfaces: Dict[str, None] = {}
        for line in comp.lines():
            for c in line.components:
                name = _strip_brackets(c)
                if name not in names:
                    target = line_components if name != c else line_interfaces
                    target[name] = None

        inherited = {**ancestors, **names}
        for child in comp.children:
            for k, v in self._component_names(child, inherited).items():
                line_components.pop(k, None)
                names[k] = v

        components = [n for n in line_components if n not in ancestors]
        for n in components:
            names[n] = f"[{n}]"
        interfaces = [
            n for n in line_interfaces
            if n not in names
            and n not in ancestors
            and not (comp.is_namespace() and "." in n)
        ]
        for n in interfaces:
            names[n] = n

        if comp.name:
            # any component -> component diagram, otherwise a class diagram
            has_components = bool(components) or any(v.startswith("[") for v in names.values())
            self._add_definitions(comp, interfaces, "interface" if has_components else "class")
            self._add_definitions(comp, components, "component")
        return names

    @staticmethod
    def _add_definition(d: Definition, names: Dict[str, str]) -> None:
        printable = d.alias or (d.name if d.is_component() else d.print_name or d.name)
        canonical = f"[{printable}]" if d.is_component() else printable
        names[d.name] = canonical
        if d.alias:
            names[d.alias] = canonical
        if d.print_name and not d.is_component():
            names[d.print_name] = canonical

    @staticmethod
    def _add_definitions(comp: Component, names: Iterable[str], def_type: str) -> None:
        for name in names:
            comp.content.insert(0, Definition(def_type, name))

    @staticmethod
    def _remove_leading_dots(comp: Component) -> None:
        # .a.b is a.b - a leading dot alone marks the global namespace: kept
        if not comp.is_namespace():
            return
        for line in comp.lines():
            for i, c in enumerate(line.components):
                if c.startswith(".") and "." in c[1:]:
                    line.components[i] = c[1:]

    def _extract_lines(self) -> List[Line]:
        extracted: List[Line] = []

        def take(c: Component) -> None:
            lines = list(c.lines())
            for line in lines:
                line.sides[0] = line.sides[0].lstrip()
                if c.is_namespace() and c.name:
                    self._add_namespace(line, c.name)
            if lines:
                c.content = list(c.non_lines())
            extracted.extend(lines)

        self.component.for_all(take)
        return extracted

    @staticmethod
    def _add_namespace(line: Line, namespace: str) -> None:
        for i, name in enumerate(line.components):
            if name.rfind(".") < 1:
                line.components[i] = name[1:] if name.startswith(".") else f"{namespace}.{name}"

    def _rename_components(self, names: Dict[str, str]) -> None:
        # add [] to components, replace aliases
        for line in self.component.lines():
            for i, c in enumerate(line.components):
                canonical = names.get(_strip_brackets(c))
                if canonical is not None:
                    line.components[i] = canonical
