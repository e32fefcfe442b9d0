from __future__ import annotations
import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from ..diagramtype import DiagramType
from ..handler_registry import register
from ..models.component import Component, Content
from ..models.definition import Definition
from ..models.line import Line

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]

# incoming and outgoing messages: [-> A, A ->]
_PSEUDO = ("[", "]")
_WORD = re.compile(r'"[^"]+"|[^\s,:]+')


def _is_real(name: str) -> bool:
    return bool(name) and name not in _PSEUDO


def _first_max(names: Sequence[str], values: Sequence[int]) -> Tuple[Optional[str], int]:
    best: Optional[str] = None
    best_value = -1
    for name, value in zip(names, values):
        if value > best_value:
            best, best_value = name, value
    return best, best_value


def _mentions(item: Content, name: str) -> bool:
    if not isinstance(item, Definition):
        return False
    return item.declares(name) or any(name in _WORD.findall(a) for a in item.attached)


@register(DiagramType.SEQUENCE)
class SequenceSorter:
    """Reorders the participants of a sequence diagram.

    The messages themselves keep their order and direction: only the declarations
    in front of them are moved or added. Participants sending to the others go
    left, the ones mostly receiving go right, and strongly connected ones end up
    next to each other.
    """

    def __init__(self, component: Component) -> None:
        self.component = component

    def auto_format(self, rebuild: bool = False) -> Component:
        # participant declarations define the order - regenerated below if needed
        self.component.content = self._remove_participants()
        names = self._appearance_order(self.component.content)
        dep_count, total = self._counts()
        ordered = self._order_names(names, dep_count, total)
        logger.debug("participant order: %s", ordered)
        if ordered != names:
            self.component.content = self._ordered_content(ordered)
        return self.component

    def _remove_participants(self) -> List[Content]:
        # a plain participant no message refers to keeps its lifeline
        used = {name for line in self.component.lines() for name in line.components}
        return [
            c for c in self.component.content
            if not (
                isinstance(c, Definition)
                and c.type == "participant"
                and not c.alias
                and not c.attached
                and c.ref in used
            )
        ]

    @staticmethod
    def _appearance_order(content: Sequence[Content]) -> List[str]:
        names: Dict[str, None] = {}
        for c in content:
            if isinstance(c, Line):
                for name in c.components:
                    if _is_real(name):
                        names.setdefault(name, None)
            elif isinstance(c, Definition):
                names.setdefault(c.ref, None)
        return list(names)

    def _counts(self) -> Tuple[Dict[Pair, int], Dict[str, int]]:
        dep_count: Dict[Pair, int] = {}
        total: Dict[str, int] = {}
        for line in self.component.lines():
            source, target = line.deps()
            if not (_is_real(source) and _is_real(target)):
                continue
            dep_count[(source, target)] = dep_count.get((source, target), 0) + 1
            total[source] = total.get(source, 0) + 1
            total[target] = total.get(target, 0) + 1
        return dep_count, total

    @staticmethod
    def _seed(dep_count: Dict[Pair, int], total: Dict[str, int]) -> Optional[Pair]:
        # strongest connected pair, ties: the busier sender
        best: Optional[Pair] = None
        best_key = (0, 0)
        for (a, b), count in dep_count.items():
            key = (count, total.get(a, 0))
            if a != b and key > best_key:
                best, best_key = (a, b), key
        return best

    def _order_names(
        self, names: List[str], dep_count: Dict[Pair, int], total: Dict[str, int]
    ) -> List[str]:
        remaining = list(names)
        ordered: List[str] = []
        seed = self._seed(dep_count, total)
        if seed is not None:
            ordered = list(seed)
            remaining = [n for n in remaining if n not in seed]

        while remaining:
            out_sums = [sum(dep_count.get((r, k), 0) for k in ordered) for r in remaining]
            in_sums = [sum(dep_count.get((k, r), 0) for k in ordered) for r in remaining]
            left, left_sum = _first_max(remaining, out_sums)
            right, right_sum = _first_max(remaining, in_sums)
            if left_sum == 0 and right_sum == 0:
                # not connected to the ordered names: start a new group on the right
                ordered.append(self._most_connected(remaining, dep_count))
            elif left == right:
                if left_sum >= right_sum:
                    ordered.insert(0, left)
                else:
                    ordered.append(right)
            else:
                # both are taken, one of them may be unconnected (zero sum)
                ordered.insert(0, left)
                ordered.append(right)
            remaining = [n for n in remaining if n not in ordered]
        return ordered

    @staticmethod
    def _most_connected(remaining: List[str], dep_count: Dict[Pair, int]) -> str:
        sums = [
            sum(dep_count.get((r, k), 0) + dep_count.get((k, r), 0) for k in remaining if k != r)
            for r in remaining
        ]
        name, _ = _first_max(remaining, sums)
        return name

    def _ordered_content(self, ordered: List[str]) -> List[Content]:
        declarations: List[Content] = []
        rest = list(self.component.content)
        for name in ordered:
            if any(_mentions(d, name) for d in declarations):
                continue
            found = next((c for c in rest if isinstance(c, Definition) and c.declares(name)), None)
            if found is not None:
                rest.remove(found)
                declarations.append(found)
            else:
                declarations.append(
                    Definition("participant", name.strip('"'), print_name=name)
                )
        return declarations + rest
