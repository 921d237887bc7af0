"""
Demo Runner - Interprets the Calls relations of a sketch

Nothing is executed through Python polymorphism: a call to an interface
or abstract role is resolved against the entry's implements/extends
relations, and every invoked role reports its actions as text lines.

A call may carry an argument. It is passed on along the chain until a
call sets a new one, replaces `{arg}` in the actions of the roles it
reaches, and stops at a role that refuses it.
"""

from typing import List, Optional, Set

from pattern_catalog.config import debug
from pattern_catalog.errors import NoDemoAvailableError, NotFoundError
from pattern_catalog.models import DemoResult, PatternEntry, Role


class DemoRunner:
    """
    Runs the trivial scenario of a single entry.

    A runner holds no state between `run()` calls; output is collected
    into a fresh list each time.
    """

    def __init__(self, entry: PatternEntry):
        self.entry = entry

    def run(self) -> DemoResult:
        callers = [role for role in self.entry.roles if role.is_concrete and role.calls()]
        if not callers:
            raise NoDemoAvailableError(self.entry.name)

        lines: List[str] = []
        for role in self.entry_points(callers):
            debug("DEMO", f"{self.entry.name}: entry point {role.identifier}")
            self._invoke(role, [], lines, "")

        return DemoResult(entry_name=self.entry.name, output_lines=lines)

    def entry_points(self, callers: List[Role]) -> List[Role]:
        """Concrete callers nobody calls; the first caller when everything is called"""
        called: Set[str] = set()
        for role in callers:
            for relation in role.calls():
                callee = self.resolve(relation.target)
                if callee is not None:
                    called.add(callee.identifier)

        roots = [role for role in callers if role.identifier not in called]
        return roots or callers[:1]

    def resolve(self, role_id: str, seen: tuple = ()) -> Optional[Role]:
        """Dispatch to the first concrete role implementing or extending role_id"""
        try:
            role = self.entry.role(role_id)
        except NotFoundError:
            return None
        if role.is_concrete:
            return role

        for candidate in self.entry.roles:
            if role_id in candidate.parents() and candidate.identifier not in seen:
                found = self.resolve(candidate.identifier, seen + (role_id,))
                if found is not None:
                    return found
        return None

    def _invoke(self, role: Role, stack: List[str], lines: List[str], argument: str) -> None:
        for action in role.actions:
            lines.append(f"{role.identifier}: {action.replace('{arg}', argument)}")

        if argument and argument in role.refuses:
            debug("DEMO", f"{role.identifier} refused {argument}")
            lines.append(f"{role.identifier}: {role.refusal.replace('{arg}', argument)}")
            return

        stack.append(role.identifier)
        for relation in role.calls():
            callee = self.resolve(relation.target)
            if callee is None:
                lines.append(f"{role.identifier} -> {relation.target}.{relation.label}")
                continue

            line = f"{role.identifier} -> {callee.identifier}.{relation.label}"
            if callee.identifier != relation.target:
                line += f" (via {relation.target})"
            lines.append(line)

            # re-entering a role already on the stack would loop forever
            if callee.identifier not in stack:
                self._invoke(callee, stack, lines, relation.argument or argument)
        stack.pop()


def run(entry: PatternEntry) -> DemoResult:
    """Run an entry's demo; raises NoDemoAvailableError for pure sketches."""
    return DemoRunner(entry).run()
