"""Keymap registry: actions, bindings, and per-key resolution."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Optional

from operand_align.runtime.telemetry import span

from .models import ActionRef, Binding, ResolutionMatch


class KeymapConflictError(RuntimeError):
    """Raised when a new binding overlaps an existing one."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        super().__init__(
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and the bindings that point at them."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._by_key: Dict[tuple[str, str], set[str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def has_action(self, action_id: str) -> bool:
        return action_id in self._actions

    def has_binding(self, binding_id: str) -> bool:
        return binding_id in self._bindings

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflicts = [
                existing
                for existing in self.detect_conflicts(binding)
                if existing.id != binding.id
            ]
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)

            if replace:
                for conflict in conflicts:
                    self._drop(conflict)
                existing = self._bindings.get(binding.id)
                if existing:
                    self._drop(existing)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._by_key.setdefault((binding.mode, binding.key), set()).add(binding.id)
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with span(
            "keymaps::unregister_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ):
            binding = self._bindings.get(binding_id)
            if binding is None:
                return None
            self._drop(binding)
            self._revision += 1
            return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        for binding in list(self._bindings.values()):
            if mode is None or binding.mode == mode:
                yield binding

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        conflicts: list[Binding] = []
        for binding_id in self._by_key.get((binding.mode, binding.key), set()):
            existing = self._bindings[binding_id]
            if _contexts_overlap(binding, existing):
                conflicts.append(existing)
        return conflicts

    def resolve(
        self,
        mode: str,
        key: str,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> Optional[ResolutionMatch]:
        """Highest-priority binding for ``key`` whose ``when`` clauses hold."""

        flags = context or {}
        candidates = [
            self._bindings[binding_id]
            for binding_id in self._by_key.get((mode, key), set())
        ]
        allowed = [binding for binding in candidates if binding.allows(flags)]
        if not allowed:
            return None
        allowed.sort(key=lambda b: (-b.priority, b.id))
        chosen = allowed[0]
        return ResolutionMatch(binding=chosen, action=self.get_action(chosen.action_id))

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        bucket = self._by_key.get((binding.mode, binding.key))
        if bucket is None:
            return
        bucket.discard(binding.id)
        if not bucket:
            self._by_key.pop((binding.mode, binding.key), None)


def _contexts_overlap(left: Binding, right: Binding) -> bool:
    if not left.when and not right.when:
        return True
    left_map = left.when_map
    right_map = right.when_map
    for flag, expected in left_map.items():
        if flag in right_map and right_map[flag] != expected:
            return False
    if not left.when or not right.when:
        return False
    return left_map == right_map


__all__ = ["KeymapConflictError", "KeymapRegistry"]
