from __future__ import annotations

from editcore.keymaps import (
    ActionRef,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
)


def make_action(action_id: str) -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    binding_id: str,
    *,
    key: str = "ctrl+g",
    action_id: str = "core.test",
) -> Binding:
    return Binding.parse(binding_id, key, action_id)


def build_registry(bindings: list[Binding]) -> KeymapRegistry:
    registry = KeymapRegistry()
    action_ids = {binding.action_id for binding in bindings}
    for action_id in action_ids:
        registry.register_action(make_action(action_id))
    for binding in bindings:
        registry.register_binding(binding)
    return registry


def test_resolver_matches_bound_key() -> None:
    binding = make_binding("terminal.ctrl.g")
    resolver = KeymapResolver(build_registry([binding]))

    result = resolver.resolve("ctrl+g")

    assert result.status == "match"
    assert result.match is not None
    assert result.match.binding.id == binding.id
    assert result.match.action.id == "core.test"


def test_resolver_normalizes_modifier_order() -> None:
    binding = make_binding("terminal.select_word", key="ctrl+shift+left")
    resolver = KeymapResolver(build_registry([binding]))

    result = resolver.resolve("shift+ctrl+left")

    assert result.status == "match"
    assert result.token == "ctrl+shift+left"


def test_resolver_accepts_keystrokes() -> None:
    binding = make_binding("terminal.tab", key="tab")
    resolver = KeymapResolver(build_registry([binding]))

    result = resolver.resolve(KeyStroke("tab"))

    assert result.status == "match"


def test_resolver_reports_miss() -> None:
    resolver = KeymapResolver(build_registry([make_binding("terminal.ctrl.g")]))

    assert resolver.resolve("ctrl+h").status == "miss"
    assert resolver.resolve("g").status == "miss"


def test_resolver_treats_unparsable_keys_as_miss() -> None:
    resolver = KeymapResolver(build_registry([]))

    result = resolver.resolve("hyper+x")

    assert result.status == "miss"
    assert result.match is None


def test_resolver_sees_new_bindings() -> None:
    registry = build_registry([])
    resolver = KeymapResolver(registry)

    assert resolver.resolve("x").status == "miss"

    registry.register_action(make_action("core.x"))
    registry.register_binding(make_binding("terminal.x", key="x", action_id="core.x"))

    match = resolver.resolve("x")
    assert match.status == "match"
    assert match.match is not None
    assert match.match.binding.id == "terminal.x"
