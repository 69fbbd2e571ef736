import pytest

from editcore.engine import EditorAction
from editcore.keymaps import (
    ActionRef,
    Binding,
    KeymapConflictError,
    KeymapRegistry,
    KeyStroke,
    UnknownActionError,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    key: str = "ctrl+g",
    action_id: str = "core.test",
) -> Binding:
    return Binding.parse(binding_id, key, action_id)


def test_keystroke_parse_normalizes_modifiers() -> None:
    stroke = KeyStroke.parse("shift+ctrl+K")

    assert stroke.key == "k"
    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+k"


def test_keystroke_parse_plus_key() -> None:
    stroke = KeyStroke.parse("ctrl++")

    assert stroke.key == "+"
    assert stroke.modifiers == ("ctrl",)


def test_keystroke_parse_rejects_unknown_modifier() -> None:
    with pytest.raises(ValueError):
        KeyStroke.parse("hyper+x")


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="terminal.ctrl.g")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(action_id="core.test")) == [binding]
    assert registry.binding_for("ctrl+g") == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="first"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="second"))


def test_register_binding_requires_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(UnknownActionError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    first = make_binding(binding_id="first")
    second = make_binding(binding_id="second")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]
    assert registry.binding_for("ctrl+g") == second


def test_register_action_twice_requires_replace() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_action(make_action(), replace=True)
    assert registry.stats().action_count == 1


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.binding_for("ctrl+g") is None
    assert registry.revision() == before + 1
    assert registry.unregister_binding("binding") is None


def test_load_default_keymaps_covers_every_action() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    for action in EditorAction:
        assert registry.has_action(action.value)
    registered = {ref.id for ref in registry.iter_actions()}
    assert registered == {action.value for action in EditorAction}
    assert registry.get_binding("terminal.ctrl.c").action_id == "clipboard.copy"
    assert registry.binding_for("shift+left").action_id == "select.left"


def test_load_default_keymaps_include_and_exclude_filters() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(
        registry,
        include_bindings=("terminal.left", "terminal.right"),
        exclude_bindings=("terminal.right",),
    )

    assert registry.stats().binding_count == 1
    assert registry.get_binding("terminal.left").action_id == "nav.move_left"


def test_load_default_keymaps_without_bindings() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry, bindings=False)

    assert registry.stats().binding_count == 0
    assert registry.stats().action_count == len(EditorAction)


def test_load_default_keymaps_extra_bindings_override() -> None:
    registry = KeymapRegistry()
    custom = Binding.parse("custom.paste", "ctrl+v", "edit.delete_line")

    load_default_keymaps(registry, extra_bindings=(custom,))

    assert registry.binding_for("ctrl+v") == custom
    with pytest.raises(KeyError):
        registry.get_binding("terminal.ctrl.v")
