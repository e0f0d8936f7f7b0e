"""Tests for tabcolor data models."""

from types import MappingProxyType

from tabcolor.models import (
    AncestorChain,
    DetectionResult,
    ProcessDescriptor,
    Profile,
    ProfileNode,
    ProfileStore,
    ShellKind,
    TerminalKind,
)


def test_process_descriptor_creation():
    """Test ProcessDescriptor dataclass creation."""
    proc = ProcessDescriptor(pid=123, name="zsh", parent_pid=45)

    assert proc.pid == 123
    assert proc.name == "zsh"
    assert proc.parent_pid == 45


def test_process_descriptor_is_frozen():
    """Test that ProcessDescriptor is immutable (frozen)."""
    proc = ProcessDescriptor(pid=1, name="init", parent_pid=0)

    try:
        proc.pid = 999
        raise AssertionError("Should have raised FrozenInstanceError")
    except AttributeError:
        pass  # Expected behavior for frozen dataclass


def test_models_use_slots():
    """Test that the models use __slots__."""
    assert not hasattr(ProcessDescriptor(pid=1, name="x", parent_pid=0), "__dict__")
    assert not hasattr(Profile(), "__dict__")
    assert not hasattr(DetectionResult(), "__dict__")


def test_ancestor_chain_names_and_len():
    """Test AncestorChain exposes names in order and iterates over them."""
    chain = AncestorChain(
        processes=(
            ProcessDescriptor(pid=10, name="zsh", parent_pid=9),
            ProcessDescriptor(pid=9, name="zsh", parent_pid=8),
            ProcessDescriptor(pid=8, name="tmux: server", parent_pid=1),
        )
    )

    assert chain.names == ("zsh", "zsh", "tmux: server")
    assert list(chain) == ["zsh", "zsh", "tmux: server"]
    assert len(chain) == 3
    assert chain.complete is True


def test_terminal_kind_parse():
    """Test TerminalKind.parse accepts canonical names in any case."""
    assert TerminalKind.parse("iterm2") is TerminalKind.ITERM2
    assert TerminalKind.parse("SSH") is TerminalKind.SSH
    assert TerminalKind.parse(" tmux ") is TerminalKind.TMUX
    assert TerminalKind.parse("") is None
    assert TerminalKind.parse(None) is None
    assert TerminalKind.parse("konsole") is None
    assert TerminalKind.parse("unknown") is None


def test_kind_string_values():
    """Test kinds render as their lowercase config keys."""
    assert str(TerminalKind.ETTERMINAL) == "etterminal"
    assert str(ShellKind.ZSH) == "zsh"


def test_detection_result_defaults():
    """Test DetectionResult defaults to nothing detected."""
    result = DetectionResult()

    assert result.terminals == ()
    assert result.shell is ShellKind.UNKNOWN
    assert result.valid is False


class TestProfileOverlay:
    """Tests for Profile.overlay."""

    def test_overlay_with_empty_is_identity(self):
        """Test overlaying an empty profile changes nothing."""
        profile = Profile(tab="blue", foreground="white", background=None, preset="Ocean")

        assert profile.overlay(Profile()) == profile

    def test_empty_base_takes_overlay(self):
        """Test an empty base is a left identity."""
        overlay = Profile(tab="red", background="black")

        assert Profile().overlay(overlay) == overlay

    def test_overlay_precedence(self):
        """Test terminal layer beats shell layer beats base."""
        base = Profile(tab="blue", foreground="white", background="black", preset="Base")
        shell = Profile(tab="cyan", foreground="yellow")
        terminal = Profile(tab="purple", background="darkgray")

        result = base.overlay(shell).overlay(terminal)

        assert result == Profile(
            tab="purple", foreground="yellow", background="darkgray", preset="Base"
        )

    def test_empty_string_does_not_override(self):
        """Test empty strings count as unset."""
        base = Profile(tab="blue")

        assert base.overlay(Profile(tab="")).tab == "blue"

    def test_is_empty(self):
        """Test is_empty reflects whether any field is set."""
        assert Profile().is_empty
        assert Profile(tab="").is_empty
        assert not Profile(preset="Ocean").is_empty


def test_profile_node_child_lookup():
    """Test ProfileNode.child returns None for missing keys."""
    child = ProfileNode(profile=Profile(tab="green"))
    node = ProfileNode(profile=Profile(tab="blue"), children=MappingProxyType({"tmux": child}))

    assert node.child("tmux") is child
    assert node.child("ssh") is None


def test_profile_store_names_keep_order():
    """Test ProfileStore lists names in insertion order."""
    store = ProfileStore(profiles=MappingProxyType({"work": ProfileNode(), "home": None}))

    assert store.names() == ["work", "home"]
    assert "home" in store
    assert "other" not in store
