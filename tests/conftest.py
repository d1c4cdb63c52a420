"""Pytest configuration and fixtures."""

import os

# Set before keepalive is imported so the cached settings see it
os.environ.setdefault("KEEPALIVE_LOG_LEVEL", "DEBUG")

import pytest
from prometheus_client import CollectorRegistry

from keepalive import ComponentDefinition, ComponentOptions, KeepAlive, Settings, VNode
from keepalive.monitoring import MetricsCollector


# ============================================================================
# Render-tree doubles
# ============================================================================

class FakeComponent:
    """Mounted component instance that counts destroy calls."""

    def __init__(self, label: str | None = None):
        self.label = label
        self.destroy_calls = 0

    def destroy(self) -> None:
        self.destroy_calls += 1

    def __repr__(self) -> str:
        return f"FakeComponent({self.label!r})"


def make_vnode(cid, name=None, tag=None, key=None) -> VNode:
    """Build a fresh component node, as a renderer would on every pass."""
    return VNode(
        tag=f"vue-component-{cid}-{tag or name or 'anonymous'}",
        key=key,
        component_options=ComponentOptions(
            ctor=ComponentDefinition(cid=cid, name=name),
            tag=tag,
        ),
    )


class FakeHost:
    """Drives a KeepAlive through render → mount → mounted/updated."""

    def __init__(self, keep_alive: KeepAlive):
        self.keep_alive = keep_alive
        self.created: list[FakeComponent] = []
        self._mounted = False

    def show(self, *children: VNode) -> VNode | None:
        vnode = self.keep_alive.render(list(children))
        if vnode is not None and vnode.is_component and vnode.component_instance is None:
            instance = FakeComponent(vnode.component_options.ctor.name or vnode.tag)
            vnode.component_instance = instance
            self.created.append(instance)

        if self._mounted:
            self.keep_alive.updated()
        else:
            self.keep_alive.mounted()
            self._mounted = True
        return vnode


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings with the global metrics collector disabled."""
    return Settings(enable_metrics=False)


@pytest.fixture
def registry():
    """Isolated Prometheus registry."""
    return CollectorRegistry()


@pytest.fixture
def metrics(registry):
    """Metrics collector bound to an isolated registry."""
    return MetricsCollector(namespace="test", registry=registry)


@pytest.fixture
def make_keep_alive(settings):
    """Factory for KeepAlive instances using test settings."""

    def factory(**kwargs) -> KeepAlive:
        kwargs.setdefault("settings", settings)
        return KeepAlive(**kwargs)

    return factory


@pytest.fixture
def host_for():
    """Factory wrapping a KeepAlive in a fake rendering host."""
    return FakeHost


@pytest.fixture(name="make_vnode")
def make_vnode_fixture():
    """Component node factory."""
    return make_vnode


@pytest.fixture(name="make_component")
def make_component_fixture():
    """Component instance factory."""
    return FakeComponent
