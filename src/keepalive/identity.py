"""Cache key derivation for render-tree nodes."""

from typing import Iterable

from .models import ComponentOptions, VNode


def component_name(options: ComponentOptions | None) -> str | None:
    """Declared component name, falling back to the registration tag."""
    if options is None:
        return None
    return options.ctor.name or options.tag


def resolve_key(vnode: VNode) -> str:
    """
    Derive the cache key for a component node.

    An explicit key wins. Otherwise the constructor id is used, suffixed with
    ``::<tag>`` when a tag is present: the same constructor may be registered
    as several local components, and those must not share a cache slot.

    Args:
        vnode: Component node (must carry component options)

    Returns:
        Cache key string
    """
    if vnode.key is not None:
        return str(vnode.key)

    options = vnode.component_options
    if options is None:
        raise ValueError("Cannot resolve a cache key for a non-component node")

    key = str(options.ctor.cid)
    if options.tag:
        key += f"::{options.tag}"
    return key


def first_component_child(children: Iterable[VNode] | None) -> VNode | None:
    """Return the first child that is a component node."""
    if not children:
        return None
    for child in children:
        if child is not None and child.is_component:
            return child
    return None


__all__ = ["component_name", "resolve_key", "first_component_child"]
