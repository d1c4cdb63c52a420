"""Render-Tree Data Models."""

import re
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core.logging_config import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ComponentInstance(Protocol):
    """Mounted component owned by the cache once admitted."""

    def destroy(self) -> None:
        """Tear down the instance (DOM, state, timers)."""
        ...


class ComponentDefinition(BaseModel):
    """Component blueprint (constructor)."""

    model_config = ConfigDict(frozen=True)

    cid: int | str = Field(..., description="Constructor identity")
    name: str | None = Field(default=None, description="Declared component name")


class ComponentOptions(BaseModel):
    """Component data carried by a node."""

    model_config = ConfigDict(frozen=True)

    ctor: ComponentDefinition
    tag: str | None = Field(default=None, description="Local registration tag")


class VNode(BaseModel):
    """Render-tree node descriptor, not yet mounted."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    tag: str | None = Field(default=None)
    key: str | int | None = Field(default=None, description="Explicit caller-controlled key")
    component_options: ComponentOptions | None = Field(default=None)
    component_instance: Any = Field(default=None, description="Instance, set by host or cache hit")
    keep_alive: bool = Field(default=False, description="Participates in caching")

    @property
    def is_component(self) -> bool:
        return self.component_options is not None


@dataclass(frozen=True)
class PendingCache:
    """Fresh instance awaiting mount confirmation before admission."""

    key: str
    vnode: VNode


def _is_supported_pattern(value: Any) -> bool:
    return isinstance(value, (str, list, tuple, re.Pattern))


class KeepAliveOptions(BaseModel):
    """Validated cache configuration (include/exclude/max)."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    include: Any = Field(default=None, description="Eligibility whitelist pattern")
    exclude: Any = Field(default=None, description="Eligibility blacklist pattern")
    max: int | None = Field(default=None, gt=0, description="Capacity bound, None = unbounded")

    @field_validator("include", "exclude")
    @classmethod
    def warn_unsupported(cls, v: Any) -> Any:
        """Unsupported shapes are kept; they simply never match."""
        if v is not None and not _is_supported_pattern(v):
            logger.warning("unsupported_pattern", type=type(v).__name__)
        return v

    @field_validator("max", mode="before")
    @classmethod
    def coerce_max(cls, v: Any) -> Any:
        """Accept numeric strings, as a `parseInt` would."""
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return None
            return int(stripped)
        return v
