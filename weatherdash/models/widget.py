"""Widget descriptor models consumed by the presentation layer."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from weatherdash.models.common import TemperatureUnit


class WidgetState(StrEnum):
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    POPULATED = "populated"


class IntentKind(StrEnum):
    REFRESH = "refresh"
    RELOAD = "reload"
    SEARCH = "search"
    SET_UNIT = "set_unit"


@dataclass(frozen=True)
class Intent:
    """A user command handed back to the session instead of a callback."""

    kind: IntentKind
    query: str | None = None
    unit: TemperatureUnit | None = None


@dataclass(frozen=True)
class WidgetAction:
    label: str
    intent: Intent
    icon: str | None = None


@dataclass(frozen=True)
class WidgetHeader:
    title: str
    description: str
    variant: str = "h2"


@dataclass(frozen=True)
class WidgetContent:
    state: WidgetState
    message: str | None = None
    body: dict[str, Any] | None = None
    actions: tuple[WidgetAction, ...] = ()


@dataclass(frozen=True)
class WidgetDefinition:
    default_row_span: int
    default_column_span: int
    min_row_span: int | None = None


@dataclass(frozen=True)
class WidgetDescriptor:
    title: str
    description: str
    icon: str
    header: Callable[[], WidgetHeader]
    content: Callable[[], WidgetContent]
    definition: WidgetDefinition
    static_min_height: int | None = None
