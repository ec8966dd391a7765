"""Shared display-state policy for every dashboard widget."""

from collections.abc import Callable
from typing import Any

from weatherdash.models.widget import WidgetAction, WidgetContent, WidgetState


def select_state(has_data: bool, loading: bool, error: str | None) -> WidgetState:
    """Pick the display state. Error beats loading, loading beats empty."""
    if error:
        return WidgetState.ERROR
    if loading:
        return WidgetState.LOADING
    if not has_data:
        return WidgetState.EMPTY
    return WidgetState.POPULATED


def resolve_content(
    data: Any,
    loading: bool,
    error: str | None,
    *,
    loading_message: str,
    empty_message: str,
    populate: Callable[[Any], WidgetContent],
    error_actions: tuple[WidgetAction, ...] = (),
    empty_actions: tuple[WidgetAction, ...] = (),
) -> WidgetContent:
    state = select_state(data is not None, loading, error)
    if state == WidgetState.ERROR:
        return WidgetContent(state=state, message=error, actions=error_actions)
    if state == WidgetState.LOADING:
        return WidgetContent(state=state, message=loading_message)
    if state == WidgetState.EMPTY:
        return WidgetContent(state=state, message=empty_message, actions=empty_actions)
    return populate(data)
