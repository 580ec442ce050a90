"""Render requests as code snippets.

Each target module exposes ``render(request) -> str``. Generators never depend on
one another; :func:`render_snippet` is the single entry point.
"""
from typing import Callable, Optional

from ..conf import settings
from ..exceptions import UnsupportedTargetError
from ..http import Request
from ..logging import getLogger
from ..tracing import get_tracer
from . import go, java, javascript, php, python, rust, shell

logger = getLogger(__name__)

Renderer = Callable[[Request], str]

#: Target identifier -> generator. Several identifiers may share a generator.
TARGETS: dict[str, Renderer] = {
    "shell": shell.render,
    "curl": shell.render,
    "javascript": javascript.render,
    "fetch": javascript.render,
    "python": python.render,
    "go": go.render,
    "rust": rust.render,
    "java": java.render,
    "php": php.render,
}

#: Used for unknown targets unless running in strict mode.
FALLBACK_TARGET = "curl"


def available_targets() -> list[str]:
    """List every registered target identifier."""
    return list(TARGETS)


def get_renderer(target_id: str, *, strict: Optional[bool] = None) -> Renderer:
    """Find the generator registered for ``target_id``.

    Args:
        target_id: e.g. ``python`` or ``fetch``. Case is ignored.
        strict: Raise instead of falling back to curl. Defaults to
            ``settings.STRICT_TARGETS``.

    Raises:
        UnsupportedTargetError: ``target_id`` is unknown and ``strict`` is set.

    Returns:
        The generator.
    """
    renderer = TARGETS.get(target_id.strip().lower())
    if renderer is not None:
        return renderer

    if settings.STRICT_TARGETS if strict is None else strict:
        raise UnsupportedTargetError(target_id)

    logger.warning(
        "Unknown snippet target '%s', rendering %s instead.", target_id, FALLBACK_TARGET
    )
    return TARGETS[FALLBACK_TARGET]


def render_snippet(
    target_id: str, request: Request, *, strict: Optional[bool] = None
) -> str:
    """Render ``request`` for ``target_id``.

    Unknown targets render as curl unless ``strict`` is enabled.
    """
    renderer = get_renderer(target_id, strict=strict)

    with get_tracer().start_as_current_span("render_snippet") as span:
        span.set_attribute("curlbridge.target", target_id)
        return renderer(request)


__all__ = [
    "FALLBACK_TARGET",
    "TARGETS",
    "available_targets",
    "get_renderer",
    "render_snippet",
]
