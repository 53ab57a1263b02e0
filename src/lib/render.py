"""
Render scopes for collecting editor instances across filter calls.

A host typically runs the filter once per text field, several times while
rendering one page. Every call must add its editors to the same page
manifest, and two pages rendered concurrently must never share one.

A RenderContext holds that page manifest plus the counter used for element
ids. It lives in a ContextVar, so each thread or asyncio task rendering a
page sees only its own context.

Usage:
    with render_scope() as context:
        body = ace_filter.process(body_text, 'en')
        summary = ace_filter.process(summary_text, 'en')
        page_data = context.manifest.js_settings()
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from ..config import appsettings, AppSettings
from ..models.editor import AttributeSet, RenderManifest

_render_context: ContextVar[Optional["RenderContext"]] = ContextVar('render_context', default=None)


class RenderContext:
    """
    State shared by every filter invocation within one render.

    Attributes:
        scope_id: Token distinguishing this render's element ids from others
        manifest: Page manifest, None until the first directive is found
        instance_count: Number of element ids minted so far
    """

    def __init__(self, scope_id: Optional[str] = None, settings: AppSettings = appsettings) -> None:
        self.scope_id = scope_id if scope_id is not None else uuid.uuid4().hex[:8]
        self.settings = settings
        self.manifest: Optional[RenderManifest] = None
        self.instance_count = 0

    def manifest_ensure(self, base_settings: AttributeSet) -> RenderManifest:
        """
        Return the page manifest, creating it on first use.

        base_settings is only captured by the call that creates the manifest.
        """
        if self.manifest is None:
            self.manifest = RenderManifest(base_settings=base_settings)
        return self.manifest

    def elementId_next(self) -> str:
        """Mint the next element id of this render"""
        self.instance_count += 1
        return self.settings.elementId_make(self.scope_id, self.instance_count)

    def __repr__(self) -> str:
        instances = len(self.manifest.instances) if self.manifest else 0
        return f"RenderContext(scope_id='{self.scope_id}', instances={instances})"


def render_current() -> Optional[RenderContext]:
    """The render context active in this thread/task, if any"""
    return _render_context.get()


@contextmanager
def render_scope(context: Optional[RenderContext] = None) -> Iterator[RenderContext]:
    """
    Activate a render context for the duration of a with-block.

    Scopes nest: the previous context is restored on exit.

    Args:
        context: Context to activate; a fresh one by default

    Yields:
        The active RenderContext
    """
    if context is None:
        context = RenderContext()
    token = _render_context.set(context)
    try:
        yield context
    finally:
        _render_context.reset(token)
