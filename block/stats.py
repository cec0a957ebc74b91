"""
Dashboard "Admin Stats" block.

Looks up an admin by code, applies the configured filters to its datagrid,
builds the pager, and renders a small counter box linking to the filtered
list. Rendering is Jinja2; the result is a private (non-shared-cache)
HTML response.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from fastapi.responses import HTMLResponse
from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel, ConfigDict, Field
from starlette.responses import Response

from validation.errors import AdminNotFoundError, describe_error

logger = logging.getLogger('AdminAdapters.block.stats')

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


class StatsBlockSettings(BaseModel):
    """Resolved settings of a stats block, with defaults for every option."""

    model_config = ConfigDict(extra="forbid")

    icon: str = "fa-line-chart"
    text: str = "Statistics"
    translation_domain: Optional[str] = None
    color: str = "bg-aqua"
    code: Optional[str] = None
    filters: dict[str, dict[str, Any]] = Field(default_factory=dict)
    limit: int = Field(default=1000, ge=1)
    template: str = "block_stats.html"


@dataclass
class BlockContext:
    """A block instance paired with its resolved settings."""

    block: Any
    settings: StatsBlockSettings
    template: Optional[str] = None

    def get_setting(self, name: str) -> Any:
        return getattr(self.settings, name)

    def get_settings(self) -> dict[str, Any]:
        return self.settings.model_dump()

    def get_template(self) -> str:
        return self.template or self.settings.template


class AdminStatsBlockService:
    """
    Renders the admin statistics block.

    Args:
        name: Service name the block is registered under
        pool: Admin pool; provides get_admin_by_admin_code()
        environment: Jinja2 environment (default: the packaged templates)
        config: Optional AdminAdaptersConfig supplying limit/template defaults
    """

    def __init__(self, name: str, pool: Any, environment: Optional[Environment] = None, config=None):
        self._name = name
        self.pool = pool
        self.environment = environment or _get_env()
        self.config = config

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return 'Admin Stats'

    def configure_settings(self, overrides: Optional[dict[str, Any]] = None) -> StatsBlockSettings:
        """Resolve block settings: defaults, then config, then overrides.

        Raises:
            pydantic.ValidationError: On unknown options or invalid values
        """
        values: dict[str, Any] = {}
        if self.config is not None:
            values['limit'] = self.config.stats_block_limit
            values['template'] = self.config.stats_block_template
        values.update(overrides or {})
        return StatsBlockSettings(**values)

    def create_context(self, block: Any, overrides: Optional[dict[str, Any]] = None) -> BlockContext:
        return BlockContext(block=block, settings=self.configure_settings(overrides))

    def execute(self, block_context: BlockContext, response: Optional[Response] = None) -> Response:
        code = block_context.get_setting('code')
        admin = self.pool.get_admin_by_admin_code(code)
        if admin is None:
            raise AdminNotFoundError(code)

        datagrid = admin.get_datagrid()

        filters = dict(block_context.get_setting('filters'))

        if '_per_page' not in filters:
            filters['_per_page'] = {'value': block_context.get_setting('limit')}

        for name, data in filters.items():
            datagrid.set_value(name, data.get('type'), data['value'])

        datagrid.build_pager()

        return self.render_private_response(block_context.get_template(), {
            'block': block_context.block,
            'settings': block_context.get_settings(),
            'admin_pool': self.pool,
            'admin': admin,
            'pager': datagrid.get_pager(),
            'datagrid': datagrid,
        }, response)

    def render_private_response(
        self,
        template_name: str,
        parameters: dict[str, Any],
        response: Optional[Response] = None
    ) -> Response:
        """Render template_name and mark the response as private."""
        try:
            content = self.environment.get_template(template_name).render(**parameters)
        except Exception as e:
            logger.error(f"Failed to render {template_name}: {describe_error(e)}")
            raise

        if response is None:
            response = HTMLResponse(content=content)
        else:
            response.body = response.render(content)
            response.headers['content-length'] = str(len(response.body))

        response.headers['cache-control'] = 'private'
        return response
