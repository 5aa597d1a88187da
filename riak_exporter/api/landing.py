"""Static landing page linking to the metrics endpoint."""

from html import escape
from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response

from riak_exporter.config import Settings
from riak_exporter.consts import PROJECT_TITLE
from riak_exporter.services.container import ServiceContainer

landing_bp = Blueprint("landing", __name__)

_LANDING_PAGE = """<html>
<head><title>{title}</title></head>
<body>
<h1>{title}</h1>
<p><a href='{metrics_path}'>Metrics</a></p>
</body>
</html>
"""


@landing_bp.route("/", methods=["GET"])
@inject
def index(settings: Settings = Provide[ServiceContainer.config]) -> Any:
    page = _LANDING_PAGE.format(
        title=PROJECT_TITLE,
        metrics_path=escape(settings.metrics_path, quote=True),
    )
    return Response(page, content_type="text/html; charset=utf-8")
