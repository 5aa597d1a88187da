"""HTTP endpoints served by the exporter."""

from .landing import landing_bp
from .metrics import metrics_bp

__all__ = ["landing_bp", "metrics_bp"]
