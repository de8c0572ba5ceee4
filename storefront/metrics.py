import os

from flask import current_app, request
from prometheus_client import CollectorRegistry, Counter
from prometheus_flask_exporter import PrometheusMetrics


class StorefrontMetrics:
    """Request metrics from the exporter plus storefront counters on the same registry."""

    def __init__(self, exporter: PrometheusMetrics):
        self.exporter = exporter
        registry = exporter.registry
        self.errors = Counter(
            "flask_error_total",
            "Count of HTTP responses with status >= 400",
            ["endpoint", "method", "code"],
            registry=registry,
        )
        self.orders_placed = Counter(
            "storefront_orders_placed_total",
            "Orders placed through checkout",
            ["shipping_method"],
            registry=registry,
        )
        self.cart_adds = Counter(
            "storefront_cart_add_total",
            "Add-to-cart requests accepted",
            registry=registry,
        )


def init_metrics(app) -> StorefrontMetrics:
    """Expose /metrics and attach the error counter hook."""
    # Each test app gets its own registry; collectors may only register once per registry.
    registry = CollectorRegistry() if app.config.get("TESTING") else None
    exporter = PrometheusMetrics(app, path="/metrics", registry=registry)
    if not app.config.get("TESTING") and not os.environ.get("METRICS_APP_INFO_SET"):
        exporter.info("app_info", "Application info", version="1.0.0")
        os.environ["METRICS_APP_INFO_SET"] = "1"

    metrics = StorefrontMetrics(exporter)
    app.extensions["storefront_metrics"] = metrics

    @app.after_request
    def track_errors(resp):
        if resp.status_code >= 400:
            endpoint = request.endpoint or "unknown"
            metrics.errors.labels(endpoint, request.method, resp.status_code).inc()
        return resp

    return metrics


def get_metrics() -> StorefrontMetrics:
    return current_app.extensions["storefront_metrics"]
