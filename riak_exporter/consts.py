"""Project constants."""

PROJECT_NAME = "riak_exporter"
PROJECT_TITLE = "Riak exporter"
VERSION = "0.1.0"

# Metric naming: <namespace>_<key> for stats, <namespace>_<subsystem>_<name>
# for the exporter's own metrics.
NAMESPACE = "riak"
EXPORTER_SUBSYSTEM = "exporter"

DEFAULT_LISTEN_ADDRESS = ":9104"
DEFAULT_METRICS_PATH = "/metrics"
DEFAULT_RIAK_URI = "http://localhost:8098"
DEFAULT_TIMEOUT_SECONDS = 5.0

UP_METRIC = f"{NAMESPACE}_up"
SCRAPE_DURATION_METRIC = f"{NAMESPACE}_{EXPORTER_SUBSYSTEM}_last_scrape_duration_seconds"
SCRAPES_TOTAL_METRIC = f"{NAMESPACE}_{EXPORTER_SUBSYSTEM}_scrapes_total"
SCRAPE_ERROR_METRIC = f"{NAMESPACE}_{EXPORTER_SUBSYSTEM}_last_scrape_error"
BUILD_INFO_METRIC = f"{NAMESPACE}_{EXPORTER_SUBSYSTEM}_build_info"
