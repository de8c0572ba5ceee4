import os


class BaseConfig:
    JSON_SORT_KEYS = False
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "*")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True
    CHECKOUT_LIMIT_PER_IP = os.getenv("CHECKOUT_LIMIT_PER_IP", "20 per hour")
    CATALOG_PATH = os.getenv("CATALOG_PATH")
    ORDERS_SEED_PATH = os.getenv("ORDERS_SEED_PATH")
    SIMULATED_LATENCY_SCALE = float(os.getenv("SIMULATED_LATENCY_SCALE", 0))
    RECOMMENDATION_SEED = os.getenv("RECOMMENDATION_SEED")
    FREE_SHIPPING_THRESHOLD = os.getenv("FREE_SHIPPING_THRESHOLD", "50")
    TAX_RATE = os.getenv("TAX_RATE", "0.08")
    OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "storefront")
    OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-key")
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "200 per hour")
    SIMULATED_LATENCY_SCALE = float(os.getenv("SIMULATED_LATENCY_SCALE", 1))


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-key"
    SIMULATED_LATENCY_SCALE = 0.0


class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False
    SECRET_KEY = os.getenv("SECRET_KEY")
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "200 per hour")

    @staticmethod
    def validate():
        missing = []
        if not os.getenv("SECRET_KEY"):
            missing.append("SECRET_KEY")
        if missing:
            raise RuntimeError(
                f"Missing required env vars in production: {', '.join(missing)}"
            )


def get_config_class():
    env = os.getenv("APP_ENV", "development").lower()
    if env == "production":
        ProductionConfig.validate()
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
