from __future__ import annotations

import os


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def provider_api_base() -> str:
    return os.getenv("INSTALLMENTS_PROVIDER_API_BASE", "https://api.sandbox.paypal.com").rstrip("/")


def provider_client_id() -> str:
    client_id = os.getenv("INSTALLMENTS_PROVIDER_CLIENT_ID")

    if not client_id:
        raise RuntimeError("INSTALLMENTS_PROVIDER_CLIENT_ID environment variable is not set")

    return client_id


def provider_client_secret() -> str:
    secret = os.getenv("INSTALLMENTS_PROVIDER_CLIENT_SECRET")

    if not secret:
        raise RuntimeError("INSTALLMENTS_PROVIDER_CLIENT_SECRET environment variable is not set")

    return secret


def provider_timeout_seconds() -> float:
    return float(os.getenv("INSTALLMENTS_PROVIDER_TIMEOUT", "5.0"))


def financing_country_code() -> str:
    return os.getenv("INSTALLMENTS_FINANCING_COUNTRY", "DE").upper()


def default_shop_id() -> int:
    return int(os.getenv("INSTALLMENTS_DEFAULT_SHOP_ID", "1"))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def financing_currency() -> str:
    return os.getenv("INSTALLMENTS_CURRENCY", "EUR").upper()
