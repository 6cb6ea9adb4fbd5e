"""Settings for the plan advisor, resolved from the environment and an optional .env file."""

from dataclasses import dataclass, field
import os
from functools import lru_cache
from typing import Dict, List, Mapping, Optional

from dotenv import load_dotenv


load_dotenv()


DEFAULT_API_KEY = "demo-key"
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")

# Upstream id -> (environment prefix, placeholder base URL)
PROVIDER_ENDPOINTS: Dict[str, tuple] = {
    "hdfc": ("HDFC", "https://api.hdfcergo.com/insurance/v1"),
    "bajaj": ("BAJAJ", "https://api.bajajallianz.com/insurance/v1"),
    "care": ("CARE", "https://api.careinsurance.com/v1"),
    "goDigit": ("GODIGIT", "https://api.godigit.com/v1"),
    "icici": ("ICICI", "https://api.icicilombard.com/api/v1"),
}


@dataclass(frozen=True)
class ProviderEndpoint:
    base_url: str
    api_key: str = DEFAULT_API_KEY


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    providers: Dict[str, ProviderEndpoint] = field(default_factory=dict)
    backend: str = "mock"
    usd_to_inr_rate: float = 83.0
    simulate_latency: bool = True
    http_timeout_seconds: float = 10.0
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    def endpoint_for(self, provider_id: str) -> ProviderEndpoint:
        try:
            return self.providers[provider_id]
        except KeyError:
            raise ValueError(f"Unknown insurance provider: {provider_id}") from None


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(value: Optional[str], default: float, name: str) -> float:
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _env_list(value: Optional[str], default) -> List[str]:
    if value is None or not value.strip():
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from an environment mapping (defaults to ``os.environ``)."""

    env = os.environ if environ is None else environ
    providers = {
        provider_id: ProviderEndpoint(
            base_url=env.get(f"{prefix}_API_URL") or default_url,
            api_key=env.get(f"{prefix}_API_KEY") or DEFAULT_API_KEY,
        )
        for provider_id, (prefix, default_url) in PROVIDER_ENDPOINTS.items()
    }

    backend = (env.get("PLAN_PROVIDER_BACKEND") or "mock").strip().lower()
    if backend not in {"mock", "http"}:
        raise ValueError(
            f"PLAN_PROVIDER_BACKEND must be 'mock' or 'http', got {backend!r}"
        )

    return Settings(
        providers=providers,
        backend=backend,
        usd_to_inr_rate=_env_float(env.get("USD_TO_INR_RATE"), 83.0, "USD_TO_INR_RATE"),
        simulate_latency=_env_flag(env.get("SIMULATE_LATENCY"), True),
        http_timeout_seconds=_env_float(
            env.get("HTTP_TIMEOUT_SECONDS"), 10.0, "HTTP_TIMEOUT_SECONDS"
        ),
        cors_origins=_env_list(env.get("CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings once at process start."""

    return load_settings()
