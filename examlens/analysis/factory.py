from typing import ClassVar

from examlens.analysis.analyzer import Analyzer
from examlens.analysis.base import BaseAnalyzer
from examlens.analysis.client_base import BaseAnalysisClient
from examlens.analysis.example_client_adapter import ExampleClientAdapter
from examlens.analysis.exceptions import ConfigurationError
from examlens.analysis.gemini_client_adapter import GeminiClientAdapter
from examlens.analysis.openai_client_adapter import OpenAIClientAdapter
from examlens.config.settings import Settings
from examlens.logging.logger import Log


class AnalyzerFactory:
    """Creates the configured analyzer.

    Called once per analysis so a missing credential surfaces as an
    error for that request instead of at startup.
    """

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings.

        Raises:
            ConfigurationError: if the selected provider has no API key.
            ValueError: if the provider is unknown or misconfigured.
        """
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return Analyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        return Analyzer(
            client=cls._create_client(provider, settings),
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.analysis_temperature,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseAnalysisClient:
        if provider == "gemini":
            return GeminiClientAdapter(
                api_key=cls._require_api_key(provider, settings),
                timeout_seconds=settings.gemini_timeout_seconds,
            )
        base_url = cls._resolve_base_url(provider, settings)
        return OpenAIClientAdapter(
            api_key=cls._require_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=base_url,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "gemini",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _require_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_api_key,
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
            "openrouter": settings.openrouter_api_key,
            "groq": settings.groq_api_key,
            "together": settings.together_api_key,
        }
        key = key_map.get(provider, "").strip()
        if not key:
            Log.error(f"API key for provider '{provider}' is missing from the environment")
            raise ConfigurationError(
                f"API key for provider '{provider}' is missing. "
                "Please check your environment configuration."
            )
        Log.debug(f"API key for provider '{provider}' loaded (starts with {key[:4]}...)")
        return key

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_model_name,
            "openai": settings.openai_model_name,
            "openai_compatible": settings.openai_compatible_model_name,
            "openrouter": settings.openrouter_model_name,
            "groq": settings.groq_model_name,
            "together": settings.together_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.openai_timeout_seconds,
            "openai_compatible": settings.openai_compatible_timeout_seconds,
            "openrouter": settings.openrouter_timeout_seconds,
            "groq": settings.groq_timeout_seconds,
            "together": settings.together_timeout_seconds,
        }
        return key_map.get(provider, 60) or 60
