"""LLM API providers whose keys can be checked from the console."""

from __future__ import annotations

from currency_core.schemas import ApiEndpoint, Category, ServiceInfo


def _llm(id: str, name: str, website: str, api_base_url: str, docs_url: str, models_path: str) -> ServiceInfo:
    return ServiceInfo(
        id=id,
        name=name,
        category=Category.LLM,
        website=website,
        api_base_url=api_base_url,
        docs_url=docs_url,
        auth_required=True,
        endpoints=(ApiEndpoint(name="list models", path=models_path),),
    )


LLM_PROVIDERS: tuple[ServiceInfo, ...] = (
    _llm("anthropic", "Anthropic", "https://www.anthropic.com/", "https://api.anthropic.com",
         "https://docs.anthropic.com/", "/v1/models"),
    _llm("cohere", "Cohere", "https://cohere.com/", "https://api.cohere.com",
         "https://docs.cohere.com/", "/v1/models"),
    _llm("deepseek", "DeepSeek", "https://www.deepseek.com/", "https://api.deepseek.com",
         "https://api-docs.deepseek.com/", "/models"),
    _llm("gemini", "Google Gemini", "https://ai.google.dev/", "https://generativelanguage.googleapis.com",
         "https://ai.google.dev/gemini-api/docs", "/v1beta/models"),
    _llm("groq", "Groq", "https://groq.com/", "https://api.groq.com/openai",
         "https://console.groq.com/docs", "/v1/models"),
    _llm("mistral", "Mistral AI", "https://mistral.ai/", "https://api.mistral.ai",
         "https://docs.mistral.ai/", "/v1/models"),
    _llm("openai", "OpenAI", "https://openai.com/", "https://api.openai.com",
         "https://platform.openai.com/docs", "/v1/models"),
    _llm("openrouter", "OpenRouter", "https://openrouter.ai/", "https://openrouter.ai/api",
         "https://openrouter.ai/docs", "/v1/models"),
    _llm("together", "Together AI", "https://www.together.ai/", "https://api.together.xyz",
         "https://docs.together.ai/", "/v1/models"),
    _llm("xai", "xAI", "https://x.ai/", "https://api.x.ai",
         "https://docs.x.ai/", "/v1/models"),
)
