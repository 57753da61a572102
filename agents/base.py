from typing import Any, Dict, List, Optional

import requests

from llm_config import LLM_TIMEOUT


class OpenAIStyleClient:
    """Low-level HTTP client for OpenAI-style /v1/chat/completions."""

    def __init__(self, base_url: str, model_name: str, api_key: Optional[str] = None):
        self.base_url = base_url.rstrip("/")
        self.model_name = model_name
        self.api_key = api_key

    def chat(
        self,
        messages: List[Dict[str, str]],
        response_format: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> str:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload: Dict[str, Any] = {
            "model": self.model_name,
            "messages": messages,
            "temperature": kwargs.get("temperature", 0.7),
            "max_tokens": kwargs.get("max_tokens", 512),
            "stream": False,
        }
        if response_format is not None:
            payload["response_format"] = response_format

        url = self.base_url + "/v1/chat/completions"
        resp = requests.post(url, headers=headers, json=payload, timeout=LLM_TIMEOUT)
        resp.raise_for_status()
        data = resp.json()

        # Standard OpenAI-style result
        return data["choices"][0]["message"]["content"]
