"""
Client cho các provider AI dùng trong waterfall phân tích readiness.

Mỗi provider nhận prompt, trả về dict JSON đã parse (chưa kiểm tra schema).
Lỗi API / mạng được quy về ProviderError / AuthRejectedError để waterfall
quyết định đi tiếp hay dừng.
"""
import json
import logging
import re

import google.generativeai as genai
import requests
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions

from .exceptions import AuthRejectedError, ProviderError

logger = logging.getLogger(__name__)

CODE_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)

SYSTEM_MESSAGE = (
    "You are a placement preparation coach. "
    "Always answer with a single valid JSON object and nothing else."
)


def strip_code_fences(text):
    """Bỏ ```json ... ``` bao ngoài nếu model trả về dạng markdown."""
    text = (text or "").strip()
    match = CODE_FENCE_RE.match(text)
    if match:
        return match.group(1).strip()
    return text


def parse_json_text(provider, text):
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise ProviderError(provider, "empty response body")
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ProviderError(provider, f"response is not valid JSON ({e})") from e
    if not isinstance(payload, dict):
        raise ProviderError(provider, "response JSON is not an object")
    return payload


class BaseProvider:
    name = ""
    # Provider cùng vendor dùng chung 1 credential
    vendor = ""

    def generate(self, prompt):
        raise NotImplementedError

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name}>"


class GeminiProvider(BaseProvider):
    """Gemini qua google-generativeai, yêu cầu response_mime_type JSON."""
    vendor = "google"

    def __init__(self, api_key, model_name):
        self.api_key = api_key
        self.model_name = model_name
        self.name = model_name
        self._model = None

    def _get_model(self):
        if self._model is None:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(
                self.model_name,
                generation_config={"response_mime_type": "application/json"},
            )
        return self._model

    def generate(self, prompt):
        try:
            response = self._get_model().generate_content(prompt)
        except (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied) as e:
            raise AuthRejectedError(self.name, str(e)) from e
        except google_exceptions.InvalidArgument as e:
            # Key sai => Google trả 400 API_KEY_INVALID thay vì 401
            if "api key" in str(e).lower() or "api_key" in str(e).lower():
                raise AuthRejectedError(self.name, str(e)) from e
            raise ProviderError(self.name, str(e)) from e
        except google_exceptions.GoogleAPIError as e:
            raise ProviderError(self.name, str(e)) from e
        except (requests.RequestException, OSError, google_auth_exceptions.TransportError) as e:
            # Lỗi transport (mạng, DNS...) không thuộc GoogleAPIError
            raise ProviderError(self.name, f"request failed: {e}") from e

        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            raise ProviderError(self.name, f"blocked by safety filter ({block_reason})")

        try:
            text = response.text
        except ValueError as e:
            # .text raise ValueError khi candidate bị chặn / không có part nào
            raise ProviderError(self.name, f"no text returned ({e})") from e

        return parse_json_text(self.name, text)


class GroqProvider(BaseProvider):
    """
    Groq (OpenAI-compatible chat completions) qua requests.
    Nội dung JSON nằm trong choices[0].message.content.
    """
    vendor = "groq"

    def __init__(self, api_key, model_name, api_url, timeout=None):
        self.api_key = api_key
        self.model_name = model_name
        self.api_url = api_url
        self.timeout = timeout
        self.name = f"groq/{model_name}"

    def generate(self, prompt):
        body = {
            "model": self.model_name,
            "messages": [
                {"role": "system", "content": SYSTEM_MESSAGE},
                {"role": "user", "content": prompt},
            ],
            "temperature": 0.3,
            "response_format": {"type": "json_object"},
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = requests.post(self.api_url, json=body, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise ProviderError(self.name, f"request failed: {e}") from e

        status = response.status_code
        if status in (401, 403):
            raise AuthRejectedError(self.name, f"HTTP {status}: {response.text[:300]}")
        if not 200 <= status < 300:
            logger.warning("Groq returned HTTP %s", status)
            raise ProviderError(self.name, f"HTTP {status}: {response.text[:300]}")

        try:
            envelope = response.json()
        except ValueError as e:
            raise ProviderError(self.name, "response envelope is not JSON") from e

        try:
            content = envelope["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(self.name, "unexpected chat completion envelope") from e

        return parse_json_text(self.name, content)
