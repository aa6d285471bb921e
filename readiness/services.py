"""
ReadinessAdvisor - phân tích mức độ sẵn sàng placement bằng AI.

Luồng xử lý:
1. Factory from_settings() đọc settings 1 lần, kiểm tra API key, dựng danh
   sách provider theo thứ tự ưu tiên.
2. analyze(user_id): lấy profile + log, chọn 14 log gần nhất (theo
   created_at), dựng prompt, chạy waterfall qua các provider.

Waterfall:
- Provider trả JSON đúng schema => dừng, trả kết quả.
- ProviderError => thử provider tiếp theo ngay (không delay).
- AuthRejectedError ở provider chính => dừng luôn nếu provider đó cùng vendor
  với key đã kiểm tra (key hỏng thì các model khác dùng chung key cũng hỏng).
  Khác vendor thì đi tiếp như ProviderError.
- Hết provider => ProvidersUnavailableError.
"""
import logging
from datetime import datetime, timezone as dt_timezone

from django.conf import settings

from core.services import fetch_user_profile
from tracker.services import fetch_recent_logs
from tracker.timestamps import to_datetime

from .exceptions import (
    AuthRejectedError,
    ConfigurationError,
    NoLogsError,
    ProfileNotFoundError,
    ProviderError,
    ProvidersUnavailableError,
)
from .prompts import build_readiness_prompt
from .providers import GeminiProvider, GroqProvider

logger = logging.getLogger(__name__)

GEMINI_KEY_PREFIX = "AIza"
GROQ_KEY_PREFIX = "gsk_"

ACTION_PLAN_KEYS = ("days_1_to_3", "days_4_to_5", "days_6_to_7")

# Log không có created_at xếp sau mọi log khác
MISSING_CREATED_AT = datetime.min.replace(tzinfo=dt_timezone.utc)


def validate_gemini_api_key(api_key):
    if not api_key:
        raise ConfigurationError(
            "Gemini API key is not configured. Please add GEMINI_API_KEY to your .env file."
        )
    if not api_key.startswith(GEMINI_KEY_PREFIX):
        raise ConfigurationError(
            f'Invalid Gemini API key format. API keys should start with "{GEMINI_KEY_PREFIX}". '
            "Please check your .env file."
        )
    return api_key


def validate_groq_api_key(api_key):
    """Groq là optional: trả về None nếu chưa cấu hình."""
    if not api_key:
        return None
    if not api_key.startswith(GROQ_KEY_PREFIX):
        raise ConfigurationError(
            f'Invalid Groq API key format. API keys should start with "{GROQ_KEY_PREFIX}". '
            "Please check your .env file."
        )
    return api_key


def _string_list(value):
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def parse_report(provider, payload):
    """
    Map payload JSON của provider sang ReadinessReport.

    readiness_score được giữ nguyên (không clamp, không ép kiểu).

    Returns:
        dict: {
            'consistency_analysis': str,
            'weak_areas': list[str],
            'strengths': list[str],
            'action_plan': {'days_1_to_3': str, 'days_4_to_5': str, 'days_6_to_7': str},
            'readiness_score': <giá trị model trả về>,
        }

    Raises:
        ProviderError: thiếu key hoặc sai kiểu dữ liệu
    """
    if not isinstance(payload, dict):
        raise ProviderError(provider, "response is not a JSON object")

    missing = [
        key for key in ("consistency_analysis", "weak_areas", "strengths", "action_plan", "readiness_score")
        if key not in payload
    ]
    if missing:
        raise ProviderError(provider, f"response is missing keys: {', '.join(missing)}")

    if not isinstance(payload["consistency_analysis"], str):
        raise ProviderError(provider, "consistency_analysis must be a string")
    for key in ("weak_areas", "strengths"):
        if not _string_list(payload[key]):
            raise ProviderError(provider, f"{key} must be a list of strings")

    plan = payload["action_plan"]
    if not isinstance(plan, dict) or not all(isinstance(plan.get(k), str) for k in ACTION_PLAN_KEYS):
        raise ProviderError(provider, "action_plan must contain days_1_to_3, days_4_to_5 and days_6_to_7")

    return {
        "consistency_analysis": payload["consistency_analysis"].strip(),
        "weak_areas": list(payload["weak_areas"]),
        "strengths": list(payload["strengths"]),
        "action_plan": {key: plan[key].strip() for key in ACTION_PLAN_KEYS},
        "readiness_score": payload["readiness_score"],
    }


def select_recent_logs(logs, window):
    """
    Chuẩn hoá created_at, lấy `window` log mới nhất rồi đảo lại theo thứ
    tự thời gian (cũ trước) cho prompt dễ đọc.

    Log thiếu created_at bị xếp cũ nhất, không được coi là "vừa tạo".
    """
    normalized = []
    for log in logs:
        raw = log.get("created_at")
        normalized.append({**log, "created_at": None if raw is None else to_datetime(raw)})
    normalized.sort(key=lambda log: log["created_at"] or MISSING_CREATED_AT, reverse=True)
    recent = normalized[:window]
    recent.reverse()
    return recent


class ReadinessAdvisor:
    """
    Args:
        providers: list provider theo thứ tự ưu tiên (provider[0] là provider chính)
        fetch_profile: callable(user_id) -> dict | None
        fetch_logs: callable(user_id) -> list[dict]
        log_window: số log gần nhất đưa vào prompt
        default_target_role: dùng khi profile không có target_role
        credential_vendor: vendor của API key đã được kiểm tra ở factory
    """

    def __init__(
        self,
        providers,
        fetch_profile=fetch_user_profile,
        fetch_logs=fetch_recent_logs,
        log_window=14,
        default_target_role="Software Engineer",
        credential_vendor=GeminiProvider.vendor,
    ):
        self.providers = list(providers)
        self.fetch_profile = fetch_profile
        self.fetch_logs = fetch_logs
        self.log_window = log_window
        self.default_target_role = default_target_role
        self.credential_vendor = credential_vendor

    @classmethod
    def from_settings(cls, **kwargs):
        """
        Dựng advisor từ Django settings.
        Thứ tự: Gemini flash (nhanh, rẻ) -> Groq (vendor khác) -> Gemini pro (cuối cùng).

        Raises:
            ConfigurationError: thiếu GEMINI_API_KEY hoặc key sai định dạng
        """
        gemini_key = validate_gemini_api_key(settings.GEMINI_API_KEY)
        groq_key = validate_groq_api_key(settings.GROQ_API_KEY)

        providers = [GeminiProvider(gemini_key, settings.READINESS_PRIMARY_MODEL)]
        if groq_key:
            providers.append(GroqProvider(
                groq_key,
                settings.GROQ_MODEL,
                settings.GROQ_API_URL,
                timeout=settings.READINESS_HTTP_TIMEOUT,
            ))
        else:
            logger.warning("GROQ_API_KEY is not set, backup provider disabled.")
        providers.append(GeminiProvider(gemini_key, settings.READINESS_FALLBACK_MODEL))

        kwargs.setdefault("log_window", settings.READINESS_LOG_WINDOW)
        kwargs.setdefault("default_target_role", settings.DEFAULT_TARGET_ROLE)
        return cls(providers, **kwargs)

    def build_prompt(self, user_id):
        profile = self.fetch_profile(user_id)
        if not profile:
            raise ProfileNotFoundError()

        logs = self.fetch_logs(user_id)
        if not logs:
            raise NoLogsError()

        recent = select_recent_logs(logs, self.log_window)
        target_role = profile.get("target_role") or self.default_target_role
        return build_readiness_prompt(profile, recent, target_role)

    def analyze(self, user_id):
        prompt = self.build_prompt(user_id)
        return self.run_waterfall(prompt)

    def run_waterfall(self, prompt):
        last_error = None

        for index, provider in enumerate(self.providers):
            logger.info("Trying readiness provider %s", provider.name)
            try:
                payload = provider.generate(prompt)
                report = parse_report(provider.name, payload)
            except AuthRejectedError as e:
                logger.error("Provider %s rejected the API key: %s", provider.name, e.detail)
                if index == 0 and provider.vendor == self.credential_vendor:
                    raise
                last_error = e
                continue
            except ProviderError as e:
                logger.warning("Provider %s failed: %s", provider.name, e.detail)
                last_error = e
                continue

            logger.info("Readiness analysis produced by %s", provider.name)
            return report

        raise ProvidersUnavailableError(last_error)
