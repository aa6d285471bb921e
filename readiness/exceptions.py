# readiness/exceptions.py
"""
Custom exceptions cho readiness app.
Mỗi lần analyze chỉ raise ra ngoài đúng 1 exception thuộc nhóm dưới đây.
"""


class ReadinessError(Exception):
    """Base exception cho readiness analysis"""
    pass


class ConfigurationError(ReadinessError):
    """
    Thiếu API key hoặc key sai định dạng.
    Lỗi cấu hình lúc khởi tạo advisor, không retry.
    """
    pass


class DataUnavailableError(ReadinessError):
    """Không đủ dữ liệu để phân tích (thiếu profile hoặc chưa có log)."""
    code = 'data_unavailable'


class ProfileNotFoundError(DataUnavailableError):
    code = 'profile_missing'

    def __init__(self):
        super().__init__("User profile not found. Please complete your profile first.")


class NoLogsError(DataUnavailableError):
    code = 'no_logs'

    def __init__(self):
        super().__init__("No daily logs found. Please add some preparation logs first.")


class ProviderError(ReadinessError):
    """
    1 provider AI thất bại: lỗi mạng, HTTP status không phải 2xx, bị chặn
    bởi safety filter, response không phải JSON đúng format...
    Waterfall sẽ chuyển sang provider tiếp theo.
    """
    def __init__(self, provider, message):
        self.provider = provider
        self.detail = message
        super().__init__(f"{provider}: {message}")


class AuthRejectedError(ProviderError):
    """
    API key bị từ chối (401/403, key không hợp lệ).
    Nếu xảy ra ở provider chính thì dừng luôn waterfall.
    """
    pass


class ProvidersUnavailableError(ReadinessError):
    """
    Tất cả provider đều thất bại.
    Giữ lại lỗi cuối cùng để hiển thị hướng khắc phục cho user.
    """
    def __init__(self, last_error=None):
        self.last_error = last_error
        detail = str(last_error) if last_error else "no provider configured"
        super().__init__(
            f"All AI providers are unavailable. Last error: {detail}. "
            "Please verify that your API key is correct, that it has access to the "
            "Generative Language API, and that billing is enabled for your project."
        )
