from enum import Enum


class GeminiModels(Enum):
    """Supported Gemini model identifiers"""

    GEMINI_2_5_FLASH_PREVIEW = "gemini-2.5-flash-preview-09-2025"
    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_5_PRO = "gemini-2.5-pro"


class AppSettings:
    """Central place for all application-level configuration"""

    GEMINI_MODEL: GeminiModels = GeminiModels.GEMINI_2_5_FLASH_PREVIEW
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"
    API_VERSION: str = "v1beta"
    # No client-side limit; generation with images can take well over 5 s
    GEMINI_TIMEOUT: float | None = None


class Messages:
    """Fixed response bodies returned to the caller"""

    METHOD_NOT_ALLOWED = "Method Not Allowed"
    API_KEY_MISSING = "Server configuration error: API Key missing."
    INTERNAL_ERROR = "Internal server error during computation."
    NO_CONTENT = "Model returned no content."


ERROR_MESSAGE_LIMIT = 50
