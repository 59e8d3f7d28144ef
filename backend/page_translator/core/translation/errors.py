"""Translation pipeline exceptions.

Every failure the pipeline reports carries an HTTP status and a message that
is safe to show to the caller. Provider diagnostics stay in ``details`` and
the server log.

Propagation:
- ConfigurationError / ValidationError: raised before any provider call.
- ProviderCallError subclasses: fatal to a page run, become the terminal
  ``error`` event.
- ExtractionFailed: recovered per batch (originals substituted); surfaced
  directly on the single-section path.
"""

from typing import Any, Dict, Optional


class TranslationError(Exception):
    """Base translation error with optional code and details."""

    status_code: int = 500
    default_code: str = "translation_error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}


class ConfigurationError(TranslationError):
    """Required provider configuration is missing."""

    status_code = 500
    default_code = "configuration_error"


class ValidationError(TranslationError):
    """Request input is empty or malformed."""

    status_code = 400
    default_code = "validation_error"


class ProviderCallError(TranslationError):
    """The provider call failed; aborts a page run."""

    status_code = 500
    default_code = "provider_error"


class RateLimited(ProviderCallError):
    """Provider answered 429."""

    status_code = 429
    default_code = "rate_limited"

    def __init__(self, message: str = "Rate limits exceeded, please try again later.", **kwargs):
        super().__init__(message, **kwargs)


class PaymentRequired(ProviderCallError):
    """Provider answered 402."""

    status_code = 402
    default_code = "payment_required"

    def __init__(
        self,
        message: str = "Payment required, please add credits to your workspace.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class ProviderError(ProviderCallError):
    """Any other provider or transport failure.

    The public message is deliberately generic; the upstream status and body
    are kept in ``details`` for server-side logging only.
    """

    def __init__(self, message: str = "AI gateway error", **kwargs):
        super().__init__(message, **kwargs)


class ExtractionFailed(TranslationError):
    """The provider reply could not be decoded as JSON."""

    status_code = 500
    default_code = "extraction_failed"

    def __init__(
        self,
        raw_text: str,
        message: str = "Invalid AI response format",
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.raw_text = raw_text
