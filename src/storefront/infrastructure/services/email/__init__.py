"""Transactional email: providers, templates and the purchase summary."""

from storefront.infrastructure.services.email.email_provider import EmailProvider
from storefront.infrastructure.services.email.purchase_email import (
    PURCHASE_SUBJECT,
    PurchaseEmailService,
    send_purchase_email,
)
from storefront.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from storefront.infrastructure.services.email.template_renderer import (
    TemplateRenderer,
    get_template_renderer,
)

__all__ = [
    "EmailProvider",
    "PURCHASE_SUBJECT",
    "PurchaseEmailService",
    "SMTPProvider",
    "SMTPSettings",
    "TemplateRenderer",
    "get_template_renderer",
    "send_purchase_email",
]
