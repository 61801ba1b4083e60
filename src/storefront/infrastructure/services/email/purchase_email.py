"""Purchase summary email.

Sent after checkout with the products that were bought, the ones that were
skipped for lack of stock, the order total and the purchase code.
"""

from collections.abc import Sequence

from storefront.core.config import Settings, get_settings
from storefront.core.logging import get_logger
from storefront.infrastructure.services.email.email_provider import EmailProvider
from storefront.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from storefront.infrastructure.services.email.template_renderer import (
    TemplateRenderer,
    get_template_renderer,
)

logger = get_logger(__name__)

PURCHASE_SUBJECT = "Resumen de compra"

PURCHASE_HTML_TEMPLATE = """\
<section>
  <h1>Compra realizada con éxito</h1>
  <h3>Le acercamos el resumen de la compra realizada en {{ store_name }}</h3>
  <br>
  <p>Productos comprados:</p>
  <ul>
  {% for product in with_stock %}
    <li>{{ product }}</li>
  {% endfor %}
  </ul>
  <br>
  <p>Productos sin stock:</p>
  <ul>
  {% for product in without_stock %}
    <li>{{ product }}</li>
  {% endfor %}
  </ul>
  <br>
  <p>El total de la compra es de ${{ total }}</p>
  <br>
  <p>Gracias por su compra</p>
  <br>
  <p>{{ store_name }}</p>
  <br>
  <p>Código de compra: {{ code }}</p>
</section>
"""

PURCHASE_TEXT_TEMPLATE = """\
Compra realizada con éxito

Productos comprados:
{% for product in with_stock %}
- {{ product }}
{% endfor %}

Productos sin stock:
{% for product in without_stock %}
- {{ product }}
{% endfor %}

El total de la compra es de ${{ total }}

Gracias por su compra
{{ store_name }}

Código de compra: {{ code }}
"""


class PurchaseEmailService:
    """Renders and sends purchase summaries through an email provider."""

    def __init__(
        self,
        provider: EmailProvider | None = None,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._provider = provider or SMTPProvider(SMTPSettings.from_app_settings(self._settings))
        self._renderer = renderer or get_template_renderer()

    def render(
        self,
        with_stock: Sequence[str],
        without_stock: Sequence[str],
        total: float | int | str,
        code: str,
    ) -> tuple[str, str]:
        """Render the HTML and plain-text bodies."""
        variables = {
            "store_name": self._settings.email_from_name,
            "with_stock": list(with_stock),
            "without_stock": list(without_stock),
            "total": total,
            "code": code,
        }
        html_body = self._renderer.render(PURCHASE_HTML_TEMPLATE, variables)
        text_body = self._renderer.render(PURCHASE_TEXT_TEMPLATE, variables)
        return html_body, text_body

    async def send(
        self,
        to: str,
        with_stock: Sequence[str],
        without_stock: Sequence[str],
        total: float | int | str,
        code: str,
    ) -> None:
        """Send the purchase summary to ``to``.

        Transport errors propagate to the caller; nothing is retried.
        """
        html_body, text_body = self.render(with_stock, without_stock, total, code)
        await self._provider.send_email(
            to=to,
            subject=PURCHASE_SUBJECT,
            html_body=html_body,
            text_body=text_body,
            from_email=self._settings.email,
            from_name=self._settings.email_from_name,
        )
        logger.info(
            "Purchase email sent",
            to=to,
            code=code,
            purchased=len(with_stock),
            out_of_stock=len(without_stock),
        )


async def send_purchase_email(
    to: str,
    with_stock: Sequence[str],
    without_stock: Sequence[str],
    total: float | int | str,
    code: str,
) -> None:
    """Send a purchase summary using the configured SMTP account."""
    await PurchaseEmailService().send(to, with_stock, without_stock, total, code)
