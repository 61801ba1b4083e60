"""Unit tests for the purchase summary email."""

from unittest.mock import AsyncMock

import pytest

from storefront.core.config import Settings
from storefront.infrastructure.services.email import EmailProvider
from storefront.infrastructure.services.email.purchase_email import (
    PURCHASE_SUBJECT,
    PurchaseEmailService,
    send_purchase_email,
)


@pytest.fixture
def provider() -> AsyncMock:
    return AsyncMock(spec=EmailProvider)


@pytest.fixture
def service(provider: AsyncMock) -> PurchaseEmailService:
    return PurchaseEmailService(
        provider=provider,
        settings=Settings(email="tienda@example.com", email_password="secret"),
    )


@pytest.mark.asyncio
async def test_send_uses_fixed_sender_and_subject(service, provider):
    await service.send(
        to="cliente@example.com",
        with_stock=["Silla", "Mesa"],
        without_stock=["Lámpara"],
        total=350.5,
        code="3f0c9a1e-8d1b-4c55-a0b4-0f6f3b7a2c11",
    )

    provider.send_email.assert_awaited_once()
    kwargs = provider.send_email.await_args.kwargs
    assert kwargs["to"] == "cliente@example.com"
    assert kwargs["subject"] == PURCHASE_SUBJECT == "Resumen de compra"
    assert kwargs["from_email"] == "tienda@example.com"
    assert kwargs["from_name"] == "Ecommerce"


@pytest.mark.asyncio
async def test_html_body_lists_products_total_and_code(service, provider):
    await service.send(
        to="cliente@example.com",
        with_stock=["Silla", "Mesa"],
        without_stock=["Lámpara"],
        total=350.5,
        code="ABC-123",
    )

    html = provider.send_email.await_args.kwargs["html_body"]
    assert "<h1>Compra realizada con éxito</h1>" in html
    assert "<li>Silla</li>" in html
    assert "<li>Mesa</li>" in html
    assert "<li>Lámpara</li>" in html
    assert "El total de la compra es de $350.5" in html
    assert "Código de compra: ABC-123" in html
    assert html.index("Silla") < html.index("Productos sin stock") < html.index("Lámpara")


def test_render_escapes_product_markup(service):
    html, text = service.render(["<script>alert(1)</script>"], [], 10, "X")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_render_plain_text_body(service):
    _, text = service.render(["Silla"], ["Mesa"], 99, "C-1")

    assert "- Silla" in text
    assert "- Mesa" in text
    assert "$99" in text
    assert "Código de compra: C-1" in text


@pytest.mark.asyncio
async def test_transport_failure_propagates(service, provider):
    provider.send_email.side_effect = ConnectionError("smtp down")

    with pytest.raises(ConnectionError, match="smtp down"):
        await service.send("cliente@example.com", ["Silla"], [], 10, "C-1")

    provider.send_email.assert_awaited_once()


@pytest.mark.asyncio
async def test_send_purchase_email_uses_smtp(monkeypatch):
    sent = AsyncMock(return_value=True)
    monkeypatch.setattr(
        "storefront.infrastructure.services.email.purchase_email.SMTPProvider.send_email",
        sent,
    )

    await send_purchase_email("cliente@example.com", ["Silla"], [], 10, "C-1")

    sent.assert_awaited_once()
    assert sent.await_args.kwargs["subject"] == "Resumen de compra"
