import logging
from typing import Any

from mcp.types import Tool

from nocobase_mcp.client import CrmClient
from nocobase_mcp.models import PurchaseRequest, SalesOrder, parse, unwrap

logger = logging.getLogger(__name__)

ORDER_TITLE = "Pedido #123"
ORDER_STATUS = "Realizada"

SUCCESS_MESSAGE = "Alimentos comprados com sucesso!\n\n"
FAILURE_MESSAGE = "Não foi possível realizar a compra dos alimentos!"

purchase_foods_tool = Tool(
    name="Comprar-Alimentos",
    description=(
        "Realiza a compra de múltiplos alimentos disponíveis no CRM. "
        "Dados necessários: array de itens com ID, quantidade e preço unitário, "
        "total do pedido e cep de entrega."
    ),
    inputSchema=PurchaseRequest.input_schema(),
)


async def execute_purchase_foods(client: CrmClient, arguments: dict[str, Any]) -> str:
    purchase = PurchaseRequest.model_validate(arguments)

    payload = await client.request(
        "/api/sales_order:create",
        "POST",
        body={
            "title": ORDER_TITLE,
            "total_order": purchase.total_order,
            "status": ORDER_STATUS,
            "cep": purchase.cep,
        },
    )

    if payload is None:
        return FAILURE_MESSAGE

    created = unwrap(payload)
    order = parse(SalesOrder, created) if isinstance(created, dict) else SalesOrder()
    if order is None:
        return FAILURE_MESSAGE

    logger.info(f"Created sales order {order.id} with {len(purchase.items)} items")

    # Items already added stay on the order if a later one fails.
    failed: list[str] = []
    for item in purchase.items:
        result = await client.request(
            "/api/order_portifolio:create",
            "POST",
            body={
                "sales_order_id": order.id,
                "portifolio_id": item.food_id,
                "quantity": item.quantity,
            },
        )
        if result is None:
            logger.warning(f"Could not add food {item.food_id} to order {order.id}")
            failed.append(item.food_id)

    if failed:
        return SUCCESS_MESSAGE + f"Itens não adicionados ao pedido: {', '.join(failed)}\n"

    return SUCCESS_MESSAGE
