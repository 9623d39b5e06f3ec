import logging
from typing import Any

from mcp.types import Tool

from nocobase_mcp.client import CrmClient
from nocobase_mcp.models import CatalogItem, CatalogQuery, parse, text, unwrap

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Não existe alimentos cadastrado para o CEP informado!"

list_foods_tool = Tool(
    name="Alimentos",
    description="Busca todos os alimentos disponíveis para venda cadastrado no crm para o CEP informado.",
    inputSchema=CatalogQuery.input_schema(),
)


def format_food(food: CatalogItem) -> str:
    return (
        f"{{ID: {text(food.id)}\n"
        f"Título: {text(food.title)}\n"
        f"Descrição: {text(food.description)}\n"
        f"Preço: {text(food.price)}\n"
        f"CEP: {text(food.cep)}\n"
        "}\n"
    )


async def execute_list_foods(client: CrmClient, arguments: dict[str, Any]) -> str:
    query = CatalogQuery.model_validate(arguments)

    # The catalog is not partitioned by CEP, the whole list is returned.
    payload = await client.request(
        "/api/portifolio:list",
        "GET",
        params=client.filter_params({}),
    )

    if payload is None:
        return NOT_FOUND_MESSAGE

    foods = unwrap(payload)
    lines = ["Alimentos disponíveis:\n\n"]

    if isinstance(foods, list):
        for raw in foods:
            food = parse(CatalogItem, raw)
            if food is None:
                logger.warning(f"Skipping unreadable catalog entry: {raw!r}")
                continue
            lines.append(format_food(food))

    logger.debug(f"Listed {len(lines) - 1} foods for CEP {query.cep}")
    return "".join(lines)
