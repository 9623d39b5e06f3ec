from typing import Any

from mcp.types import Tool

from nocobase_mcp.client import CrmClient
from nocobase_mcp.models import Ticket, TicketLookup, TicketOpenRequest, parse, text, unwrap

TICKET_NOT_FOUND_MESSAGE = "Não foi encontrado ticket para o protocolo informado!"
OPEN_FAILED_MESSAGE = "Failed to open the ticket"

find_ticket_tool = Tool(
    name="buscar-ticket",
    description="Solicitar informações de um ticket. Informações que o usuário deve enviar: Protocolo",
    inputSchema=TicketLookup.input_schema(),
)

open_ticket_tool = Tool(
    name="abrir-ticket",
    description="Abrir um novo ticket. Informações que o usuário deve enviar: Título, Descrição",
    inputSchema=TicketOpenRequest.input_schema(),
)


def format_ticket(ticket: Ticket) -> str:
    return (
        f"Os dados do ticket são: - Titulo: {text(ticket.title)} "
        f"- Descrição: {text(ticket.description)} "
        f"- Status: {text(ticket.status)} "
        f"- Prioridade: {text(ticket.priority)}."
    )


async def execute_find_ticket(client: CrmClient, arguments: dict[str, Any]) -> str:
    lookup = TicketLookup.model_validate(arguments)

    payload = await client.request(
        "/api/ticket:get",
        "GET",
        params=client.filter_params({"protocol": lookup.protocol}),
    )

    ticket = parse(Ticket, unwrap(payload))
    if ticket is None:
        return TICKET_NOT_FOUND_MESSAGE

    return format_ticket(ticket)


async def execute_open_ticket(client: CrmClient, arguments: dict[str, Any]) -> str:
    request = TicketOpenRequest.model_validate(arguments)

    payload = await client.request(
        "/api/ticket:create",
        "POST",
        body={
            "title": request.title,
            "description": request.description,
            "status": "Aberto",
            "priority": "Normal",
        },
    )

    if payload is None:
        return OPEN_FAILED_MESSAGE

    created = unwrap(payload)
    ticket = parse(Ticket, created) if isinstance(created, dict) else Ticket()
    if ticket is None:
        return OPEN_FAILED_MESSAGE

    return f"O ticket foi aberto com sucesso. Segue o numero do protocolo:  {text(ticket.protocol)}"
