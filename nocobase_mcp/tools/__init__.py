from nocobase_mcp.tools.catalog import list_foods_tool, execute_list_foods
from nocobase_mcp.tools.orders import purchase_foods_tool, execute_purchase_foods
from nocobase_mcp.tools.tickets import (
    find_ticket_tool,
    open_ticket_tool,
    execute_find_ticket,
    execute_open_ticket,
)

TOOLS = [list_foods_tool, purchase_foods_tool, find_ticket_tool, open_ticket_tool]

TOOL_HANDLERS = {
    "Alimentos": execute_list_foods,
    "Comprar-Alimentos": execute_purchase_foods,
    "buscar-ticket": execute_find_ticket,
    "abrir-ticket": execute_open_ticket,
}
