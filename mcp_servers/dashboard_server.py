"""
Inventory Dashboard MCP Server

Provides tools for reading warehouses, products and KPI series, and for the two
product mutations (demand update, stock transfer) against the in-memory store.

Transports: stdio (default) or SSE over HTTP on the configured PORT.
"""

import argparse
import json
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
import env_loader

from typing import Any, Callable, Dict, List, Optional
from mcp.server import Server
from mcp.types import Tool, TextContent

from src.dashboard.config import DashboardSettings
from src.dashboard.mutations import DashboardError
from src.dashboard.service import DashboardService
from src.models.inventory import ProductFilter

logger = logging.getLogger("dashboard_server")


class InvalidInputError(ValueError):
    """Cekirdege iletilmeden reddedilen hatali arac girdisi."""
    pass


def _result(data):
    return [TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False))]


def _ok(data: Any) -> Dict:
    if isinstance(data, list):
        return {"success": True, "count": len(data), "data": data}
    return {"success": True, "data": data}


def _error(e: Exception) -> Dict:
    return {"success": False, "error": str(e), "error_type": type(e).__name__}


# --- Girdi dogrulama (cagiran taraf) ---

def _parse_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidInputError(f"{field} must be an integer")


def parse_demand(value: Any) -> int:
    demand = _parse_int(value, "demand")
    if demand < 0:
        raise InvalidInputError("Please enter a valid demand value.")
    return demand


def parse_quantity(value: Any) -> int:
    qty = _parse_int(value, "qty")
    if qty <= 0:
        raise InvalidInputError("Please enter a valid transfer quantity.")
    return qty


def parse_page(value: Any) -> int:
    page = _parse_int(value, "page")
    if page < 1:
        raise InvalidInputError("page must be 1 or greater")
    return page


def parse_target(value: Optional[str], allowed: List[str]) -> str:
    """Hedef, urunun bulundugu depo disindaki mevcut depolardan biri olmali."""
    if not value:
        raise InvalidInputError("Please select a target warehouse for the transfer.")
    if value not in allowed:
        raise InvalidInputError(f"Warehouse {value} is not a valid transfer target.")
    return value


def _filter_from(a: dict) -> ProductFilter:
    return ProductFilter(search=a.get("search"), status=a.get("status"), warehouse=a.get("warehouse"))


# --- Implementation ---

def make_handlers(service: DashboardService) -> Dict[str, Callable[[dict], Dict]]:
    """Arac adlarini servis cagrilarina esler."""

    def list_warehouses(a: dict) -> Dict:
        return _ok([w.to_dict() for w in service.warehouses()])

    def list_products(a: dict) -> Dict:
        products = service.products(a.get("search"), a.get("status"), a.get("warehouse"))
        return _ok([p.to_dict() for p in products])

    def get_kpis(a: dict) -> Dict:
        return _ok([k.to_dict() for k in service.kpis(a.get("range", "7d"))])

    def get_product(a: dict) -> Dict:
        return _ok(service.product(a["id"]).to_dict())

    def list_transfer_targets(a: dict) -> Dict:
        return _ok([w.to_dict() for w in service.transfer_targets(a["id"])])

    def update_demand(a: dict) -> Dict:
        demand = parse_demand(a.get("demand"))
        return _ok(service.update_demand(a["id"], demand).to_dict())

    def transfer_stock(a: dict) -> Dict:
        qty = parse_quantity(a.get("qty"))
        allowed = [w.code for w in service.transfer_targets(a["id"])]
        target = parse_target(a.get("to"), allowed)
        return _ok(service.transfer_stock(a["id"], a["from"], target, qty).to_dict())

    def get_dashboard(a: dict) -> Dict:
        page = parse_page(a.get("page", 1))
        view = service.dashboard(_filter_from(a), page=page, kpi_range=a.get("range", "7d"))
        return _ok(view.to_dict())

    return {
        "list_warehouses": list_warehouses,
        "list_products": list_products,
        "get_kpis": get_kpis,
        "get_product": get_product,
        "list_transfer_targets": list_transfer_targets,
        "update_demand": update_demand,
        "transfer_stock": transfer_stock,
        "get_dashboard": get_dashboard,
    }


def dispatch(handlers: Dict[str, Callable[[dict], Dict]], name: str, arguments: Optional[dict]) -> Dict:
    """Araci calistirir; is kurali ve girdi hatalari sonuc zarfina donusturulur."""
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    try:
        return handler(arguments or {})
    except (DashboardError, InvalidInputError) as e:
        logger.warning("Arac reddedildi [%s]: %s", name, e)
        return _error(e)


TOOLS = [
    Tool(name="list_warehouses", description="List all warehouses in insertion order",
         inputSchema={"type": "object", "properties": {}}),
    Tool(name="list_products", description="List products filtered by search text, status and warehouse",
         inputSchema={"type": "object", "properties": {
             "search": {"type": "string"}, "status": {"type": "string"}, "warehouse": {"type": "string"}
         }}),
    Tool(name="get_kpis", description="Get the stock/demand KPI series for a range (7d, 14d, 30d)",
         inputSchema={"type": "object", "properties": {"range": {"type": "string", "default": "7d"}}}),
    Tool(name="get_product", description="Get a single product by id",
         inputSchema={"type": "object", "properties": {"id": {"type": "string"}}, "required": ["id"]}),
    Tool(name="list_transfer_targets", description="List warehouses a product can be transferred to",
         inputSchema={"type": "object", "properties": {"id": {"type": "string"}}, "required": ["id"]}),
    Tool(name="update_demand", description="Set the demand of a product",
         inputSchema={"type": "object", "properties": {
             "id": {"type": "string"}, "demand": {"type": "integer", "minimum": 0}
         }, "required": ["id", "demand"]}),
    Tool(name="transfer_stock", description="Transfer stock out of a product's current warehouse",
         inputSchema={"type": "object", "properties": {
             "id": {"type": "string"}, "from": {"type": "string"}, "to": {"type": "string"},
             "qty": {"type": "integer", "minimum": 1}
         }, "required": ["id", "from", "to", "qty"]}),
    Tool(name="get_dashboard", description="Get summary KPIs, a page of products and the KPI series in one call",
         inputSchema={"type": "object", "properties": {
             "search": {"type": "string"}, "status": {"type": "string"}, "warehouse": {"type": "string"},
             "page": {"type": "integer", "minimum": 1, "default": 1},
             "range": {"type": "string", "default": "7d"}
         }}),
]


def build_server(service: DashboardService) -> Server:
    app = Server("inventory-dashboard")
    handlers = make_handlers(service)

    @app.list_tools()
    async def list_tools() -> List[Tool]:
        return TOOLS

    @app.call_tool()
    async def call_tool(name: str, arguments: dict) -> List[TextContent]:
        return _result(dispatch(handlers, name, arguments))

    return app


async def run_stdio(app: Server) -> None:
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read, write):
        await app.run(read, write, app.create_initialization_options())


def run_sse(app: Server, host: str, port: int) -> None:
    import uvicorn
    from mcp.server.sse import SseServerTransport
    from starlette.applications import Starlette
    from starlette.responses import Response
    from starlette.routing import Mount, Route

    sse = SseServerTransport("/messages/")

    async def handle_sse(request):
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read, write):
            await app.run(read, write, app.create_initialization_options())
        return Response()

    starlette_app = Starlette(routes=[
        Route("/sse", endpoint=handle_sse, methods=["GET"]),
        Mount("/messages/", app=sse.handle_post_message),
    ])
    logger.info("SSE sunucusu hazir: http://%s:%d/sse", host, port)
    uvicorn.run(starlette_app, host=host, port=port)


def main(argv: Optional[List[str]] = None) -> None:
    settings = DashboardSettings.from_env()

    parser = argparse.ArgumentParser(description="Inventory dashboard MCP server")
    parser.add_argument("--transport", choices=["stdio", "sse"], default="stdio")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    app = build_server(DashboardService.from_settings(settings))
    if args.transport == "sse":
        run_sse(app, args.host, args.port)
    else:
        import asyncio
        asyncio.run(run_stdio(app))


if __name__ == "__main__":
    main()
