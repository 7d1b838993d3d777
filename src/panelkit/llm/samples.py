"""
Built-in sample payloads.

Used by the keyword mock interpreter and as fixtures for demos. Each
payload is written the way a provider emits it (camelCase keys) and
validated into a RuntimePayload at import time.
"""

from __future__ import annotations

from panelkit.core.ir import RuntimePayload

ORDER_STATUS_OPTIONS = [
    {"label": "Pending", "value": "pending"},
    {"label": "Paid", "value": "paid"},
    {"label": "Shipped", "value": "shipped"},
    {"label": "Cancelled", "value": "cancelled"},
]

SALES_CONSOLE = RuntimePayload.model_validate(
    {
        "schema": {
            "id": "sales-console",
            "name": "Sales console",
            "description": "Track orders, customers and revenue in one workspace.",
            "entities": [
                {
                    "id": "orders",
                    "name": "Order",
                    "label": "Orders",
                    "description": "Customer orders and their fulfilment status.",
                    "fields": [
                        {
                            "name": "orderNo",
                            "label": "Order number",
                            "type": "string",
                            "isPrimary": True,
                            "isSearchable": True,
                        },
                        {
                            "name": "customer",
                            "label": "Customer",
                            "type": "string",
                            "isSearchable": True,
                        },
                        {
                            "name": "amount",
                            "label": "Amount",
                            "type": "currency",
                            "isMetric": True,
                            "required": True,
                        },
                        {
                            "name": "quantity",
                            "label": "Quantity",
                            "type": "integer",
                            "isMetric": True,
                            "description": "Units ordered @default: 1",
                        },
                        {
                            "name": "status",
                            "label": "Status",
                            "type": "status",
                            "enumValues": ORDER_STATUS_OPTIONS,
                        },
                        {"name": "orderedAt", "label": "Ordered at", "type": "datetime"},
                        {
                            "name": "internalNote",
                            "label": "Internal note",
                            "type": "text",
                            "hidden": True,
                        },
                    ],
                    "sampleData": [
                        {
                            "orderNo": "SO-1003",
                            "customer": "Northwind Traders",
                            "amount": 420000,
                            "quantity": 12,
                            "status": "paid",
                            "orderedAt": "2024-05-03T10:20:00Z",
                        },
                        {
                            "orderNo": "SO-1002",
                            "customer": "Contoso Ltd",
                            "amount": 310000,
                            "quantity": 8,
                            "status": "shipped",
                            "orderedAt": "2024-05-02T15:05:00Z",
                        },
                        {
                            "orderNo": "SO-1001",
                            "customer": "Fabrikam Inc",
                            "amount": 200000,
                            "quantity": 5,
                            "status": "pending",
                            "orderedAt": "2024-05-01T09:00:00Z",
                        },
                    ],
                },
                {
                    "id": "customers",
                    "name": "Customer",
                    "label": "Customers",
                    "fields": [
                        {
                            "name": "name",
                            "label": "Name",
                            "type": "string",
                            "isIdentifier": True,
                        },
                        {"name": "tier", "label": "Tier", "type": "enum"},
                        {"name": "owner", "label": "Account owner", "type": "string"},
                    ],
                    "relations": [{"relation": "hasMany", "target": "orders", "via": "customer"}],
                    "sampleData": [
                        {
                            "name": "Northwind Traders",
                            "tier": "gold",
                            "owner": "Avery Chen",
                            "timeline": [
                                {
                                    "id": "evt-2",
                                    "label": "Order SO-1003 paid",
                                    "timestamp": "2024-05-03",
                                    "actor": "Avery Chen",
                                    "status": "paid",
                                },
                                {
                                    "id": "evt-1",
                                    "label": "Account opened",
                                    "timestamp": "2024-01-15",
                                },
                            ],
                        }
                    ],
                },
            ],
            "operations": [
                {
                    "id": "create-order",
                    "name": "createOrder",
                    "label": "Create order",
                    "targetEntity": "orders",
                    "kind": "create",
                    "method": "POST",
                    "endpoint": "/api/orders",
                    "parameters": [
                        {"name": "customer", "required": True},
                        {"name": "amount"},
                        {"name": "quantity"},
                        {"name": "status"},
                        {"name": "urgent", "label": "Urgent", "type": "boolean"},
                    ],
                    "ui": {"variant": "inline"},
                },
                {
                    "id": "update-status",
                    "name": "updateStatus",
                    "label": "Update status",
                    "targetEntity": "orders",
                    "kind": "update",
                    "method": "PATCH",
                    "endpoint": "/api/orders/{orderNo}/status",
                    "parameters": [
                        {"name": "orderNo", "required": True},
                        {"name": "status", "required": True},
                        {"name": "comment", "label": "Comment", "type": "text"},
                    ],
                },
                {
                    "id": "cancel-order",
                    "name": "cancelOrder",
                    "label": "Cancel order",
                    "targetEntity": "orders",
                    "kind": "delete",
                    "method": "DELETE",
                    "endpoint": "/api/orders/{orderNo}",
                    "ui": {"intent": "destructive", "triggerLabel": "Cancel"},
                },
            ],
            "patterns": [
                {
                    "id": "order-hub",
                    "name": "Order hub",
                    "type": "collection-hub",
                    "entity": "orders",
                    "operations": ["create-order", "update-status", "cancel-order"],
                    "features": {"quickStats": True, "quickFilters": True},
                },
                {
                    "id": "customer-profile",
                    "name": "Customer profile",
                    "type": "detail-dashboard",
                    "entity": "customers",
                    "features": {"timeline": True},
                },
                {
                    "id": "revenue",
                    "name": "Revenue overview",
                    "type": "analytics-summary",
                    "entity": "orders",
                },
            ],
        }
    }
)

INVENTORY_CONSOLE = RuntimePayload.model_validate(
    {
        "schema": {
            "id": "inventory-console",
            "name": "Inventory console",
            "description": "Monitor stock levels and move items between warehouses.",
            "entities": [
                {
                    "id": "stock-items",
                    "name": "StockItem",
                    "label": "Stock items",
                    "fields": [
                        {
                            "name": "sku",
                            "label": "SKU",
                            "type": "string",
                            "isPrimary": True,
                            "isSearchable": True,
                        },
                        {"name": "name", "label": "Item", "type": "string", "isSearchable": True},
                        {"name": "warehouse", "label": "Warehouse", "type": "enum"},
                        {"name": "onHand", "label": "On hand", "type": "integer", "isMetric": True},
                        {
                            "name": "unitCost",
                            "label": "Unit cost",
                            "type": "currency",
                            "unit": "USD",
                            "isMetric": True,
                        },
                        {
                            "name": "fillRate",
                            "label": "Fill rate",
                            "type": "percentage",
                            "isMetric": True,
                        },
                    ],
                    "sampleData": [
                        {
                            "sku": "WID-001",
                            "name": "Widget",
                            "warehouse": "east",
                            "onHand": 1200,
                            "unitCost": 2.5,
                            "fillRate": 96,
                        },
                        {
                            "sku": "GAD-002",
                            "name": "Gadget",
                            "warehouse": "west",
                            "onHand": 800,
                            "unitCost": 7.25,
                            "fillRate": 91,
                        },
                    ],
                }
            ],
            "operations": [
                {
                    "id": "transfer-stock",
                    "name": "transferStock",
                    "label": "Transfer stock",
                    "targetEntity": "stock-items",
                    "kind": "action",
                    "method": "POST",
                    "endpoint": "/api/stock/transfer",
                    "parameters": [
                        {"name": "sku", "required": True},
                        {
                            "name": "destination",
                            "label": "Destination",
                            "type": "enum",
                            "required": True,
                            "enumValues": [
                                {"label": "East", "value": "east"},
                                {"label": "West", "value": "west"},
                            ],
                        },
                        {"name": "quantity", "label": "Quantity", "type": "integer", "required": True},
                    ],
                    "ui": {"variant": "sheet"},
                },
                {
                    "id": "recount",
                    "name": "recount",
                    "label": "Request recount",
                    "targetEntity": "stock-items",
                    "kind": "action",
                    "method": "POST",
                    "endpoint": "/api/stock/{sku}/recount",
                },
            ],
            "patterns": [
                {
                    "id": "stock-workflow",
                    "name": "Stock operations",
                    "type": "workflow-console",
                    "entity": "stock-items",
                    "operations": ["transfer-stock", "recount"],
                },
                {
                    "id": "stock-analytics",
                    "name": "Stock health",
                    "type": "analytics-summary",
                    "entity": "stock-items",
                },
            ],
        }
    }
)

HR_PERFORMANCE = RuntimePayload.model_validate(
    {
        "schema": {
            "id": "hr-performance",
            "name": "Performance reviews",
            "entities": [
                {
                    "id": "reviews",
                    "name": "Review",
                    "label": "Reviews",
                    "fields": [
                        {
                            "name": "employee",
                            "label": "Employee",
                            "type": "string",
                            "isIdentifier": True,
                            "isSearchable": True,
                        },
                        {"name": "department", "label": "Department", "type": "string"},
                        {"name": "score", "label": "Score", "type": "number", "isMetric": True},
                        {"name": "rating", "label": "Rating", "type": "rating"},
                        {
                            "name": "stage",
                            "label": "Stage",
                            "type": "status",
                            "enumValues": [
                                {"label": "Self review", "value": "self"},
                                {"label": "Manager review", "value": "manager"},
                                {"label": "Calibrated", "value": "calibrated"},
                            ],
                        },
                        {"name": "dueDate", "label": "Due date", "type": "date"},
                    ],
                    "sampleData": [
                        {
                            "employee": "Jordan Lee",
                            "department": "Engineering",
                            "score": 88,
                            "rating": 4,
                            "stage": "manager",
                            "dueDate": "2024-06-30",
                        },
                        {
                            "employee": "Sam Rivera",
                            "department": "Sales",
                            "score": 80,
                            "rating": 4,
                            "stage": "self",
                            "dueDate": "2024-06-30",
                        },
                    ],
                }
            ],
            "operations": [
                {
                    "id": "submit-review",
                    "name": "submitReview",
                    "label": "Submit review",
                    "targetEntity": "reviews",
                    "kind": "update",
                    "method": "PUT",
                    "endpoint": "/api/reviews/{employee}",
                    "parameters": [
                        {"name": "employee", "required": True},
                        {"name": "score", "required": True},
                        {"name": "summary", "label": "Summary", "type": "text"},
                        {"name": "dueDate"},
                    ],
                    "ui": {"variant": "dialog"},
                }
            ],
            "patterns": [
                {
                    "id": "review-hub",
                    "name": "Review hub",
                    "type": "collection-hub",
                    "entity": "reviews",
                    "operations": ["submit-review"],
                    "features": {"quickFilters": True, "bulkActions": True},
                },
                {
                    "id": "review-board",
                    "name": "Review board",
                    "type": "workflow-console",
                    "entity": "reviews",
                    "operations": ["submit-review"],
                },
            ],
        }
    }
)

SAMPLE_PAYLOADS: dict[str, RuntimePayload] = {
    "sales": SALES_CONSOLE,
    "inventory": INVENTORY_CONSOLE,
    "hr": HR_PERFORMANCE,
}
