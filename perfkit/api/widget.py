"""Performance test admin widget.

Serves a small panel for the product details page with two buttons:
one triggers the update product workflow, the other runs the product
query with variant ids. Both call the performance endpoints.
"""

import html
from string import Template

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from perfkit.api.performance import ProductId, router as performance_router

router = APIRouter(prefix=performance_router.prefix, tags=["Performance"])

WIDGET_TITLE = "Performance Test Widget"
TRIGGER_LABEL = "Trigger UpdateProductWorkflow"
QUERY_LABEL = "Perform Query with variants.id"

# Admin zone the widget is mounted in on the product details page
WIDGET_ZONE = "product.details.side.before"

WIDGET_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>$title</title>
  <style>
    .container { display: flex; flex-direction: column; gap: 0.5rem; max-width: 20rem; }
    .status { font-family: monospace; white-space: pre-wrap; }
  </style>
</head>
<body>
  <div class="container" id="performance-widget"
       data-zone="$zone" data-endpoint="$endpoint">
    <h2>$title</h2>
    <button type="button" data-method="POST">$trigger_label</button>
    <button type="button" data-method="GET">$query_label</button>
    <div class="status" id="performance-status"></div>
  </div>
  <script>
    (function () {
      var widget = document.getElementById("performance-widget");
      var output = document.getElementById("performance-status");
      widget.querySelectorAll("button").forEach(function (button) {
        button.addEventListener("click", function () {
          var method = button.getAttribute("data-method");
          var started = performance.now();
          fetch(widget.getAttribute("data-endpoint"), { method: method })
            .then(function (response) {
              var elapsed = Math.round(performance.now() - started);
              output.textContent = method + " " + response.status + " in " + elapsed + " ms";
            })
            .catch(function (error) {
              output.textContent = method + " failed: " + error;
            });
        });
      });
    })();
  </script>
</body>
</html>
"""
)


def render_widget(product_id: str) -> str:
    """Render the widget panel for a product.

    Args:
        product_id: Product the buttons act on.

    Returns:
        HTML document.
    """
    endpoint = f"{performance_router.prefix}/{product_id}"
    return WIDGET_TEMPLATE.substitute(
        title=WIDGET_TITLE,
        zone=WIDGET_ZONE,
        endpoint=html.escape(endpoint, quote=True),
        trigger_label=TRIGGER_LABEL,
        query_label=QUERY_LABEL,
    )


@router.get(
    "/{product_id}/widget",
    response_class=HTMLResponse,
    summary="Performance test widget",
    description="HTML panel with buttons calling the performance endpoints.",
)
async def performance_widget(product_id: ProductId) -> HTMLResponse:
    """Serve the performance test widget for a product."""
    return HTMLResponse(render_widget(product_id))
