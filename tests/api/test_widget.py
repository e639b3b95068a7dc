"""Tests for the performance test widget."""

from fastapi.testclient import TestClient

from perfkit.api.widget import QUERY_LABEL, TRIGGER_LABEL, WIDGET_TITLE, render_widget


class TestPerformanceWidget:
    """Tests for GET /admin/performance/product/{id}/widget."""

    def test_serves_panel(self, client: TestClient) -> None:
        """Widget has a heading and both buttons."""
        response = client.get("/admin/performance/product/prod_1/widget")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        body = response.text
        assert WIDGET_TITLE in body
        assert TRIGGER_LABEL in body
        assert QUERY_LABEL in body
        assert 'data-endpoint="/admin/performance/product/prod_1"' in body

    def test_buttons_use_both_methods(self) -> None:
        """One button posts, the other gets."""
        html = render_widget("prod_1")
        assert 'data-method="POST">Trigger UpdateProductWorkflow' in html
        assert 'data-method="GET">Perform Query with variants.id' in html

    def test_product_id_is_escaped(self) -> None:
        """Product IDs can't break out of the attribute."""
        html = render_widget('prod"><script>')
        assert 'prod&quot;&gt;&lt;script&gt;' in html
