"""Browser E2E tests for Baluster Studio.

Uses pytest-playwright to test the calculator page: mode switching, inputs,
results and the live preview.

Requires:
- API server running on http://localhost:8000 (python api.py)
- pip install pytest-playwright
- playwright install chromium

The whole module is skipped when either is missing.
"""
import socket
import pytest

pytest.importorskip("pytest_playwright")
from playwright.sync_api import Page, expect


BASE_URL = "http://localhost:8000"


def _server_running(host="localhost", port=8000):
    try:
        with socket.create_connection((host, port), timeout=0.5):
            return True
    except OSError:
        return False


pytestmark = pytest.mark.skipif(not _server_running(), reason=f"No API server at {BASE_URL}")


# ===========================================================================
# FIXTURES
# ===========================================================================

@pytest.fixture(scope="function")
def studio_page(page: Page):
    """Navigate to the calculator and wait for the first layout to render."""
    page.goto(BASE_URL)
    expect(page.locator("#count")).to_have_text("15", timeout=10000)
    return page


@pytest.fixture(scope="function")
def triangle_page(studio_page: Page):
    """Calculator switched to Triangle Stair mode."""
    studio_page.click("#mode-triangle")
    expect(studio_page.locator("#placements tr")).to_have_count(15, timeout=10000)
    return studio_page


# ===========================================================================
# PAGE LOAD
# ===========================================================================

class TestPageLoad:
    def test_page_loads(self, studio_page: Page):
        """Page loads successfully with correct title."""
        assert "Baluster Calculator" in studio_page.title()

    def test_defaults_filled_in(self, studio_page: Page):
        """Inputs start from the default parameters."""
        expect(studio_page.locator("#rail_length")).to_have_value("150")
        expect(studio_page.locator("#baluster_width")).to_have_value("1.2")
        expect(studio_page.locator("#spacing")).to_have_value("9")

    def test_flat_results(self, studio_page: Page):
        expect(studio_page.locator("#used_length")).to_have_text("144.00")
        expect(studio_page.locator("#remaining_length")).to_have_text("6.00")

    def test_flat_preview_balusters(self, studio_page: Page):
        """Preview draws one block per baluster."""
        expect(studio_page.locator("#canvas .baluster")).to_have_count(15)


# ===========================================================================
# INPUTS
# ===========================================================================

class TestInputs:
    def test_rail_length_recalculates(self, studio_page: Page):
        """Editing the rail length updates the count."""
        studio_page.fill("#rail_length", "5")
        expect(studio_page.locator("#count")).to_have_text("1")

    def test_degenerate_sizes_show_zero(self, studio_page: Page):
        studio_page.fill("#baluster_width", "0")
        studio_page.fill("#spacing", "0")
        expect(studio_page.locator("#count")).to_have_text("0")
        expect(studio_page.locator("#canvas .baluster")).to_have_count(0)


# ===========================================================================
# TRIANGLE MODE
# ===========================================================================

class TestTriangleMode:
    def test_triangle_inputs_visible(self, triangle_page: Page):
        expect(triangle_page.locator("#triangle_base")).to_be_visible()
        expect(triangle_page.locator("#rail_length")).not_to_be_visible()

    def test_height_used(self, triangle_page: Page):
        expect(triangle_page.locator("#height_used")).to_have_text("80.00")
        expect(triangle_page.locator("#angle_note")).to_have_text("")

    def test_angle_overrides_height(self, triangle_page: Page):
        """A positive angle replaces the manual height."""
        triangle_page.fill("#triangle_base", "100")
        triangle_page.fill("#triangle_angle_deg", "45")
        expect(triangle_page.locator("#height_used")).to_have_text("100.00")
        expect(triangle_page.locator("#angle_note")).to_contain_text("derived from angle 45.00")

    def test_placement_table(self, triangle_page: Page):
        second = triangle_page.locator("#placements tr").nth(1)
        expect(second).to_contain_text("10.20")
        expect(second).to_contain_text("5.44")

    def test_slope_note(self, triangle_page: Page):
        expect(triangle_page.locator("#preview-note")).to_contain_text("Angle: 28.07°")
