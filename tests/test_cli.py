"""
Tests for the command-line interface.
"""

from typer.testing import CliRunner

from cli import app

runner = CliRunner()


class TestRoutesCommand:
    def test_lists_routes_of_included_routers(self):
        result = runner.invoke(app, ["routes"])
        assert result.exit_code == 0
        assert "/api/health" in result.output
        assert "/api/security/roles" in result.output
        assert "/api/attendance/cards" in result.output
        assert "/api/admin/audit" in result.output
