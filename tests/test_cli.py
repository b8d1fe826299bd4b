"""Tests for cli/main.py - command surface and failure policy."""

import httpx
import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.anu_qrng import AnuQrngSource

runner = CliRunner()


@pytest.fixture
def qrng(monkeypatch):
    """Route every QRNG request through a MockTransport.

    Set `qrng.response` to the httpx.Response to return; requests are
    collected in `qrng.requests`.
    """

    class Backend:
        response = httpx.Response(200, json={"data": list(range(10))})
        requests: list = []

        def handler(self, request):
            self.requests.append(request)
            return self.response

    backend = Backend()
    backend.requests = []

    def make_source(settings):
        client = httpx.AsyncClient(transport=httpx.MockTransport(backend.handler))
        return AnuQrngSource(settings, client=client)

    monkeypatch.setattr(cli_main, "AnuQrngSource", make_source)
    monkeypatch.setenv("QRNG_CLI_INTENTION_DELAY_SECONDS", "0")
    return backend


class TestLotto:
    def test_prints_numbers_then_waits_for_enter(self, qrng):
        result = runner.invoke(cli_main.app, ["lotto"], input="\n")

        assert result.exit_code == 0
        assert "Focus on your intention..." in result.output
        assert "Lotto Numbers: [1, 2, 3, 4, 5, 6]" in result.output
        assert "Press Enter to exit..." in result.output
        assert str(qrng.requests[0].url).endswith("?length=10&type=uint8")

    def test_rate_limited_is_not_fatal(self, qrng):
        qrng.response = httpx.Response(200, text='{"success":false}')

        result = runner.invoke(cli_main.app, ["lotto"], input="\n")

        assert result.exit_code == 0
        assert "Error: Rate limit reached or other API issue." in result.output
        assert "Press Enter to exit..." in result.output

    def test_server_error_is_not_fatal(self, qrng):
        qrng.response = httpx.Response(502)

        result = runner.invoke(cli_main.app, ["--no-pause", "lotto"])

        assert result.exit_code == 0
        assert "Error: Server issue, please try again later." in result.output

    def test_client_error_reports_status(self, qrng):
        qrng.response = httpx.Response(403)

        result = runner.invoke(cli_main.app, ["--no-pause", "lotto"])

        assert result.exit_code == 0
        assert "Error: Failed to fetch data. Status: 403 Forbidden" in result.output


class TestRandomArray:
    def test_flags_skip_prompts(self, qrng):
        qrng.response = httpx.Response(200, json={"data": ["00ff", "a1b2"]})

        result = runner.invoke(
            cli_main.app,
            ["--no-pause", "random-array", "-d", "hex16", "-l", "2", "-b", "2"],
        )

        assert result.exit_code == 0
        assert "Random Array: ['00ff', 'a1b2']" in result.output
        assert dict(qrng.requests[0].url.params) == {"length": "2", "type": "hex16", "size": "2"}

    def test_block_size_dropped_for_uint8(self, qrng):
        qrng.response = httpx.Response(200, json={"data": [9, 8, 7]})

        result = runner.invoke(
            cli_main.app,
            ["--no-pause", "random-array", "--data-type", "uint8", "--length", "3", "--block-size", "5"],
        )

        assert result.exit_code == 0
        assert "Random Array: [9, 8, 7]" in result.output
        assert "size" not in qrng.requests[0].url.params

    def test_server_error_is_fatal(self, qrng):
        qrng.response = httpx.Response(503)

        result = runner.invoke(cli_main.app, ["random-array", "-d", "uint16", "-l", "4"], input="\n")

        assert result.exit_code == 1
        assert "503" in result.output
        assert "Press Enter to exit..." not in result.output

    def test_rate_limited_is_not_fatal(self, qrng):
        qrng.response = httpx.Response(200, text='{"success":false}')

        result = runner.invoke(cli_main.app, ["random-array", "-d", "uint8", "-l", "4"], input="\n")

        assert result.exit_code == 0
        assert "Error: Rate limit reached or other API issue." in result.output
        assert "Press Enter to exit..." in result.output

    def test_malformed_body_is_not_fatal(self, qrng):
        qrng.response = httpx.Response(200, text="<html>maintenance</html>")

        result = runner.invoke(cli_main.app, ["--no-pause", "random-array", "-d", "uint16", "-l", "4"])

        assert result.exit_code == 0
        assert "Error: Failed to parse the response." in result.output

    @pytest.mark.parametrize("flag, value", [("--length", "0"), ("--length", "1025"), ("--block-size", "5000")])
    def test_out_of_range_flags_are_rejected(self, qrng, flag, value):
        result = runner.invoke(cli_main.app, ["random-array", "-d", "hex16", flag, value])

        assert result.exit_code == 2
        assert qrng.requests == []

    def test_prompts_fill_missing_values(self, qrng):
        qrng.response = httpx.Response(200, json={"data": ["abcd"]})

        result = runner.invoke(
            cli_main.app,
            ["--no-pause", "random-array"],
            input="3\n0\nabc\n1\n2\n",
        )

        assert result.exit_code == 0
        assert "Invalid input. Enter a number between 1 and 1024." in result.output
        assert dict(qrng.requests[0].url.params) == {"length": "1", "type": "hex16", "size": "2"}

    def test_transport_error_is_fatal(self, qrng):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        qrng.handler = refuse

        result = runner.invoke(cli_main.app, ["--no-pause", "random-array", "-d", "uint8", "-l", "1"])

        assert result.exit_code == 1
        assert "Could not reach the QRNG service" in result.output


class TestInteractive:
    def test_menu_lotto(self, qrng):
        result = runner.invoke(cli_main.app, [], input="1\n\n")

        assert result.exit_code == 0
        assert "Fetching Lotto numbers..." in result.output
        assert "Lotto Numbers: [1, 2, 3, 4, 5, 6]" in result.output

    def test_menu_random_array(self, qrng):
        qrng.response = httpx.Response(200, json={"data": [1, 2]})

        result = runner.invoke(cli_main.app, ["--no-pause"], input="Random Array\nuint8\n2\n")

        assert result.exit_code == 0
        assert "Fetching Random Array..." in result.output
        assert "Random Array: [1, 2]" in result.output

    def test_cancelled_menu_exits_cleanly(self, qrng):
        result = runner.invoke(cli_main.app, [], input="")

        assert result.exit_code == 1
        assert "Input cancelled." in result.output
        assert qrng.requests == []


def test_pause_can_be_disabled_from_env(qrng, monkeypatch):
    monkeypatch.setenv("QRNG_CLI_PAUSE_ON_EXIT", "false")

    result = runner.invoke(cli_main.app, ["lotto"])

    assert result.exit_code == 0
    assert "Press Enter to exit..." not in result.output


class TestDoctor:
    def _patch(self, monkeypatch):
        import cli.doctor as doctor

        monkeypatch.setattr(doctor, "AnuQrngSource", cli_main.AnuQrngSource)

    def test_reports_connectivity(self, qrng, monkeypatch):
        self._patch(monkeypatch)
        qrng.response = httpx.Response(200, json={"data": [42]})

        result = runner.invoke(cli_main.app, ["doctor"])

        assert result.exit_code == 0
        assert "QRNG connectivity" in result.output
        assert "HTTP 200 OK" in result.output
        assert dict(qrng.requests[0].url.params) == {"length": "1", "type": "uint8"}

    def test_reports_failure(self, qrng, monkeypatch):
        self._patch(monkeypatch)
        qrng.response = httpx.Response(200, text='{"success":false}')

        result = runner.invoke(cli_main.app, ["doctor"])

        assert result.exit_code == 0
        assert "FAIL" in result.output
        assert "rate-limits" in result.output
