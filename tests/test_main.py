import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from connchk.config import settings
from connchk.main import main
from mock_server import MockHttpServer, TcpListener


class MainEndToEndTests(unittest.TestCase):
    def test_three_targets_report_in_declared_order(self) -> None:
        with tempfile.TemporaryDirectory() as td, MockHttpServer() as server, TcpListener() as listener:
            path = Path(td) / "targets.toml"
            path.write_text(
                "\n".join(
                    [
                        "[[target]]",
                        'kind = "Tcp"',
                        'desc = "local port"',
                        f'addr = "{listener.address}"',
                        "",
                        "[[target]]",
                        'kind = "Http"',
                        'desc = "healthy web"',
                        f'addr = "{server.url("/ok")}"',
                        "",
                        "[[target]]",
                        'kind = "Http"',
                        'desc = "missing page"',
                        f'addr = "{server.url("/missing")}"',
                    ]
                ),
                encoding="utf-8",
            )
            out = io.StringIO()
            with redirect_stdout(out):
                code = main([str(path)])

        self.assertEqual(code, 0)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith("Successfully connected to local port in "))
        self.assertTrue(lines[1].startswith("Successfully connected to healthy web in "))
        self.assertEqual(lines[2], "Failed to connect to missing page with: HTTP 404 Not Found: not here")

    def test_config_path_from_environment_setting(self) -> None:
        with tempfile.TemporaryDirectory() as td, TcpListener() as listener:
            path = Path(td) / "targets.yaml"
            path.write_text(
                f"target:\n  - kind: Tcp\n    desc: from env\n    addr: '{listener.address}'\n",
                encoding="utf-8",
            )
            out = io.StringIO()
            with patch.object(settings, "CONNCHK_CONFIG", str(path)), redirect_stdout(out):
                code = main([])

        self.assertEqual(code, 0)
        self.assertIn("Successfully connected to from env in ", out.getvalue())


class MainErrorTests(unittest.TestCase):
    def test_missing_argument_is_usage_error(self) -> None:
        err = io.StringIO()
        with patch.object(settings, "CONNCHK_CONFIG", None), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main([])

        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("config file is required", err.getvalue())

    def test_missing_file_exits_non_zero_without_checks(self) -> None:
        err = io.StringIO()
        with patch("connchk.main.check_resources") as run, redirect_stderr(err):
            code = main(["/definitely/not/here.toml"])

        self.assertEqual(code, 1)
        run.assert_not_called()
        self.assertIn("connchk: error: Missing config file", err.getvalue())

    def test_malformed_document_exits_non_zero(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "targets.toml"
            path.write_text('[[target]]\nkind = "Udp"\ndesc = "x"\naddr = "h:1"\n', encoding="utf-8")
            err = io.StringIO()
            with redirect_stderr(err):
                code = main([str(path)])

        self.assertEqual(code, 1)
        self.assertIn("Invalid config", err.getvalue())

    def test_failed_checks_do_not_change_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "targets.json"
            path.write_text('{"target": [{"kind": "Tcp", "desc": "bad", "addr": "nowhere"}]}', encoding="utf-8")
            out = io.StringIO()
            with redirect_stdout(out):
                code = main([str(path)])

        self.assertEqual(code, 0)
        self.assertIn("Failed to connect to bad with: invalid socket address", out.getvalue())


if __name__ == "__main__":
    unittest.main()
